"""Configuration module with strict validation and Hydra integration.

This module provides:
- StrictBaseModel: Base class for all configs with extra='forbid'
- MazeConfig: Board size and game length
- load_config(): Hydra-based preset loading with Pydantic validation
"""

from __future__ import annotations

from mazebeam.config.base import StrictBaseModel
from mazebeam.config.display import format_config_summary
from mazebeam.config.game import MazeConfig
from mazebeam.config.loader import load_config, load_raw_config, split_config_path

__all__ = [
    "MazeConfig",
    "StrictBaseModel",
    "format_config_summary",
    "load_config",
    "load_raw_config",
    "split_config_path",
]
