"""YAML preset loading: Hydra composes, Pydantic validates.

Usage:
    config = load_config(EvalConfig, "configs/eval", "beam")
    config = load_config(EvalConfig, "configs/eval", "beam", overrides=["games=5"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def split_config_path(config_arg: str | Path) -> tuple[str, str]:
    """Split a CLI config argument into (config_dir, config_name).

    ``configs/eval/beam.yaml`` → ``("configs/eval", "beam")``;
    a bare ``beam`` resolves against the current directory.
    """
    config_path = Path(config_arg)
    config_dir = str(config_path.parent) if config_path.parent.name else "."
    return config_dir, config_path.stem


def _compose(
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None,
) -> dict[str, Any]:
    config_dir = Path(config_path).resolve()

    # Hydra keeps global state; clear it on both sides so repeated loads work.
    # Not thread-safe.
    GlobalHydra.instance().clear()
    try:
        initialize_config_dir(config_dir=str(config_dir), version_base=None)
        cfg: DictConfig = compose(config_name=config_name, overrides=overrides or [])
        return OmegaConf.to_container(cfg, resolve=True)  # type: ignore[return-value]
    finally:
        GlobalHydra.instance().clear()


def load_config(
    model_class: type[T],
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> T:
    """Load a YAML preset and validate it against ``model_class``.

    Args:
        model_class: Pydantic model to validate against.
        config_path: Directory holding the presets (relative to cwd or absolute).
        config_name: Preset name without ``.yaml``.
        overrides: Hydra-style overrides, e.g. ``["agent.beam_width=8"]``.

    Returns:
        Validated config instance.

    Raises:
        pydantic.ValidationError: The composed config does not match the model.
    """
    return model_class.model_validate(_compose(config_path, config_name, overrides))


def load_raw_config(
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> dict[str, Any]:
    """Load a YAML preset as a plain dict, without validation."""
    return _compose(config_path, config_name, overrides)
