"""Base configuration model shared by every mazebeam config."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Pydantic model that rejects unknown keys.

    A misspelled key in a YAML preset (``beam_widht: 5``) raises
    ``ValidationError`` instead of silently falling back to the default.

    Example:
        class EngineConfig(StrictBaseModel):
            beam_width: int

        EngineConfig(beam_width=5)   # OK
        EngineConfig(beam_widht=5)   # ValidationError: extra field 'beam_widht'
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )
