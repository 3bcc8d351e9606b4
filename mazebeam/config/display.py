"""Readable one-screen summaries of configs for CLI headers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import BaseModel


def format_config_summary(*sections: tuple[str, BaseModel | None]) -> str:
    """Format (label, config) pairs into an indented multi-line summary.

    ``height`` + ``width`` fold into the header as ``HxW`` and ``variant``
    is appended to the header; remaining fields go on one content line.
    Sections whose config is None are skipped.

    Example output:
        Game: 30x30
          end_turn: 100
        Agent: chokudai
          beam_width: 1, beam_depth: 100, time_threshold_ms: 10, budget: time
    """
    lines: list[str] = []

    for label, config in sections:
        if config is None:
            continue

        data = config.model_dump()
        header_parts: list[str] = []
        skip_keys: set[str] = set()

        if "height" in data and "width" in data:
            header_parts.append(f"{data['height']}x{data['width']}")
            skip_keys.update(("height", "width"))

        if "variant" in data:
            header_parts.append(str(data["variant"]))
            skip_keys.add("variant")

        header = f"{label}:"
        if header_parts:
            header += " " + " ".join(header_parts)
        lines.append(header)

        parts = [
            f"{key}: {_format_value(value)}"
            for key, value in data.items()
            if key not in skip_keys and value is not None
        ]
        if parts:
            lines.append(f"  {', '.join(parts)}")

    return "\n".join(lines)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value == int(value) and abs(value) < 1e10:
        return f"{value:.1f}"
    return str(value)
