"""Search result shared by the beam and chokudai engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SearchResult:
    """Outcome of one search invocation.

    Fields:
        action: Action to play from the root.
        score: Evaluated score of the state the action was read from
            (None when the action came from the root fallback).
        depth: Deepest level that received states during the search.
        expansions: Number of states popped and expanded.
        timed_out: True when the budget expired before the search finished.
    """

    action: Any
    score: float | None
    depth: int
    expansions: int
    timed_out: bool
