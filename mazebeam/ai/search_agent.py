"""Agent that picks each move with a beam or chokudai search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazebeam.ai.base import Agent
from mazebeam.search.config import SearchConfig  # noqa: TC001

if TYPE_CHECKING:
    from mazebeam.game.maze import Direction, MazeState
    from mazebeam.search.result import SearchResult


class SearchAgent(Agent):
    """Agent that runs a fresh search every turn.

    Nothing is reused between turns: each call builds its own frontiers and
    clock.

    Attributes:
        config: Search configuration (variant, width, depth, budget).
        last_result: Diagnostics of the most recent search, or None.
    """

    def __init__(self, config: SearchConfig) -> None:
        self.config = config
        self._engine = config.build()
        self.last_result: SearchResult | None = None

    def reset(self) -> None:
        self.last_result = None

    def get_move(self, state: MazeState) -> Direction:
        """Select an action by searching from a copy of ``state``."""
        root = state.copy()
        root.first_action = None
        self.last_result = self._engine.search(root)
        return self.last_result.action

    @property
    def name(self) -> str:
        budget = f"{self.config.time_threshold_ms}{'ms' if self.config.budget == 'time' else ''}"
        if self.config.variant == "beam":
            return f"Beam(w={self.config.beam_width},{budget})"
        return f"Chokudai(w={self.config.beam_width},d={self.config.beam_depth},{budget})"
