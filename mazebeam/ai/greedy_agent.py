"""Greedy agent: best evaluated score one move ahead."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazebeam.ai.base import Agent

if TYPE_CHECKING:
    from mazebeam.game.maze import Direction, MazeState


class GreedyAgent(Agent):
    """Agent that plays the move whose successor evaluates highest.

    Tie-breaking: the first action in ``legal_actions()`` order wins, which
    matches the search engines' preference for earlier-generated children.
    """

    def get_move(self, state: MazeState) -> Direction:
        best_action: Direction | None = None
        best_score = float("-inf")

        for action in state.legal_actions():
            score = state.apply(action).evaluate()
            if score > best_score:
                best_score = score
                best_action = action

        if best_action is None:
            raise ValueError("no legal actions available")
        return best_action

    @property
    def name(self) -> str:
        return "Greedy"
