"""Shared fixtures for search tests."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from mazebeam.game.maze import Coord, MazeState


def _exhaustive_best(state: MazeState) -> int:
    if state.is_terminal():
        return state.game_score
    return max(_exhaustive_best(state.apply(action)) for action in state.legal_actions())


@pytest.fixture
def exhaustive_best() -> Callable[[MazeState], int]:
    """Brute-force best final score reachable from a state."""
    return _exhaustive_best


@pytest.fixture
def trap_maze() -> MazeState:
    """3x4 maze where the greedy first step (RIGHT, +2) is a trap.

    @ 2 . .
    1 . . .
    9 9 9 .

    Optimal line is DOWN, DOWN, RIGHT, RIGHT for 28 points.
    """
    points = np.array(
        [
            [0, 2, 0, 0],
            [1, 0, 0, 0],
            [9, 9, 9, 0],
        ]
    )
    return MazeState(points, Coord(0, 0), end_turn=4)


class StuckState:
    """Non-terminal state with no legal moves; mazes refuse to build one."""

    first_action = None

    def legal_actions(self) -> list[int]:
        return []

    def apply(self, action: int) -> StuckState:
        raise AssertionError("no action can be applied")

    def evaluate(self) -> int:
        return 0

    def is_terminal(self) -> bool:
        return False


@pytest.fixture
def stuck_state() -> StuckState:
    """Search root that offers no move."""
    return StuckState()
