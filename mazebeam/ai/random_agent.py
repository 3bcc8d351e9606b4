"""Random agent for maze games."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from mazebeam.ai.base import Agent

if TYPE_CHECKING:
    from mazebeam.game.maze import Direction, MazeState


class RandomAgent(Agent):
    """Agent that selects uniformly among legal actions.

    Args:
        seed: Seed for the agent's own generator; ``reset`` reseeds it.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def reset(self) -> None:
        self._rng = np.random.default_rng(self._seed)

    def get_move(self, state: MazeState) -> Direction:
        actions = state.legal_actions()
        return actions[int(self._rng.integers(len(actions)))]

    @property
    def name(self) -> str:
        return "Random"
