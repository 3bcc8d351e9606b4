"""Maze configuration.

Example YAML:
    height: 30
    width: 30
    end_turn: 100
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, model_validator

from mazebeam.config.base import StrictBaseModel

if TYPE_CHECKING:
    import numpy as np

    from mazebeam.game.maze import MazeState


class MazeConfig(StrictBaseModel):
    """Board size and game length for generated mazes."""

    height: int = Field(default=30, gt=0, le=200)
    width: int = Field(default=30, gt=0, le=200)
    end_turn: int = Field(default=100, gt=0)

    @model_validator(mode="after")
    def check_board_has_moves(self) -> Self:
        """A single-cell board leaves the character with nowhere to move."""
        if self.height * self.width < 2:
            raise ValueError(f"maze needs at least 2 cells, got {self.height}x{self.width}")
        return self

    def build(self, seed: int | np.random.Generator | None = None) -> MazeState:
        """Generate a maze from this config.

        Args:
            seed: Seed or generator for the layout; None draws fresh entropy.
        """
        from mazebeam.game.maze import MazeState

        return MazeState.generate(self.height, self.width, self.end_turn, rng=seed)
