"""Single-player point-collection maze.

Every turn the character steps one cell RIGHT, LEFT, DOWN or UP. Stepping on
a cell collects its points (0-9) and clears the cell. The game ends after
``end_turn`` turns; the goal is the highest score at that point.

``MazeState`` implements :class:`mazebeam.search.state.SearchableState`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np


class Direction(IntEnum):
    """Movement actions. Values index into ``DX``/``DY``."""

    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3


# y grows downward: DOWN is +1 row.
DX = (1, -1, 0, 0)
DY = (0, 0, 1, -1)

MAX_POINT = 9


@dataclass(frozen=True, slots=True)
class Coord:
    y: int
    x: int


class MazeState:
    """Maze position, remaining points and score.

    Attributes:
        points: Int grid [height, width] of points still on the floor.
        character: Current position.
        end_turn: Turn at which the game ends.
        turn: Turns played so far.
        game_score: Points actually collected in the game.
        evaluated_score: Ranking score cached by :meth:`evaluate`.
        first_action: Search tag, see ``SearchableState``.
    """

    __slots__ = (
        "points",
        "character",
        "end_turn",
        "turn",
        "game_score",
        "evaluated_score",
        "first_action",
    )

    def __init__(
        self,
        points: np.ndarray,
        character: Coord,
        end_turn: int,
        turn: int = 0,
        game_score: int = 0,
    ) -> None:
        if points.ndim != 2:
            raise ValueError(f"points must be a 2-D grid, got shape {points.shape}")
        height, width = points.shape
        if not (0 <= character.y < height and 0 <= character.x < width):
            raise ValueError(f"character {character} is outside a {height}x{width} maze")
        if end_turn < 0:
            raise ValueError(f"end_turn must be >= 0, got {end_turn}")
        if height * width < 2 and end_turn > 0:
            raise ValueError(f"a {height}x{width} maze has no moves but end_turn is {end_turn}")

        self.points = points
        self.character = character
        self.end_turn = end_turn
        self.turn = turn
        self.game_score = game_score
        self.evaluated_score = 0
        self.first_action: Direction | None = None

    @classmethod
    def generate(
        cls,
        height: int,
        width: int,
        end_turn: int,
        rng: np.random.Generator | int | None = None,
    ) -> MazeState:
        """Create a random maze.

        The character starts on a uniformly drawn cell, every other cell
        gets 0-9 points.

        Args:
            height: Number of rows.
            width: Number of columns.
            end_turn: Turn at which the game ends.
            rng: Generator to draw from, or a seed for a fresh one.
        """
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)

        character = Coord(int(rng.integers(0, height)), int(rng.integers(0, width)))
        points = rng.integers(0, MAX_POINT + 1, size=(height, width), dtype=np.int64)
        points[character.y, character.x] = 0
        return cls(points, character, end_turn)

    @property
    def height(self) -> int:
        return self.points.shape[0]

    @property
    def width(self) -> int:
        return self.points.shape[1]

    # --- SearchableState ---

    def is_terminal(self) -> bool:
        return self.turn >= self.end_turn

    def evaluate(self) -> int:
        self.evaluated_score = self.game_score
        return self.evaluated_score

    def legal_actions(self) -> list[Direction]:
        actions = []
        for action in Direction:
            ty = self.character.y + DY[action]
            tx = self.character.x + DX[action]
            if 0 <= ty < self.height and 0 <= tx < self.width:
                actions.append(action)
        return actions

    def apply(self, action: Direction) -> MazeState:
        """Return a copy advanced by ``action``; ``self`` is unchanged."""
        child = self.copy()
        child.advance(action)
        return child

    # --- Game mechanics ---

    def advance(self, action: Direction | int) -> None:
        """Play ``action`` in place.

        Raises:
            ValueError: The move leaves the board.
        """
        action = Direction(action)
        ty = self.character.y + DY[action]
        tx = self.character.x + DX[action]
        if not (0 <= ty < self.height and 0 <= tx < self.width):
            raise ValueError(f"illegal action {action.name} from {self.character}")

        self.character = Coord(ty, tx)
        point = int(self.points[ty, tx])
        if point > 0:
            self.game_score += point
            self.points[ty, tx] = 0
        self.turn += 1

    def copy(self) -> MazeState:
        """Independent copy; the point grid is not shared."""
        clone = MazeState(
            self.points.copy(),
            self.character,
            self.end_turn,
            turn=self.turn,
            game_score=self.game_score,
        )
        clone.evaluated_score = self.evaluated_score
        clone.first_action = self.first_action
        return clone

    def to_string(self) -> str:
        """Board dump: ``@`` character, digits for points, ``.`` for empty cells."""
        lines = [f"turn:\t{self.turn}", f"score:\t{self.game_score}"]
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if self.character.y == y and self.character.x == x:
                    row.append("@")
                elif self.points[y, x] > 0:
                    row.append(str(int(self.points[y, x])))
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"MazeState({self.height}x{self.width}, character={self.character}, "
            f"turn={self.turn}/{self.end_turn}, score={self.game_score})"
        )
