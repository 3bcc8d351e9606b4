"""Reference game for the search engines."""

from mazebeam.game.maze import Coord, Direction, MazeState

__all__ = ["Coord", "Direction", "MazeState"]
