"""Base class for maze agents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazebeam.game.maze import Direction, MazeState


class Agent(ABC):
    """Base class for maze agents.

    Agents receive the current game state and return one of its legal
    actions. They must not modify the state they are given.
    """

    @abstractmethod
    def get_move(self, state: MazeState) -> Direction:
        """Select an action for the current turn.

        Args:
            state: Current game state. DO NOT modify this.

        Returns:
            A member of ``state.legal_actions()``.
        """
        ...

    def reset(self) -> None:
        """Reset agent state for a new game.

        Override this if your agent keeps state between turns.
        Default implementation does nothing.
        """
        return  # noqa: B027

    @property
    def name(self) -> str:
        """Human-readable name for this agent."""
        return self.__class__.__name__
