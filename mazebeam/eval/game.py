"""Single game execution for maze agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazebeam.ai.base import Agent
    from mazebeam.game.maze import Direction, MazeState

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a single game.

    Attributes:
        score: Final game score.
        turns: Number of turns played.
        actions: Actions in the order they were played.
    """

    score: int
    turns: int
    actions: list[Direction] = field(default_factory=list)


def play_game(agent: Agent, state: MazeState) -> GameResult:
    """Play ``state`` to the end with ``agent``.

    The agent only ever sees the live state; ``state`` is advanced in place.

    Raises:
        ValueError: The agent returned an action that is not legal.
    """
    agent.reset()
    actions: list[Direction] = []

    while not state.is_terminal():
        action = agent.get_move(state)
        state.advance(action)
        actions.append(action)
        logger.debug(f"turn {state.turn}: {action.name} score={state.game_score}")

    return GameResult(score=state.game_score, turns=state.turn, actions=actions)
