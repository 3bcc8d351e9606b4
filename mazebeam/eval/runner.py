"""Multi-game evaluation runner."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import Field

from mazebeam.ai.config import AgentConfig  # noqa: TC001
from mazebeam.config.base import StrictBaseModel
from mazebeam.config.game import MazeConfig
from mazebeam.eval.game import GameResult, play_game

if TYPE_CHECKING:
    from mazebeam.ai.base import Agent

logger = logging.getLogger(__name__)


class EvalConfig(StrictBaseModel):
    """Evaluation run: which agent, on which mazes, how many games.

    Example YAML:
        game:
          height: 30
          width: 30
          end_turn: 100
        agent:
          variant: beam
          beam_width: 5
          time_threshold_ms: 10
        games: 100
        seed: 0
    """

    game: MazeConfig = Field(default_factory=MazeConfig)
    agent: AgentConfig
    games: int = Field(default=100, gt=0)
    seed: int = 0


@dataclass
class EvalResult:
    """Aggregated results from multiple games.

    Attributes:
        n_games: Total games played.
        avg_score: Mean final score.
        min_score: Worst final score.
        max_score: Best final score.
        elapsed_s: Wall-clock seconds spent playing.
        games: Individual game results.
        agent_name: Name of the agent that played.
    """

    n_games: int
    avg_score: float
    min_score: int
    max_score: int
    elapsed_s: float
    games: list[GameResult]
    agent_name: str = "Agent"

    def summary(self, agent_name: str | None = None) -> str:
        """Human-readable summary."""
        lines = [
            f"Evaluation: {agent_name or self.agent_name}",
            f"Games: {self.n_games}",
            f"Score: {self.avg_score:.2f} (min {self.min_score}, max {self.max_score})",
            f"Elapsed: {self.elapsed_s:.2f}s",
        ]
        return "\n".join(lines)


def evaluate(
    agent: Agent,
    game_config: MazeConfig,
    n_games: int = 100,
    *,
    seed: int = 0,
) -> EvalResult:
    """Play ``n_games`` fresh mazes with ``agent`` and aggregate the scores.

    Game ``i`` is generated with seed ``seed + i`` so runs are reproducible
    up to the agent's own time budget.

    Args:
        agent: Agent to evaluate.
        game_config: Maze size and length.
        n_games: Number of games to play.
        seed: Seed of the first game.

    Returns:
        EvalResult with aggregated statistics.
    """
    if n_games <= 0:
        raise ValueError(f"n_games must be positive, got {n_games}")

    games: list[GameResult] = []
    start = time.perf_counter()

    for i in range(n_games):
        result = play_game(agent, game_config.build(seed + i))
        games.append(result)
        logger.info(
            f"Game {i + 1}/{n_games}: {agent.name} scored {result.score} "
            f"in {result.turns} turns"
        )

    scores = [g.score for g in games]
    return EvalResult(
        n_games=n_games,
        avg_score=sum(scores) / n_games,
        min_score=min(scores),
        max_score=max(scores),
        elapsed_s=time.perf_counter() - start,
        games=games,
        agent_name=agent.name,
    )


def run_eval(config: EvalConfig) -> EvalResult:
    """Build the configured agent and evaluate it."""
    agent = config.agent.build()
    return evaluate(agent, config.game, config.games, seed=config.seed)
