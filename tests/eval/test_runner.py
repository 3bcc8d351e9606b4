"""Tests for single games and multi-game evaluation."""

from __future__ import annotations

import numpy as np
import pytest

from mazebeam.ai.base import Agent
from mazebeam.ai.config import BeamAgentConfig, GreedyAgentConfig
from mazebeam.ai.greedy_agent import GreedyAgent
from mazebeam.ai.random_agent import RandomAgent
from mazebeam.config.game import MazeConfig
from mazebeam.eval.game import play_game
from mazebeam.eval.runner import EvalConfig, evaluate, run_eval
from mazebeam.game.maze import Coord, Direction, MazeState


class ScriptedAgent(Agent):
    """Plays a fixed list of moves and counts resets."""

    def __init__(self, moves: list[Direction]) -> None:
        self.moves = moves
        self.resets = 0
        self._i = 0

    def reset(self) -> None:
        self.resets += 1
        self._i = 0

    def get_move(self, state: MazeState) -> Direction:
        move = self.moves[self._i]
        self._i += 1
        return move


@pytest.fixture
def trap_maze() -> MazeState:
    points = np.array([[0, 2, 0, 0], [1, 0, 0, 0], [9, 9, 9, 0]])
    return MazeState(points, Coord(0, 0), end_turn=4)


class TestPlayGame:
    """One game, start to end."""

    def test_scripted_game(self, trap_maze: MazeState) -> None:
        moves = [Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.RIGHT]
        agent = ScriptedAgent(moves)

        result = play_game(agent, trap_maze)

        assert result.score == 28
        assert result.turns == 4
        assert result.actions == moves
        assert agent.resets == 1

    def test_search_beats_greedy_on_trap(self, trap_maze: MazeState) -> None:
        greedy = play_game(GreedyAgent(), trap_maze.copy())
        beam = play_game(BeamAgentConfig(time_threshold_ms=None).build(), trap_maze.copy())

        assert greedy.score == 2
        assert beam.score == 28

    def test_illegal_agent_move_raises(self, trap_maze: MazeState) -> None:
        with pytest.raises(ValueError):
            play_game(ScriptedAgent([Direction.UP]), trap_maze)


class TestEvaluate:
    """Aggregated scores over several games."""

    def test_aggregates_scores(self) -> None:
        result = evaluate(RandomAgent(seed=0), MazeConfig(height=4, width=4, end_turn=6), 5)

        scores = [g.score for g in result.games]
        assert result.n_games == 5
        assert result.avg_score == pytest.approx(sum(scores) / 5)
        assert result.min_score == min(scores)
        assert result.max_score == max(scores)
        assert all(g.turns == 6 for g in result.games)

    def test_games_are_seeded(self) -> None:
        config = MazeConfig(height=5, width=5, end_turn=8)
        first = evaluate(GreedyAgent(), config, 3, seed=10)
        second = evaluate(GreedyAgent(), config, 3, seed=10)
        assert [g.score for g in first.games] == [g.score for g in second.games]

    def test_rejects_zero_games(self) -> None:
        with pytest.raises(ValueError, match="n_games"):
            evaluate(GreedyAgent(), MazeConfig(), 0)

    def test_summary(self) -> None:
        result = evaluate(GreedyAgent(), MazeConfig(height=3, width=3, end_turn=2), 2)
        summary = result.summary("Greedy")

        assert "Evaluation: Greedy" in summary
        assert "Games: 2" in summary

    def test_run_eval_from_config(self) -> None:
        config = EvalConfig(
            game=MazeConfig(height=3, width=4, end_turn=4),
            agent=GreedyAgentConfig(),
            games=3,
            seed=1,
        )
        result = run_eval(config)
        assert result.n_games == 3
        assert result.summary().startswith("Evaluation: Greedy")

    def test_search_agent_scores_at_least_greedy(self) -> None:
        """With an unbounded budget, full-width beam search is never beaten by greedy."""
        config = MazeConfig(height=3, width=4, end_turn=4)
        greedy = evaluate(GreedyAgent(), config, 5)
        beam = evaluate(BeamAgentConfig(beam_width=256, time_threshold_ms=None).build(), config, 5)

        for g, b in zip(greedy.games, beam.games, strict=True):
            assert b.score >= g.score
