"""Evaluation utilities for maze agents."""

from mazebeam.eval.game import GameResult, play_game
from mazebeam.eval.runner import EvalConfig, EvalResult, evaluate, run_eval

__all__ = [
    "EvalConfig",
    "EvalResult",
    "GameResult",
    "evaluate",
    "play_game",
    "run_eval",
]
