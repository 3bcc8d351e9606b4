"""Agents for the maze game."""

from mazebeam.ai.base import Agent
from mazebeam.ai.config import (
    AgentConfig,
    AgentConfigBase,
    BeamAgentConfig,
    ChokudaiAgentConfig,
    GreedyAgentConfig,
    RandomAgentConfig,
)
from mazebeam.ai.greedy_agent import GreedyAgent
from mazebeam.ai.random_agent import RandomAgent
from mazebeam.ai.search_agent import SearchAgent

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentConfigBase",
    "BeamAgentConfig",
    "ChokudaiAgentConfig",
    "GreedyAgent",
    "GreedyAgentConfig",
    "RandomAgent",
    "RandomAgentConfig",
    "SearchAgent",
]
