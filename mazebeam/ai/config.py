"""Agent configuration with discriminated union pattern.

Each config type inherits from AgentConfigBase and implements `build()`.
Pydantic dispatches on the `variant` field.

Example YAML:
    agent:
      variant: chokudai
      beam_width: 1
      beam_depth: 100
      time_threshold_ms: 10
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field

from mazebeam.config.base import StrictBaseModel
from mazebeam.search.config import BeamSearchConfig, BudgetKind, ChokudaiSearchConfig

if TYPE_CHECKING:
    from mazebeam.ai.base import Agent


class AgentConfigBase(StrictBaseModel):
    """Base class for agent configurations."""

    @abstractmethod
    def build(self) -> Agent:
        """Build the agent described by this configuration."""
        ...


class RandomAgentConfig(AgentConfigBase):
    """Configuration for random agent."""

    variant: Literal["random"] = "random"
    seed: int | None = None

    def build(self) -> Agent:
        from mazebeam.ai.random_agent import RandomAgent

        return RandomAgent(seed=self.seed)


class GreedyAgentConfig(AgentConfigBase):
    """Configuration for greedy one-step agent."""

    variant: Literal["greedy"] = "greedy"

    def build(self) -> Agent:
        from mazebeam.ai.greedy_agent import GreedyAgent

        return GreedyAgent()


class BeamAgentConfig(AgentConfigBase):
    """Configuration for an agent driven by beam search."""

    variant: Literal["beam"] = "beam"
    beam_width: int = Field(default=5, ge=0)
    time_threshold_ms: int | None = Field(default=10, ge=0)
    budget: BudgetKind = "time"

    def build(self) -> Agent:
        from mazebeam.ai.search_agent import SearchAgent

        return SearchAgent(BeamSearchConfig.model_validate(self.model_dump()))


class ChokudaiAgentConfig(AgentConfigBase):
    """Configuration for an agent driven by chokudai search.

    ``beam_depth`` usually equals the game length so that every round can
    reach the end of the game.
    """

    variant: Literal["chokudai"] = "chokudai"
    beam_width: int = Field(default=1, ge=0)
    beam_depth: int = Field(default=100, ge=0)
    time_threshold_ms: int | None = Field(default=10, ge=0)
    budget: BudgetKind = "time"

    def build(self) -> Agent:
        from mazebeam.ai.search_agent import SearchAgent

        return SearchAgent(ChokudaiSearchConfig.model_validate(self.model_dump()))


AgentConfig = Annotated[
    RandomAgentConfig | GreedyAgentConfig | BeamAgentConfig | ChokudaiAgentConfig,
    Field(discriminator="variant"),
]
