"""Search engine configuration variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field

from mazebeam.config.base import StrictBaseModel
from mazebeam.search.clock import CheckCountKeeper, TimeKeeper

if TYPE_CHECKING:
    from mazebeam.search.beam import BeamSearch
    from mazebeam.search.chokudai import ChokudaiSearch
    from mazebeam.search.clock import ClockFactory

BudgetKind = Literal["time", "checks"]


def clock_factory_for(budget: BudgetKind) -> ClockFactory:
    """Map a budget kind to its clock factory.

    ``time`` reads the wall clock in milliseconds; ``checks`` counts clock
    queries and gives reproducible runs regardless of machine speed.
    """
    if budget == "checks":
        return CheckCountKeeper
    return TimeKeeper


class BeamSearchConfig(StrictBaseModel):
    """Config for time-bounded beam search."""

    variant: Literal["beam"] = "beam"
    beam_width: int = Field(default=5, ge=0)
    time_threshold_ms: int | None = Field(default=10, ge=0)
    budget: BudgetKind = "time"

    def build(self) -> BeamSearch:
        """Construct a BeamSearch from this config."""
        from mazebeam.search.beam import BeamSearch

        return BeamSearch(
            beam_width=self.beam_width,
            time_threshold_ms=self.time_threshold_ms,
            clock_factory=clock_factory_for(self.budget),
        )


class ChokudaiSearchConfig(StrictBaseModel):
    """Config for time-bounded chokudai search."""

    variant: Literal["chokudai"] = "chokudai"
    beam_width: int = Field(default=1, ge=0)
    beam_depth: int = Field(default=100, ge=0)
    time_threshold_ms: int | None = Field(default=10, ge=0)
    budget: BudgetKind = "time"

    def build(self) -> ChokudaiSearch:
        """Construct a ChokudaiSearch from this config."""
        from mazebeam.search.chokudai import ChokudaiSearch

        return ChokudaiSearch(
            beam_width=self.beam_width,
            beam_depth=self.beam_depth,
            time_threshold_ms=self.time_threshold_ms,
            clock_factory=clock_factory_for(self.budget),
        )


SearchConfig = Annotated[
    BeamSearchConfig | ChokudaiSearchConfig,
    Field(discriminator="variant"),
]
