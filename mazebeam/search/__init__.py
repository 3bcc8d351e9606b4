"""Time-bounded tree search for single-agent turn-based games."""

from mazebeam.search.beam import BeamSearch, beam_search
from mazebeam.search.chokudai import ChokudaiSearch, chokudai_search
from mazebeam.search.clock import CheckCountKeeper, Clock, ClockFactory, TimeKeeper
from mazebeam.search.config import BeamSearchConfig, ChokudaiSearchConfig, SearchConfig
from mazebeam.search.errors import NoLegalActionError, SearchError
from mazebeam.search.frontier import Frontier
from mazebeam.search.result import SearchResult
from mazebeam.search.state import SearchableState

__all__ = [
    "BeamSearch",
    "BeamSearchConfig",
    "CheckCountKeeper",
    "ChokudaiSearch",
    "ChokudaiSearchConfig",
    "Clock",
    "ClockFactory",
    "Frontier",
    "NoLegalActionError",
    "SearchConfig",
    "SearchError",
    "SearchResult",
    "SearchableState",
    "TimeKeeper",
    "beam_search",
    "chokudai_search",
]
