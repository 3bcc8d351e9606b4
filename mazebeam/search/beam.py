"""Time-bounded beam search.

One frontier is carried from depth to depth. Each round pops up to
``beam_width`` of the best states, expands every legal action and ranks the
children in a fresh frontier. The clock is read before every single
expansion, so a round with a large branching factor cannot overrun the
budget by more than one node.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic

from mazebeam.search.clock import TimeKeeper
from mazebeam.search.frontier import Frontier
from mazebeam.search.result import SearchResult
from mazebeam.search.state import ActionT, fallback_action

if TYPE_CHECKING:
    from mazebeam.search.clock import ClockFactory
    from mazebeam.search.state import SearchableState

logger = logging.getLogger(__name__)


class BeamSearch(Generic[ActionT]):
    """Width-limited best-first search under a time budget.

    Attributes:
        beam_width: Maximum number of states expanded per depth.
        time_threshold_ms: Budget handed to the clock factory (None = no limit).
        clock_factory: Builds a fresh clock for every search call.
    """

    def __init__(
        self,
        beam_width: int,
        time_threshold_ms: int | None,
        clock_factory: ClockFactory = TimeKeeper,
    ) -> None:
        if beam_width < 0:
            raise ValueError(f"beam_width must be >= 0, got {beam_width}")
        self.beam_width = beam_width
        self.time_threshold_ms = time_threshold_ms
        self.clock_factory = clock_factory

    def search(self, root: SearchableState[ActionT]) -> SearchResult:
        """Run beam search from ``root`` and return the chosen first action.

        The root is never mutated. If the budget expires before the first
        round completes, the root's first legal action is returned.

        Raises:
            NoLegalActionError: A fallback was needed and root has no legal actions.
        """
        clock = self.clock_factory(self.time_threshold_ms)
        now_beam: Frontier[SearchableState[ActionT]] = Frontier()
        now_beam.push(root, root.evaluate())
        best_state = root
        best_score: float | None = None
        depth = 0
        expansions = 0

        while not best_state.is_terminal():
            next_beam: Frontier[SearchableState[ActionT]] = Frontier()

            for _ in range(self.beam_width):
                if clock.is_time_over():
                    return self._finish(
                        fallback_action(root, best_state), best_score, depth, expansions, True
                    )
                if not now_beam:
                    break

                now_state = now_beam.pop()
                expansions += 1
                for action in now_state.legal_actions():
                    next_state = now_state.apply(action)
                    score = next_state.evaluate()
                    if depth == 0:
                        next_state.first_action = action
                    next_beam.push(next_state, score)

            if not next_beam:
                # Nothing left to expand: beam_width == 0 or a dead end.
                return self._finish(
                    fallback_action(root, best_state), best_score, depth, expansions, False
                )

            now_beam = next_beam
            best_state = now_beam.peek()
            best_score = now_beam.peek_score()
            depth += 1

        return self._finish(fallback_action(root, best_state), best_score, depth, expansions, False)

    def _finish(
        self,
        action: ActionT,
        score: float | None,
        depth: int,
        expansions: int,
        timed_out: bool,
    ) -> SearchResult:
        logger.debug(
            f"beam search: action={action} depth={depth} expansions={expansions} "
            f"timed_out={timed_out}"
        )
        return SearchResult(
            action=action,
            score=score,
            depth=depth,
            expansions=expansions,
            timed_out=timed_out,
        )


def beam_search(
    root: SearchableState[ActionT],
    beam_width: int,
    time_threshold_ms: int | None,
    *,
    clock_factory: ClockFactory = TimeKeeper,
) -> ActionT:
    """Choose the next action from ``root`` with time-bounded beam search."""
    return BeamSearch(beam_width, time_threshold_ms, clock_factory).search(root).action
