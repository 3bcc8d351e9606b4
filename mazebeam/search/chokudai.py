"""Time-bounded chokudai search (beam of beams).

A frontier is kept per depth ``0..beam_depth``. Every round walks the depths
in order and moves up to ``beam_width`` of the best states at depth ``t``
into depth ``t + 1``. Rounds repeat until the budget runs out, so each depth
gets revisited with whatever the previous rounds left behind and the search
spreads its effort over many candidate lines instead of committing to one
beam at depth 0.

The clock is only read between rounds: a round always completes so that no
depth ends up under-expanded relative to the others.
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


class ChokudaiSearch(Generic[ActionT]):
    """Multi-depth simultaneous beam search under a time budget.

    Attributes:
        beam_width: States moved from each depth to the next per round.
        beam_depth: Number of levels searched below the root.
        time_threshold_ms: Budget handed to the clock factory (None = no limit).
        clock_factory: Builds a fresh clock for every search call.
    """

    def __init__(
        self,
        beam_width: int,
        beam_depth: int,
        time_threshold_ms: int | None,
        clock_factory: ClockFactory = TimeKeeper,
    ) -> None:
        if beam_width < 0:
            raise ValueError(f"beam_width must be >= 0, got {beam_width}")
        if beam_depth < 0:
            raise ValueError(f"beam_depth must be >= 0, got {beam_depth}")
        self.beam_width = beam_width
        self.beam_depth = beam_depth
        self.time_threshold_ms = time_threshold_ms
        self.clock_factory = clock_factory

    def search(self, root: SearchableState[ActionT]) -> SearchResult:
        """Run chokudai search from ``root`` and return the chosen first action.

        Besides budget expiry, the round loop also stops after a round that
        expanded nothing: every depth is then empty or topped by a terminal
        state, and further rounds could not change the answer.

        Raises:
            NoLegalActionError: A fallback was needed and root has no legal actions.
        """
        clock = self.clock_factory(self.time_threshold_ms)
        beams: list[Frontier[SearchableState[ActionT]]] = [
            Frontier() for _ in range(self.beam_depth + 1)
        ]
        beams[0].push(root, root.evaluate())
        expansions = 0
        rounds = 0
        timed_out = False

        while True:
            round_expansions = 0
            for t in range(self.beam_depth):
                now_beam = beams[t]
                next_beam = beams[t + 1]

                for _ in range(self.beam_width):
                    if not now_beam:
                        break
                    if now_beam.peek().is_terminal():
                        break

                    now_state = now_beam.pop()
                    round_expansions += 1
                    for action in now_state.legal_actions():
                        next_state = now_state.apply(action)
                        score = next_state.evaluate()
                        if t == 0:
                            next_state.first_action = action
                        next_beam.push(next_state, score)

            expansions += round_expansions
            rounds += 1
            if clock.is_time_over():
                timed_out = True
                break
            if round_expansions == 0:
                break

        for t in range(self.beam_depth, -1, -1):
            if beams[t]:
                best_state = beams[t].peek()
                action = fallback_action(root, best_state)
                logger.debug(
                    f"chokudai search: action={action} depth={t} rounds={rounds} "
                    f"expansions={expansions} timed_out={timed_out}"
                )
                return SearchResult(
                    action=action,
                    score=beams[t].peek_score() if best_state is not root else None,
                    depth=t,
                    expansions=expansions,
                    timed_out=timed_out,
                )

        # Only reachable if the root itself was popped and left no children.
        action = fallback_action(root, root)
        return SearchResult(
            action=action, score=None, depth=0, expansions=expansions, timed_out=timed_out
        )


def chokudai_search(
    root: SearchableState[ActionT],
    beam_width: int,
    beam_depth: int,
    time_threshold_ms: int | None,
    *,
    clock_factory: ClockFactory = TimeKeeper,
) -> ActionT:
    """Choose the next action from ``root`` with time-bounded chokudai search."""
    return (
        ChokudaiSearch(beam_width, beam_depth, time_threshold_ms, clock_factory)
        .search(root)
        .action
    )
