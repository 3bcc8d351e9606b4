"""Max-first frontier over search states, ranked by evaluated score.

Entries are kept in a binary heap keyed on ``(-score, sequence)``. The
sequence number is a per-frontier insertion counter, so among states with
equal score the one pushed first is popped first. States themselves are
never compared.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mazebeam.search.state import Score

StateT = TypeVar("StateT")


@dataclass(order=True, slots=True)
class RankedNode(Generic[StateT]):
    """Heap entry ordering a state by descending score, then insertion order."""

    sort_key: tuple[Score, int]
    state: StateT = field(compare=False)

    @property
    def score(self) -> Score:
        return -self.sort_key[0]


class Frontier(Generic[StateT]):
    """Priority structure yielding the highest-scored state first."""

    __slots__ = ("_heap", "_counter")

    def __init__(self) -> None:
        self._heap: list[RankedNode[StateT]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, state: StateT, score: Score) -> None:
        heapq.heappush(self._heap, RankedNode((-score, next(self._counter)), state))

    def pop(self) -> StateT:
        """Remove and return the best state. Raises IndexError when empty."""
        return heapq.heappop(self._heap).state

    def peek(self) -> StateT:
        """Return the best state without removing it. Raises IndexError when empty."""
        return self._heap[0].state

    def peek_score(self) -> Score:
        return self._heap[0].score

    def __iter__(self) -> Iterator[StateT]:
        """Iterate states in ranking order (non-destructive)."""
        for node in sorted(self._heap):
            yield node.state
