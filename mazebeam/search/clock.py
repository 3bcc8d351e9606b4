"""Search budgets: wall-clock deadline and a deterministic check counter.

Engines never hold a clock across calls. They receive a factory
(``Callable[[int | None], Clock]``) and build a fresh clock at the start of
every ``search()`` invocation.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Budget tracker queried by the search engines."""

    def is_time_over(self) -> bool: ...


ClockFactory = Callable[[int | None], Clock]


class TimeKeeper:
    """Wall-clock deadline measured from construction.

    Uses ``time.monotonic`` so the deadline is unaffected by system clock
    adjustments. A threshold of ``None`` never expires.

    Args:
        time_threshold_ms: Budget in milliseconds, or None for no limit.
    """

    __slots__ = ("_start", "_threshold_s")

    def __init__(self, time_threshold_ms: int | None) -> None:
        self._start = time.monotonic()
        self._threshold_s = None if time_threshold_ms is None else time_threshold_ms / 1000.0

    @property
    def elapsed_ms(self) -> float:
        return (time.monotonic() - self._start) * 1000.0

    def is_time_over(self) -> bool:
        if self._threshold_s is None:
            return False
        return time.monotonic() - self._start >= self._threshold_s


class CheckCountKeeper:
    """Deterministic budget counting queries instead of milliseconds.

    The first ``threshold`` calls to :meth:`is_time_over` answer False, every
    later call answers True. Beam search queries once per node expansion and
    chokudai search once per round, so the threshold becomes an expansion or
    round budget that does not depend on machine speed.
    """

    __slots__ = ("_threshold", "_checks")

    def __init__(self, threshold: int | None) -> None:
        self._threshold = threshold
        self._checks = 0

    @property
    def checks(self) -> int:
        return self._checks

    def is_time_over(self) -> bool:
        if self._threshold is None:
            return False
        self._checks += 1
        return self._checks > self._threshold
