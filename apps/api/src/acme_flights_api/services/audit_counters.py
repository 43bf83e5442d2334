"""Search audit counters and the derived success ratio."""

from __future__ import annotations

import threading
from decimal import ROUND_HALF_UP, Decimal

_ONE_DECIMAL = Decimal("0.1")


class _AtomicCounter:
    """Monotonic integer counter with a lock-protected increment.

    Reads take no lock: rebinding an int attribute is atomic, so a reader
    always sees some completed increment and never waits on a writer.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        return self._value


class AuditCounters:
    """Process-lifetime tallies of leg searches and non-empty results.

    One instance is created per application and handed to request handlers
    through dependency injection. The two counters are independent: each has
    its own lock and no operation holds both.
    """

    def __init__(self) -> None:
        self._searches = _AtomicCounter()
        self._successes = _AtomicCounter()

    def record_search(self, success: bool) -> None:
        """Count one leg lookup, and one success if it returned flights."""
        # searches is bumped first so that successes <= searches always holds
        self._searches.increment()
        if success:
            self._successes.increment()

    @property
    def searches(self) -> int:
        return self._searches.value

    @property
    def successes(self) -> int:
        return self._successes.value

    def success_ratio(self) -> Decimal:
        """Percentage of searches that found flights, to one decimal place.

        Rounds half up (``33.25 -> 33.3``) and returns ``0`` before the first
        search is recorded.
        """
        # read successes before searches; the reverse order can observe a
        # success whose search was counted after the searches read
        successes = self.successes
        searches = self.searches
        if searches == 0:
            return Decimal(0)
        ratio = Decimal(successes * 100) / Decimal(searches)
        return ratio.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
