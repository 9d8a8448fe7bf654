"""Entry id assignment."""

import time
from collections.abc import Callable, Iterable
from typing import Protocol

from listkeeper.settings import IdStrategy


class IdSource(Protocol):
    """Hands out entry ids that are unique within a session."""

    def next_id(self) -> int: ...


class CounterIds:
    """Incrementing counter, starting after the highest id already in use."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


def _now_ms() -> int:
    """Return current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class TimestampIds:
    """Wall-clock millisecond ids.

    Two adds within the same millisecond (or a clock step backwards) would
    collide, so each id is at least one more than the previous.
    """

    def __init__(self, last: int = 0, clock: Callable[[], int] = _now_ms) -> None:
        self._last = last
        self._clock = clock

    def next_id(self) -> int:
        self._last = max(self._clock(), self._last + 1)
        return self._last


def make_id_source(strategy: IdStrategy, existing: Iterable[int] = ()) -> IdSource:
    """Build an id source that will not reuse any of the existing ids."""
    highest = max(existing, default=0)
    if strategy == IdStrategy.TIMESTAMP:
        return TimestampIds(last=highest)
    return CounterIds(start=highest + 1)
