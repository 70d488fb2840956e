"""Cache module."""

from __future__ import annotations

import struct

from ..core.module import Evaluable, Module


class Cache(Module):
    """Remembers the most recent coordinate and output of its source.

    Useful when the same source feeds several parents that sample the same
    coordinate, e.g. the control of a Select that is also blended elsewhere.
    Evaluating a bit-identical coordinate again returns the stored value
    without touching the source. Coordinates are compared by their IEEE-754
    bit patterns, so 0.0 and -0.0 are different coordinates.

    The stored pair is mutable state: a Cache must not be evaluated from
    several threads without outside locking.
    """

    def __init__(self, source: Evaluable) -> None:
        self._source = source
        self._last: tuple[bytes, float] | None = None

    @property
    def source(self) -> Evaluable:
        return self._source

    @source.setter
    def source(self, source: Evaluable) -> None:
        self._source = source
        self._last = None

    @property
    def is_cached(self) -> bool:
        return self._last is not None

    def clear(self) -> None:
        """Forget the stored value."""
        self._last = None

    def sources(self) -> list[Evaluable]:
        return [self._source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        key = struct.pack("<3d", x, y, z)
        last = self._last
        if last is not None and last[0] == key:
            return last[1]
        value = self._source.evaluate(x, y, z)
        self._last = (key, value)
        return value

    def __repr__(self) -> str:
        return f"Cache(is_cached={self.is_cached!r})"
