from __future__ import annotations

from collections.abc import Iterable

UNIT_NS = 1_000_000


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start_ns: int = 0) -> None:
        self.now_ns = int(start_ns)

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, units: float = 1) -> None:
        self.now_ns += int(units * UNIT_NS)

    def set(self, now_ns: int) -> None:
        self.now_ns = int(now_ns)

    def sleep(self, seconds: float) -> None:
        self.now_ns += int(seconds * 1e9)


class ScriptedClock:
    """Clock returning a fixed sequence of readings, repeating the last one."""

    def __init__(self, readings: Iterable[object]) -> None:
        self._readings = list(readings)
        self._index = 0

    def __call__(self) -> object:
        value = self._readings[min(self._index, len(self._readings) - 1)]
        self._index += 1
        return value
