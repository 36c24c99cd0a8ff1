"""Human-readable formatting for durations and task paths."""

from __future__ import annotations

from collections.abc import Iterable

_UNIT_SCALES: tuple[tuple[float, float, str], ...] = (
    (1e-7, 1e9, "ns"),
    (1e-4, 1e6, "µs"),
    (1e-2, 1e3, "ms"),
)


def pretty_time(seconds: float, precision: int = 2) -> str:
    """Render a duration in seconds with a unit picked from its magnitude."""

    for upper, scale, unit in _UNIT_SCALES:
        if seconds < upper:
            return f"{seconds * scale:.{precision}f}{unit}"
    if seconds >= 1e2:
        return f"{seconds:.{precision}e}s"
    return f"{seconds:.{precision}f}s"


def pretty_ns(duration_ns: int, precision: int = 2) -> str:
    return pretty_time(duration_ns * 1e-9, precision)


def pretty_path(path: Iterable[str], separator: str = ":") -> str:
    """Join labels with a trailing separator after each one, e.g. ``outer:inner:``."""

    return "".join(f"{label}{separator}" for label in path)
