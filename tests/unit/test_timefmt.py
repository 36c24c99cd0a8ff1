from __future__ import annotations

import pytest

from crude_profiler.utils.timefmt import pretty_ns, pretty_path, pretty_time


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        pytest.param(0.0, "0.00ns", id="zero"),
        pytest.param(5e-8, "50.00ns", id="nanoseconds"),
        pytest.param(1e-7, "0.10µs", id="microsecond-threshold"),
        pytest.param(5e-5, "50.00µs", id="microseconds"),
        pytest.param(5e-3, "5.00ms", id="milliseconds"),
        pytest.param(1e-2, "0.01s", id="seconds-threshold"),
        pytest.param(1.5, "1.50s", id="seconds"),
        pytest.param(99.5, "99.50s", id="below-scientific"),
        pytest.param(100.0, "1.00e+02s", id="scientific-threshold"),
        pytest.param(1234.0, "1.23e+03s", id="scientific"),
    ],
)
def test_pretty_time_unit_scaling(seconds: float, expected: str) -> None:
    assert pretty_time(seconds) == expected


def test_pretty_time_precision() -> None:
    assert pretty_time(1.5, precision=0) == "2s"
    assert pretty_time(5e-3, precision=3) == "5.000ms"


def test_pretty_ns_converts_to_seconds() -> None:
    assert pretty_ns(3_000_000) == "3.00ms"
    assert pretty_ns(2_500_000_000) == "2.50s"


def test_pretty_path_adds_trailing_separator() -> None:
    assert pretty_path(("outer", "inner")) == "outer:inner:"
    assert pretty_path(("a",), separator="/") == "a/"
    assert pretty_path(()) == ""
