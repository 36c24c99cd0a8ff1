"""Shared test factories."""

from .clock_factory import UNIT_NS, FakeClock, ScriptedClock

__all__ = ["UNIT_NS", "FakeClock", "ScriptedClock"]
