"""Manual call-path time accounting.

A process-wide :data:`default_profiler` backs the module-level helpers; create
separate :class:`Profiler` instances when measurements must stay isolated.
"""

from crude_profiler.accounting import Guard, Profiler
from crude_profiler.config import ReportConfig, build_report_config
from crude_profiler.core.exceptions import (
    ConfigurationError,
    CrudeProfilerError,
    GuardOrderError,
    StackUnderflowError,
    StatePoisonedError,
)
from crude_profiler.core.types import Record, Snapshot
from crude_profiler.report import render_report

default_profiler = Profiler()


def begin(label: str) -> Guard:
    return default_profiler.begin(label)


def transition(label: str) -> None:
    default_profiler.transition(label)


def reset() -> None:
    default_profiler.reset()


def report() -> str:
    return default_profiler.report()


__all__ = [
    "ConfigurationError",
    "CrudeProfilerError",
    "Guard",
    "GuardOrderError",
    "Profiler",
    "Record",
    "ReportConfig",
    "Snapshot",
    "StackUnderflowError",
    "StatePoisonedError",
    "begin",
    "build_report_config",
    "default_profiler",
    "render_report",
    "report",
    "reset",
    "transition",
]
