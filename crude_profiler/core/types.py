"""Shared type definitions and lightweight data containers."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

Label = str
TaskPath = tuple[Label, ...]


def intern_label(label: str) -> Label:
    if not isinstance(label, str):
        raise TypeError(f"Task label must be a string, got {type(label).__name__}.")
    return sys.intern(label)


@dataclass(slots=True)
class Record:
    """Cumulative time and number of task starts attributed to one exact path."""

    duration_ns: int = 0
    count: int = 0

    def copy(self) -> Record:
        return Record(duration_ns=self.duration_ns, count=self.count)


@dataclass(slots=True, frozen=True)
class Snapshot:
    """Point-in-time copy of the accounting records."""

    records: Mapping[TaskPath, Record] = field(default_factory=dict)
    active_stack: TaskPath = ()

    @property
    def total_ns(self) -> int:
        return sum(record.duration_ns for record in self.records.values())

    @property
    def is_empty(self) -> bool:
        """True when no labelled task has been recorded, idle time aside."""

        return not any(path for path in self.records)
