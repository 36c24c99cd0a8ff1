"""Call-path time accounting: the active task stack and per-path records."""

from __future__ import annotations

import functools
import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from crude_profiler.config import ReportConfig
from crude_profiler.core.exceptions import (
    CrudeProfilerError,
    GuardOrderError,
    StackUnderflowError,
    StatePoisonedError,
)
from crude_profiler.core.types import Label, Record, Snapshot, TaskPath, intern_label
from crude_profiler.report import render_report

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
F = TypeVar("F", bound=Callable[..., Any])


class Guard:
    """Handle for the innermost task started by :meth:`Profiler.begin`.

    Releasing the guard ends its task. Guards must be released in strict LIFO
    order; use them as context managers so release happens at scope exit.
    """

    __slots__ = ("_profiler", "_depth", "_generation", "_label", "_released")

    def __init__(self, profiler: Profiler, label: Label, depth: int, generation: int) -> None:
        self._profiler = profiler
        self._label = label
        self._depth = depth
        self._generation = generation
        self._released = False

    @property
    def label(self) -> Label:
        return self._label

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def released(self) -> bool:
        return self._released

    def transition(self, label: str) -> Guard:
        """End this guard's task and start ``label`` at the same depth."""

        self._profiler._transition_guard(self, intern_label(label))
        return self

    def release(self) -> None:
        """End this guard's task. Calling it again is a no-op."""

        self._profiler._release_guard(self)

    def __enter__(self) -> Guard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __copy__(self) -> Guard:
        raise TypeError("Guard objects cannot be copied.")

    def __deepcopy__(self, memo: dict) -> Guard:
        raise TypeError("Guard objects cannot be copied.")

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"Guard(label={self._label!r}, depth={self._depth}, {state})"


class Profiler:
    """Accounting state shared by every task measured in one scope.

    Each public operation first commits the time elapsed since the previous
    commit to the stack that was active during that interval, then applies
    its own change to the stack.
    """

    def __init__(self, clock: Clock | None = None, config: ReportConfig | None = None) -> None:
        self._clock: Clock = clock or time.perf_counter_ns
        self.config = config or ReportConfig()
        self._lock = threading.Lock()
        self._poisoned = False
        self._records: dict[TaskPath, Record] = {}
        self._stack: list[Label] = []
        self._guards: list[Guard] = []
        self._generation = 0
        self._last_commit = self._clock()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        with self._lock:
            if self._poisoned:
                logger.error("Profiler state is poisoned; refusing to continue.")
                raise StatePoisonedError(
                    "Profiler state was left inconsistent by an earlier failure."
                )
            try:
                yield
            except CrudeProfilerError:
                raise
            except BaseException:
                self._poisoned = True
                raise

    def _record(self, path: TaskPath) -> Record:
        record = self._records.get(path)
        if record is None:
            record = self._records[path] = Record()
        return record

    def _commit(self, now: int) -> None:
        if now <= self._last_commit:
            return
        self._record(tuple(self._stack)).duration_ns += now - self._last_commit
        self._last_commit = now

    def _bump(self) -> None:
        self._record(tuple(self._stack)).count += 1

    def _check_innermost(self, guard: Guard) -> None:
        if not self._stack:
            raise StackUnderflowError(f"No active task to end for {guard!r}.")
        if guard._depth != len(self._stack):
            raise GuardOrderError(
                f"{guard!r} is not the innermost task; active path is {tuple(self._stack)}."
            )

    def _is_stale(self, guard: Guard) -> bool:
        if guard._generation == self._generation:
            return False
        logger.warning("Ignoring %r created before the last reset.", guard)
        return True

    @property
    def depth(self) -> int:
        with self._locked():
            return len(self._stack)

    @property
    def active_path(self) -> TaskPath:
        with self._locked():
            return tuple(self._stack)

    def begin(self, label: str) -> Guard:
        """Start timing ``label`` nested under the currently active tasks."""

        label = intern_label(label)
        now = self._clock()
        with self._locked():
            self._commit(now)
            self._stack.append(label)
            self._bump()
            guard = Guard(self, label, len(self._stack), self._generation)
            self._guards.append(guard)
            return guard

    def transition(self, label: str) -> None:
        """Replace the innermost active task with ``label``."""

        label = intern_label(label)
        now = self._clock()
        with self._locked():
            if not self._stack:
                raise StackUnderflowError(f"Cannot transition to {label!r}: no active task.")
            self._commit(now)
            self._stack[-1] = label
            self._bump()
            self._guards[-1]._label = label

    def _transition_guard(self, guard: Guard, label: Label) -> None:
        now = self._clock()
        with self._locked():
            if guard._released:
                raise GuardOrderError(f"Cannot transition {guard!r}: already released.")
            if self._is_stale(guard):
                return
            self._check_innermost(guard)
            self._commit(now)
            self._stack[-1] = label
            self._bump()
            guard._label = label

    def _release_guard(self, guard: Guard) -> None:
        now = self._clock()
        with self._locked():
            if guard._released:
                return
            if self._is_stale(guard):
                guard._released = True
                return
            self._check_innermost(guard)
            self._commit(now)
            self._stack.pop()
            self._guards.pop()
            guard._released = True

    def reset(self) -> None:
        """Discard all records and active tasks and restart the clock."""

        now = self._clock()
        with self._locked():
            self._records = {}
            self._stack = []
            self._guards = []
            self._generation += 1
            self._last_commit = max(self._last_commit, now)
            generation = self._generation
        logger.debug("Profiler reset (generation %d).", generation)

    def snapshot(self) -> Snapshot:
        """Commit pending time and return a copy of the records."""

        now = self._clock()
        with self._locked():
            self._commit(now)
            return Snapshot(
                records={path: record.copy() for path, record in self._records.items()},
                active_stack=tuple(self._stack),
            )

    def report(self) -> str:
        """Return the formatted time breakdown committed so far."""

        return render_report(self.snapshot(), self.config)

    def profiled(self, label: str | None = None) -> Callable[[F], F]:
        """Decorate a function so each call runs as a task named ``label``.

        Defaults to the function's qualified name.
        """

        def decorator(func: F) -> F:
            task = label or func.__qualname__

            @functools.wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                with self.begin(task):
                    return func(*args, **kwargs)

            return wrapper  # type: ignore[return-value]

        return decorator
