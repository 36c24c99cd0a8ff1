"""Synthetic nested workload used by the demo CLI."""

from __future__ import annotations

import time
from collections.abc import Callable

from omegaconf import DictConfig

from crude_profiler.accounting import Profiler
from crude_profiler.core.exceptions import ConfigurationError


def run_demo_workload(
    profiler: Profiler,
    cfg: DictConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run every outer task once per repeat, stepping through its inner tasks."""

    demo_cfg = cfg.get("demo")
    if demo_cfg is None:
        raise ConfigurationError("Missing 'demo' section in config.")
    sleep_s = float(demo_cfg.get("sleep_ms", 0.0)) / 1000.0
    repeats = int(demo_cfg.get("repeats", 1))
    if repeats < 0 or sleep_s < 0:
        raise ConfigurationError("demo.repeats and demo.sleep_ms must be non-negative.")
    tasks = demo_cfg.get("tasks") or {}

    for _ in range(repeats):
        for outer, inner_tasks in tasks.items():
            with profiler.begin(str(outer)):
                sleep(sleep_s)
                inner = [str(name) for name in inner_tasks or []]
                if not inner:
                    continue
                with profiler.begin(inner[0]) as guard:
                    sleep(sleep_s)
                    for name in inner[1:]:
                        guard.transition(name)
                        sleep(sleep_s)
