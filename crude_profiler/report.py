"""Aggregation and text rendering of accounting snapshots."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from crude_profiler.config import ReportConfig
from crude_profiler.core.types import Label, Record, Snapshot, TaskPath
from crude_profiler.utils.timefmt import pretty_ns, pretty_path

logger = logging.getLogger(__name__)


def _add(target: dict, key: object, record: Record) -> None:
    acc = target.get(key)
    if acc is None:
        acc = target[key] = Record()
    acc.duration_ns += record.duration_ns
    acc.count += record.count


def cumulative_by_label(records: Mapping[TaskPath, Record]) -> dict[Label, Record]:
    """Sum durations and counts of every path containing each label.

    A path contributes once per label even when the label repeats in it.
    """

    cum: dict[Label, Record] = {}
    for path, record in records.items():
        for label in set(path):
            _add(cum, label, record)
    return cum


def ways_for_label(records: Mapping[TaskPath, Record], label: Label) -> list[tuple[TaskPath, Record]]:
    """Group paths containing ``label`` by their prefix up to its first occurrence.

    Ways are ordered by summed duration, longest first, ties by path order.
    """

    ways: dict[TaskPath, Record] = {}
    for path, record in records.items():
        if label not in path:
            continue
        _add(ways, path[: path.index(label) + 1], record)
    return sorted(ways.items(), key=lambda item: (-item[1].duration_ns, item[0]))


def ordered_labels(cum: Mapping[Label, Record]) -> list[Label]:
    return sorted(cum, key=lambda label: (-cum[label].duration_ns, label))


def _percent(duration_ns: int, total_ns: int) -> float:
    if total_ns <= 0:
        return 0.0
    return 100.0 * duration_ns / total_ns


def _average_ns(record: Record) -> int:
    if record.count <= 0:
        return 0
    return record.duration_ns // record.count


def _format_line(name: str, record: Record, total_ns: int, config: ReportConfig) -> str:
    percent = _percent(record.duration_ns, total_ns)
    return (
        f"{percent:.{config.percent_precision}f}% {name} "
        f"{pretty_ns(record.duration_ns, config.time_precision)} "
        f"({record.count}, {pretty_ns(_average_ns(record), config.time_precision)})"
    )


def render_report(snapshot: Snapshot, config: ReportConfig | None = None) -> str:
    """Render the per-label cumulative and per-path breakdown of a snapshot."""

    config = config or ReportConfig()
    if snapshot.is_empty:
        return ""
    records = snapshot.records
    total_ns = snapshot.total_ns
    cum = cumulative_by_label(records)
    labels = ordered_labels(cum)
    if config.max_labels is not None:
        labels = labels[: config.max_labels]

    lines: list[str] = []
    for label in labels:
        ways = ways_for_label(records, label)
        if len(ways) == 1:
            way, record = ways[0]
            lines.append(_format_line(pretty_path(way, config.separator), record, total_ns, config))
            continue
        lines.append(_format_line(label, cum[label], total_ns, config))
        for way, record in ways:
            lines.append(
                config.indent
                + _format_line(pretty_path(way, config.separator), record, total_ns, config)
            )
        lines.append("")

    logger.debug("Rendered report: %d labels over %d paths.", len(labels), len(records))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
