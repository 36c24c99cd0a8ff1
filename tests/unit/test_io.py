from __future__ import annotations

from pathlib import Path

from crude_profiler.utils.io import ensure_dir, save_report


def test_save_report_creates_parents_and_appends(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "report.txt"

    assert save_report(target, "first\n") == target
    save_report(target, "second\n", append=True)
    assert target.read_text(encoding="utf-8") == "first\nsecond\n"

    save_report(target, "replaced\n")
    assert target.read_text(encoding="utf-8") == "replaced\n"


def test_ensure_dir_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    assert ensure_dir(target) == target
    assert ensure_dir(target).is_dir()
