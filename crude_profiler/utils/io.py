"""Filesystem helpers for persisting rendered reports."""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: str | Path) -> Path:
    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)
    return target


def save_report(path: str | Path, text: str, *, append: bool = False) -> Path:
    """Write report text to ``path``, creating parent directories as needed."""

    target = Path(path)
    ensure_dir(target.parent)
    mode = "a" if append else "w"
    with target.open(mode, encoding="utf-8") as handle:
        handle.write(text)
    return target
