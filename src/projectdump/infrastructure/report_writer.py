"""Writes the rendered report to a file."""

from __future__ import annotations

from pathlib import Path

from projectdump.domain.exceptions import OutputWriteError


def write_report(text: str, path: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write output file '{path}': {exc}") from exc
