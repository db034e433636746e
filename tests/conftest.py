"""Shared pytest fixtures for projectdump tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from projectdump.domain.rules import DEFAULT_FILTER_RULES
from projectdump.infrastructure.config import get_settings
from projectdump.infrastructure.local_filesystem import LocalFileSource
from projectdump.services.file_filter import FileFilter
from projectdump.services.project_scanner import ProjectScanner
from projectdump.services.tech_detector import TechnologyDetector
from projectdump.services.tech_patterns import DEFAULT_TECH_PATTERNS


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Write ``{relative_path: content}`` below a fresh project root."""

    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def scanner() -> ProjectScanner:
    return ProjectScanner(
        source=LocalFileSource(),
        file_filter=FileFilter(DEFAULT_FILTER_RULES),
        detector=TechnologyDetector(DEFAULT_TECH_PATTERNS),
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep env vars and any local ``.env`` out of the settings under test."""
    for name in (
        "PROJECTDUMP_LOG_LEVEL",
        "PROJECTDUMP_MAX_FILE_SIZE_KB",
        "PROJECTDUMP_BINARY_SNIFF_BYTES",
        "PROJECTDUMP_MAX_LISTED_FILES",
        "PROJECTDUMP_REDACT_SECRETS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
