"""Dependency wiring: build the use case from settings."""

from __future__ import annotations

from projectdump.domain.rules import DEFAULT_FILTER_RULES
from projectdump.infrastructure.config import Settings
from projectdump.infrastructure.local_filesystem import LocalFileSource
from projectdump.services.dump_projects import DumpProjectsUseCase
from projectdump.services.file_filter import FileFilter
from projectdump.services.project_scanner import ProjectScanner
from projectdump.services.tech_detector import TechnologyDetector
from projectdump.services.tech_patterns import DEFAULT_TECH_PATTERNS


def get_use_case(settings: Settings) -> DumpProjectsUseCase:
    """Build a use case with the local filesystem adapter and built-in tables."""
    rules = DEFAULT_FILTER_RULES.with_limits(
        max_file_size=settings.max_file_size_kb * 1024,
        binary_sniff_bytes=settings.binary_sniff_bytes,
    )
    scanner = ProjectScanner(
        source=LocalFileSource(),
        file_filter=FileFilter(rules),
        detector=TechnologyDetector(DEFAULT_TECH_PATTERNS),
    )
    return DumpProjectsUseCase(scanner)
