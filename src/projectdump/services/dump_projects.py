"""Dump-projects use case: the main orchestration pipeline.

Depends only on the scanner, which in turn depends on the FileSource port.
The interface layer wires concrete adapters at startup.
"""

from __future__ import annotations

import logging
from typing import Sequence

from projectdump.domain.entities import ProjectScan
from projectdump.services.project_scanner import ProjectScanner

logger = logging.getLogger(__name__)


class DumpProjectsUseCase:
    """Scans every requested root, failing fast on the first error."""

    def __init__(self, scanner: ProjectScanner) -> None:
        self._scanner = scanner

    def execute(self, roots: Sequence[str]) -> list[ProjectScan]:
        """Scan *roots* in order and return one :class:`ProjectScan` each."""
        if not roots:
            msg = "At least one project path is required."
            raise ValueError(msg)

        scans: list[ProjectScan] = []
        for root in roots:
            logger.info("Analyzing project at: %s", root)
            scan = self._scanner.scan(root)
            summary = scan.summary
            logger.info(
                "%s: %d/%d files processed, primary language %s",
                root,
                summary.processed_files,
                summary.total_files,
                summary.primary_language,
            )
            scans.append(scan)
        return scans
