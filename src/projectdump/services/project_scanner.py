"""Single-pass project scan: walk, filter, classify, then detect."""

from __future__ import annotations

import logging
import posixpath

from projectdump.domain.entities import FileRecord, FilterDecision, ProjectScan, ProjectSummary
from projectdump.domain.ports.file_source import FileSource
from projectdump.services.file_classifier import classify
from projectdump.services.file_filter import FileFilter
from projectdump.services.tech_detector import TechnologyDetector, primary_language

logger = logging.getLogger(__name__)


class ProjectScanner:
    """Turns one project root into a :class:`ProjectScan`.

    Parameters
    ----------
    source:
        Adapter that walks the tree and reads file bytes.
    file_filter:
        Decides which entries become :class:`FileRecord` objects.
    detector:
        Ranks technologies over the accepted files.
    """

    def __init__(
        self,
        source: FileSource,
        file_filter: FileFilter,
        detector: TechnologyDetector,
    ) -> None:
        self._source = source
        self._filter = file_filter
        self._detector = detector

    def scan(self, root: str) -> ProjectScan:
        """Walk *root* and return the summary plus accepted files.

        The per-file steps follow the rule order of :meth:`FileFilter.evaluate`,
        split so the size is accounted after the name rules and before the
        size cap.  The full evaluation gates the final accept.  Any I/O
        failure propagates as a domain error; nothing partial is returned.
        """
        files: list[FileRecord] = []
        total_files = 0
        total_size = 0

        for entry in self._source.iter_files(root, self._filter.is_ignored_dir):
            total_files += 1

            decision = self._filter.check_name(entry.name)
            if decision is not FilterDecision.ACCEPT:
                logger.debug("Skipping %s (%s)", entry.rel_path, decision.value)
                continue

            # Oversized and binary files still count toward the project size.
            total_size += entry.size

            decision = self._filter.check_size(entry.size)
            if decision is not FilterDecision.ACCEPT:
                logger.debug("Skipping %s (%s)", entry.rel_path, decision.value)
                continue

            raw = self._source.read_bytes(entry.path)
            decision = self._filter.evaluate(entry.name, size=entry.size, content=raw)
            if decision is not FilterDecision.ACCEPT:
                logger.debug("Skipping %s (%s)", entry.rel_path, decision.value)
                continue

            extension = posixpath.splitext(entry.name)[1].lower()
            files.append(
                FileRecord(
                    path=entry.rel_path,
                    size=entry.size,
                    content=raw.decode("utf-8", errors="replace"),
                    language=classify(extension),
                )
            )

        technologies = self._detector.detect(files)
        summary = ProjectSummary(
            root=root,
            total_files=total_files,
            processed_files=len(files),
            total_size=total_size,
            technologies=tuple(technologies),
            primary_language=primary_language(technologies),
        )
        return ProjectScan(summary=summary, files=tuple(files))
