"""Content assembler: renders project scans as one markdown document.

This is the final transformation before the text is written out.
"""

from __future__ import annotations

import logging
import posixpath
from datetime import datetime
from typing import Sequence

from projectdump.domain.entities import FileRecord, ProjectScan
from projectdump.services.file_classifier import syntax_tag
from projectdump.services.security_sentinel import sanitize
from projectdump.services.tree_builder import build_tree, render_tree

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
PROJECT_SEPARATOR = "\n---\n\n"


def assemble(
    scans: Sequence[ProjectScan],
    generated_at: datetime | None = None,
    max_listed_files: int = 5,
    redact_secrets: bool = False,
) -> str:
    """Render the header followed by one section per project."""
    generated_at = generated_at or datetime.now()
    header = (
        "# ProjectDump Analysis\n\n"
        f"**Generated on:** {generated_at.strftime(TIMESTAMP_FORMAT)}\n"
    )

    sections: list[str] = []
    redactions = 0
    for scan in scans:
        text, count = _render_project(scan, max_listed_files, redact_secrets)
        sections.append(text)
        redactions += count

    if redactions:
        logger.warning("Redacted %d potential secret(s) from file contents", redactions)

    return header + PROJECT_SEPARATOR.join(sections)


def _render_project(
    scan: ProjectScan, max_listed_files: int, redact_secrets: bool
) -> tuple[str, int]:
    summary = scan.summary
    parts: list[str] = [f"**Project Path:** {summary.root}\n\n"]

    parts.append("## Project Summary\n\n")
    parts.append(f"- **Primary Language:** {summary.primary_language}\n")
    parts.append(f"- **Total Files:** {summary.total_files}\n")
    parts.append(f"- **Processed Files:** {summary.processed_files}\n")
    parts.append(f"- **Project Size:** {summary.total_size / 1024:.2f} KB\n\n")

    if summary.technologies:
        parts.append("## Detected Technologies\n\n")
        for tech in summary.technologies:
            parts.append(f"### {tech.name} ({tech.confidence * 100:.1f}% confidence)\n")
            parts.append(f"*{tech.description}*\n\n")
            if tech.files:
                parts.append("**Related files:**\n")
                for path in tech.files[:max_listed_files]:
                    parts.append(f"- {path}\n")
                remaining = len(tech.files) - max_listed_files
                if remaining > 0:
                    parts.append(f"- ... and {remaining} more files\n")
                parts.append("\n")

    parts.append("## Directory Structure\n\n")
    parts.append("```\n")
    parts.append(render_tree(build_tree(scan.files)))
    parts.append("```\n\n")

    parts.append("## Source Code\n\n")
    redactions = 0
    for directory, records in _group_by_directory(scan.files):
        if directory:
            parts.append(f"### {directory}/\n\n")
        for record in records:
            content = record.content
            if redact_secrets:
                result = sanitize(content)
                content = result.clean_text
                redactions += result.redaction_count
            parts.append(_render_file(record, content))

    return "".join(parts), redactions


def _group_by_directory(
    files: Sequence[FileRecord],
) -> list[tuple[str, list[FileRecord]]]:
    """Group files by parent directory; top-level files (``""``) sort first."""
    groups: dict[str, list[FileRecord]] = {}
    for record in files:
        groups.setdefault(posixpath.dirname(record.path), []).append(record)
    return [
        (directory, sorted(groups[directory], key=lambda r: r.path))
        for directory in sorted(groups)
    ]


def _render_file(record: FileRecord, content: str) -> str:
    fence_end = "" if content.endswith("\n") else "\n"
    return (
        f"#### {record.path}\n"
        f"*Language: {record.language} | Size: {record.size} bytes*\n\n"
        f"```{syntax_tag(record.language)}\n"
        f"{content}{fence_end}"
        "```\n\n"
    )
