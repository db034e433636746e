"""Domain exception hierarchy.

Each exception maps to a specific process exit code at the interface layer.
Inner layers raise these; the CLI error handler translates them.
"""

from __future__ import annotations


class ProjectDumpError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class ProjectNotFoundError(ProjectDumpError):
    """The supplied project root does not exist or is not a directory."""


# ── Traversal errors ────────────────────────────────────────────────────────


class ProjectScanError(ProjectDumpError):
    """A stat, listing or read failed while walking a project root."""


# ── Output errors ───────────────────────────────────────────────────────────


class OutputWriteError(ProjectDumpError):
    """The rendered report could not be written to its destination."""
