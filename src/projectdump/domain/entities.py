"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from enum import Enum


class FilterDecision(str, Enum):
    """Outcome of the file filter for a single filesystem entry."""

    ACCEPT = "accept"
    PRUNE = "prune"
    IGNORED_EXTENSION = "ignored_extension"
    HIDDEN_FILE = "hidden_file"
    TOO_LARGE = "too_large"
    BINARY = "binary"


@dataclass(frozen=True, slots=True)
class FsEntry:
    """A file yielded by a file source during traversal."""

    path: str  # absolute, host separators
    rel_path: str  # root-relative, always "/"-separated
    name: str
    size: int


@dataclass(frozen=True, slots=True)
class FileRecord:
    """An accepted file with its decoded content."""

    path: str
    size: int
    content: str
    language: str = "Text"

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def extension(self) -> str:
        return posixpath.splitext(self.name)[1].lower()


@dataclass(frozen=True, slots=True)
class TechPattern:
    """Detection rule for one technology."""

    name: str
    files: frozenset[str] = frozenset()
    extensions: frozenset[str] = frozenset()
    keywords: tuple[str, ...] = ()
    description: str = ""


@dataclass(frozen=True, slots=True)
class DetectedTechnology:
    """A technology that passed the detection threshold."""

    name: str
    confidence: float
    description: str
    files: tuple[str, ...] = ()
    score: float = 0.0


@dataclass(slots=True)
class TreeNode:
    """A directory or file in the rendered project hierarchy."""

    name: str = ""
    is_file: bool = False
    children: dict[str, TreeNode] = field(default_factory=dict)

    def add_child(self, name: str, is_file: bool) -> TreeNode:
        """Return the child called *name*, creating it if needed.

        An existing child is reused; when it is reached again as an
        intermediate segment it becomes a directory.
        """
        child = self.children.get(name)
        if child is None:
            child = TreeNode(name=name, is_file=is_file)
            self.children[name] = child
        elif not is_file:
            child.is_file = False
        return child


@dataclass(frozen=True, slots=True)
class ProjectSummary:
    """Aggregate statistics for one scanned project root."""

    root: str
    total_files: int
    processed_files: int
    total_size: int
    technologies: tuple[DetectedTechnology, ...] = ()
    primary_language: str = "Unknown"


@dataclass(frozen=True, slots=True)
class ProjectScan:
    """Everything the report needs about one project."""

    summary: ProjectSummary
    files: tuple[FileRecord, ...] = ()
