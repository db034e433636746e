"""Port: file source, defined by the domain and implemented by infrastructure."""

from __future__ import annotations

from typing import Callable, Iterator, Protocol

from projectdump.domain.entities import FsEntry


class FileSource(Protocol):
    """Abstract contract for walking a project tree and reading its files."""

    def iter_files(self, root: str, prune: Callable[[str], bool]) -> Iterator[FsEntry]:
        """Yield every file below *root* depth-first in lexical order.

        Directories whose base name satisfies *prune* are skipped entirely.
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Return the raw content of the file at *path*."""
        ...
