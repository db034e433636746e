"""Local filesystem adapter: implements the FileSource port."""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterator

from projectdump.domain.entities import FsEntry
from projectdump.domain.exceptions import ProjectNotFoundError, ProjectScanError

logger = logging.getLogger(__name__)


class LocalFileSource:
    """Concrete FileSource backed by ``os.scandir``.

    Symlinks are never followed while walking: a link is reported as a file
    with its own ``lstat`` size, and reading it resolves the target.
    """

    def iter_files(self, root: str, prune: Callable[[str], bool]) -> Iterator[FsEntry]:
        if not os.path.isdir(root):
            raise ProjectNotFoundError(f"Project path is not a directory: '{root}'")
        yield from self._walk(root, "", prune)

    def read_bytes(self, path: str) -> bytes:
        try:
            with open(path, "rb") as fh:
                return fh.read()
        except OSError as exc:
            raise ProjectScanError(f"Cannot read '{path}': {exc}") from exc

    def _walk(
        self, directory: str, rel_dir: str, prune: Callable[[str], bool]
    ) -> Iterator[FsEntry]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            raise ProjectScanError(f"Cannot list '{directory}': {exc}") from exc

        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                # lstat size: a symlink reports its own size, the read follows the target.
                size = 0 if is_dir else entry.stat(follow_symlinks=False).st_size
            except OSError as exc:
                raise ProjectScanError(f"Cannot stat '{entry.path}': {exc}") from exc

            if is_dir:
                if prune(entry.name):
                    logger.debug("Pruned directory %s", rel_path)
                    continue
                yield from self._walk(entry.path, rel_path, prune)
            else:
                yield FsEntry(path=entry.path, rel_path=rel_path, name=entry.name, size=size)
