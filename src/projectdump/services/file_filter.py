"""File filtering: decide which filesystem entries are worth dumping."""

from __future__ import annotations

import posixpath

from projectdump.domain.entities import FilterDecision
from projectdump.domain.rules import FilterRules


def _extension(name: str) -> str:
    return posixpath.splitext(name)[1].lower()


class FileFilter:
    """Applies :class:`FilterRules` to directories, names, sizes and content.

    The checks are exposed individually so the scanner can account for
    sizes between the name checks and the content checks.
    """

    def __init__(self, rules: FilterRules) -> None:
        self._rules = rules

    @property
    def rules(self) -> FilterRules:
        return self._rules

    def is_ignored_dir(self, name: str) -> bool:
        """Return *True* if a directory called *name* must not be descended."""
        return name in self._rules.ignored_dirs

    def is_important_dotfile(self, name: str) -> bool:
        stem = posixpath.splitext(name)[0]
        return name in self._rules.important_dotfiles or stem in self._rules.important_dotfiles

    def check_name(self, name: str) -> FilterDecision:
        """Extension and dotfile rules; no I/O needed."""
        if _extension(name) in self._rules.ignored_extensions:
            return FilterDecision.IGNORED_EXTENSION
        if name.startswith(".") and not self.is_important_dotfile(name):
            return FilterDecision.HIDDEN_FILE
        return FilterDecision.ACCEPT

    def check_size(self, size: int) -> FilterDecision:
        if size > self._rules.max_file_size:
            return FilterDecision.TOO_LARGE
        return FilterDecision.ACCEPT

    def is_binary(self, content: bytes) -> bool:
        """Null byte in the leading sniff window means binary; empty is text."""
        if not content:
            return False
        return b"\x00" in content[: self._rules.binary_sniff_bytes]

    def evaluate(
        self,
        name: str,
        is_dir: bool = False,
        size: int = 0,
        content: bytes | None = None,
    ) -> FilterDecision:
        """Run every applicable rule in precedence order for one entry.

        *content* may be omitted when it has not been read yet, in which case
        the binary check is skipped.
        """
        if is_dir:
            return FilterDecision.PRUNE if self.is_ignored_dir(name) else FilterDecision.ACCEPT

        decision = self.check_name(name)
        if decision is not FilterDecision.ACCEPT:
            return decision
        decision = self.check_size(size)
        if decision is not FilterDecision.ACCEPT:
            return decision
        if content is not None and self.is_binary(content):
            return FilterDecision.BINARY
        return FilterDecision.ACCEPT
