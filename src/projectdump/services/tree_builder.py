"""Directory tree construction and box-drawing rendering."""

from __future__ import annotations

from typing import Sequence

from projectdump.domain.entities import FileRecord, TreeNode

_BRANCH = "├── "
_LAST_BRANCH = "└── "
_PIPE = "│   "
_SPACE = "    "


def build_tree(files: Sequence[FileRecord]) -> TreeNode:
    """Insert every file path into a fresh root node.

    Directories are created lazily and shared by all files below them.
    Children keep insertion order; sorting happens at render time.
    """
    root = TreeNode()
    for record in files:
        parts = [part for part in record.path.split("/") if part]
        current = root
        for index, part in enumerate(parts):
            current = current.add_child(part, is_file=index == len(parts) - 1)
    return root


def render_tree(root: TreeNode) -> str:
    """Render *root*'s descendants, one per line, children sorted by name."""
    lines: list[str] = []
    _render_children(root, "", lines)
    return "".join(f"{line}\n" for line in lines)


def _render_children(node: TreeNode, prefix: str, lines: list[str]) -> None:
    names = sorted(node.children)
    for index, name in enumerate(names):
        is_last = index == len(names) - 1
        lines.append(prefix + (_LAST_BRANCH if is_last else _BRANCH) + name)
        _render_children(
            node.children[name],
            prefix + (_SPACE if is_last else _PIPE),
            lines,
        )

