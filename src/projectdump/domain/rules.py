"""Filter rules: immutable tables handed to the file filter at construction."""

from __future__ import annotations

from dataclasses import dataclass, replace

IGNORED_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".svn",
        ".hg",
        "vendor",
        "__pycache__",
        ".idea",
        ".vscode",
        "build",
        "dist",
        "target",           # Rust / Java
        "bin",
        "obj",
        ".next",
        ".nuxt",
        "coverage",
        ".nyc_output",
        "logs",
        "tmp",
        "temp",
    }
)

IGNORED_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".exe", ".dll", ".so", ".dylib",
        ".zip", ".tar", ".gz", ".rar",
        ".jpg", ".jpeg", ".png", ".gif", ".bmp",
        ".mp4", ".avi", ".mov", ".mp3", ".wav",
        ".pdf", ".doc", ".docx", ".xls", ".xlsx",
        ".class", ".jar", ".war",
        ".o", ".obj", ".lib", ".a",
        ".pyc", ".pyo", ".pyd",
    }
)

IMPORTANT_DOTFILES: frozenset[str] = frozenset(
    {
        ".gitignore",
        ".dockerignore",
        ".env",
        ".env.example",
        ".eslintrc",
        ".prettierrc",
        ".babelrc",
        ".travis.yml",
        ".github",
    }
)

MAX_FILE_SIZE = 1024 * 1024
BINARY_SNIFF_BYTES = 512


@dataclass(frozen=True, slots=True)
class FilterRules:
    """Everything the file filter needs to accept or reject an entry."""

    ignored_dirs: frozenset[str] = IGNORED_DIRS
    ignored_extensions: frozenset[str] = IGNORED_EXTENSIONS
    important_dotfiles: frozenset[str] = IMPORTANT_DOTFILES
    max_file_size: int = MAX_FILE_SIZE
    binary_sniff_bytes: int = BINARY_SNIFF_BYTES

    def with_limits(self, max_file_size: int, binary_sniff_bytes: int) -> FilterRules:
        """Return a copy with different size and sniff limits."""
        if max_file_size < 0 or binary_sniff_bytes <= 0:
            msg = "max_file_size must be >= 0 and binary_sniff_bytes > 0."
            raise ValueError(msg)
        return replace(
            self,
            max_file_size=max_file_size,
            binary_sniff_bytes=binary_sniff_bytes,
        )


DEFAULT_FILTER_RULES = FilterRules()
