"""Extension → language label, and language label → fenced-code tag."""

from __future__ import annotations

_LANGUAGE_MAP: dict[str, str] = {
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".mjs": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".py": "Python",
    ".go": "Go",
    ".java": "Java",
    ".kt": "Kotlin",
    ".swift": "Swift",
    ".cs": "C#",
    ".cpp": "C++",
    ".cc": "C++",
    ".cxx": "C++",
    ".c": "C",
    ".h": "C/C++",
    ".hpp": "C++",
    ".rs": "Rust",
    ".php": "PHP",
    ".rb": "Ruby",
    ".css": "CSS",
    ".scss": "SCSS",
    ".sass": "Sass",
    ".less": "Less",
    ".html": "HTML",
    ".htm": "HTML",
    ".xml": "XML",
    ".json": "JSON",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".toml": "TOML",
    ".md": "Markdown",
    ".sh": "Shell",
    ".bash": "Bash",
    ".ps1": "PowerShell",
    ".sql": "SQL",
}

_SYNTAX_MAP: dict[str, str] = {
    "JavaScript": "javascript",
    "TypeScript": "typescript",
    "Python": "python",
    "Go": "go",
    "Java": "java",
    "Kotlin": "kotlin",
    "Swift": "swift",
    "C#": "csharp",
    "C++": "cpp",
    "C": "c",
    "C/C++": "cpp",
    "Rust": "rust",
    "PHP": "php",
    "Ruby": "ruby",
    "CSS": "css",
    "SCSS": "scss",
    "Sass": "sass",
    "Less": "less",
    "HTML": "html",
    "XML": "xml",
    "JSON": "json",
    "YAML": "yaml",
    "TOML": "toml",
    "Markdown": "markdown",
    "Shell": "bash",
    "Bash": "bash",
    "PowerShell": "powershell",
    "SQL": "sql",
}

DEFAULT_LANGUAGE = "Text"
DEFAULT_SYNTAX = "text"


def classify(extension: str) -> str:
    """Return the language label for a lowercase extension such as ``.py``."""
    return _LANGUAGE_MAP.get(extension, DEFAULT_LANGUAGE)


def syntax_tag(language: str) -> str:
    return _SYNTAX_MAP.get(language, DEFAULT_SYNTAX)
