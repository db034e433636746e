"""Tests for the static extension → language table."""

from __future__ import annotations

import pytest

from projectdump.services.file_classifier import classify, syntax_tag


class TestClassify:
    @pytest.mark.parametrize(
        ("extension", "language"),
        [
            (".go", "Go"),
            (".tsx", "TypeScript"),
            (".h", "C/C++"),
            (".yml", "YAML"),
            (".sh", "Shell"),
            (".md", "Markdown"),
        ],
    )
    def test_known_extensions(self, extension: str, language: str):
        assert classify(extension) == language

    @pytest.mark.parametrize("extension", ["", ".mod", ".unknownext"])
    def test_unknown_is_text(self, extension: str):
        assert classify(extension) == "Text"


class TestSyntaxTag:
    @pytest.mark.parametrize(
        ("language", "tag"),
        [("C/C++", "cpp"), ("Shell", "bash"), ("Bash", "bash"), ("Go", "go"), ("C#", "csharp")],
    )
    def test_known_languages(self, language: str, tag: str):
        assert syntax_tag(language) == tag

    def test_unknown_language(self):
        assert syntax_tag("Text") == "text"

    def test_every_classified_language_has_a_tag(self):
        for extension in [".js", ".py", ".rs", ".php", ".rb", ".css", ".html", ".json", ".sql"]:
            assert syntax_tag(classify(extension)) != "text"
