"""Tests for TechnologyDetector: scoring, threshold, ranking."""

from __future__ import annotations

import pytest

from projectdump.domain.entities import FileRecord, TechPattern
from projectdump.services.tech_detector import (
    TechnologyDetector,
    confidence_for,
    primary_language,
)
from projectdump.services.tech_patterns import DEFAULT_TECH_PATTERNS


def _record(path: str, content: str = "") -> FileRecord:
    return FileRecord(path=path, size=len(content.encode()), content=content)


def _by_name(detected):
    return {t.name: t for t in detected}


@pytest.fixture
def detector() -> TechnologyDetector:
    return TechnologyDetector(DEFAULT_TECH_PATTERNS)


class TestScoring:
    def test_filename_match_scores_three(self):
        detector = TechnologyDetector([TechPattern(name="Go", files=frozenset({"go.mod"}))])
        (go,) = detector.detect([_record("go.mod", "module x")])
        assert go.score == pytest.approx(3.0)
        assert go.confidence == pytest.approx(0.3)

    def test_filename_match_only_counts_once(self):
        pattern = TechPattern(name="Node", files=frozenset({"package.json"}))
        detector = TechnologyDetector([pattern])
        (node,) = detector.detect([_record("package.json")])
        assert node.score == pytest.approx(3.0)

    def test_extension_match_case_insensitive(self):
        pattern = TechPattern(name="Go", extensions=frozenset({".go"}))
        (go,) = TechnologyDetector([pattern]).detect([_record("cmd/MAIN.GO")])
        assert go.score == pytest.approx(2.0)

    def test_keywords_are_cumulative_and_case_insensitive(self):
        pattern = TechPattern(name="Docker", keywords=("FROM ", "RUN ", "CMD "))
        content = "from alpine\nrun apk add git\n"
        (docker,) = TechnologyDetector([pattern]).detect([_record("build.txt", content)])
        assert docker.score == pytest.approx(1.0)

    def test_duplicate_keywords_count_once(self):
        pattern = TechPattern(name="X", keywords=("abc", "ABC", "def"))
        (tech,) = TechnologyDetector([pattern]).detect([_record("f.txt", "abc def")])
        assert tech.score == pytest.approx(1.0)

    def test_scores_accumulate_across_files(self):
        pattern = TechPattern(name="Go", extensions=frozenset({".go"}))
        detected = TechnologyDetector([pattern]).detect(
            [_record("a.go"), _record("b.go"), _record("c.go")]
        )
        assert detected[0].score == pytest.approx(6.0)
        assert detected[0].files == ("a.go", "b.go", "c.go")

    def test_file_listed_once_per_technology(self):
        pattern = TechPattern(
            name="Go",
            files=frozenset({"main.go"}),
            extensions=frozenset({".go"}),
            keywords=("package ", "func "),
        )
        (go,) = TechnologyDetector([pattern]).detect([_record("main.go", "package x\nfunc y")])
        assert go.files == ("main.go",)
        assert go.score == pytest.approx(6.0)


class TestThreshold:
    def test_single_keyword_is_not_enough(self):
        pattern = TechPattern(name="Java", keywords=("package ",))
        assert TechnologyDetector([pattern]).detect([_record("x.txt", "package a")]) == []

    def test_two_keywords_pass_threshold(self):
        pattern = TechPattern(name="Java", keywords=("package ", "import java"))
        detected = TechnologyDetector([pattern]).detect([_record("x.txt", "package a import java")])
        assert [t.name for t in detected] == ["Java"]

    def test_empty_pattern_never_scores(self):
        detector = TechnologyDetector([TechPattern(name="Nothing")])
        assert detector.detect([_record("a.py", "anything at all")]) == []

    def test_no_files_no_technologies(self, detector: TechnologyDetector):
        detected = detector.detect([])
        assert detected == []
        assert primary_language(detected) == "Unknown"


class TestConfidence:
    def test_confidence_saturates(self):
        assert confidence_for(25.0) == 1.0
        assert confidence_for(5.0) == pytest.approx(0.5)

    def test_all_confidences_in_unit_interval(self, detector: TechnologyDetector):
        files = [_record(f"src/f{i}.js", "require('x'); module.exports = {}") for i in range(20)]
        for tech in detector.detect(files):
            assert 0.0 <= tech.confidence <= 1.0
            assert tech.score > 0.5


class TestRanking:
    def test_sorted_by_descending_confidence(self, detector: TechnologyDetector):
        files = [
            _record("go.mod", "module x"),
            _record("main.go", "package main\nfunc main(){}"),
            _record("style.css", "body { color: red; }"),
        ]
        detected = detector.detect(files)
        confidences = [t.confidence for t in detected]
        assert confidences == sorted(confidences, reverse=True)
        assert detected[0].name == "Go"

    def test_ties_broken_by_score_then_name(self):
        patterns = [
            TechPattern(name="Zeta", extensions=frozenset({".z"})),
            TechPattern(name="Alpha", extensions=frozenset({".a1"})),
            TechPattern(name="Big", extensions=frozenset({".b"})),
        ]
        files = [_record(f"{i}.z") for i in range(6)]
        files += [_record(f"{i}.a1") for i in range(6)]
        files += [_record(f"{i}.b") for i in range(8)]
        detected = TechnologyDetector(patterns).detect(files)
        assert [t.confidence for t in detected] == [1.0, 1.0, 1.0]
        assert [t.name for t in detected] == ["Big", "Alpha", "Zeta"]

    def test_deterministic(self, detector: TechnologyDetector):
        files = [_record("package.json", "{}"), _record("index.js", "require('a')")]
        assert detector.detect(files) == detector.detect(files)


class TestGoScenario:
    def test_go_mod_always_credits_go(self, detector: TechnologyDetector):
        go = _by_name(detector.detect([_record("go.mod", "")]))["Go"]
        assert go.score >= 3.0

    def test_go_project(self, detector: TechnologyDetector):
        files = [
            _record("main.go", "package main\nfunc main(){}"),
            _record("go.mod", "module x"),
        ]
        detected = detector.detect(files)
        go = _by_name(detected)["Go"]
        # go.mod filename 3.0 + .go extension 2.0 + "package " and "func " 1.0
        assert go.confidence == pytest.approx(0.6)
        assert go.files == ("main.go", "go.mod")
        assert go.description == "Go programming language"
        assert primary_language(detected) == "Go"


class TestPatternTable:
    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            TechnologyDetector([TechPattern(name="Go"), TechPattern(name="Go")])

    def test_default_names_unique(self):
        names = [p.name for p in DEFAULT_TECH_PATTERNS]
        assert len(names) == len(set(names))


class TestLanguageOverlap:
    def test_java_project_is_not_csharp(self, detector: TechnologyDetector):
        files = [_record(f"src/C{i}.java", f"package app;\npublic class C{i} {{}}") for i in range(20)]
        files.append(_record("pom.xml", "<project></project>"))
        names = _by_name(detector.detect(files))
        assert names["Java"].confidence == 1.0
        assert "C#" not in names

    def test_python_words_do_not_yield_kotlin(self, detector: TechnologyDetector):
        content = "def poll(interval = 5): return interval \n"
        files = [_record(f"pkg/m{i}.py", content) for i in range(3)]
        names = _by_name(detector.detect(files))
        assert "Python" in names
        assert "Kotlin" not in names

    def test_csharp_and_kotlin_still_detected(self, detector: TechnologyDetector):
        cs = "using System;\nnamespace Demo { class A { public int X { get; set; } } }"
        kt = "import kotlin.math.max\nfun main() { println(max(1, 2)) }"
        names = _by_name(detector.detect([_record("A.cs", cs), _record("Main.kt", kt)]))
        assert names["C#"].score >= 2.0 + 1.5
        assert names["Kotlin"].score >= 2.0 + 1.0
