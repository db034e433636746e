"""Technology detection: multi-signal heuristic scoring.

Every accepted file is scored against every registered pattern:

* ``+3.0`` when the base name is one of the pattern's filenames,
* ``+2.0`` when the extension is one of the pattern's extensions,
* ``+0.5`` for each distinct keyword found in the lowercased content.

Scores are summed per technology over the whole project.  Technologies
above the threshold are normalised into a saturating confidence and ranked.
"""

from __future__ import annotations

import logging
from typing import Sequence

from projectdump.domain.entities import DetectedTechnology, FileRecord, TechPattern

logger = logging.getLogger(__name__)

# ── Scoring constants ───────────────────────────────────────────────────────

FILENAME_WEIGHT = 3.0
EXTENSION_WEIGHT = 2.0
KEYWORD_WEIGHT = 0.5

MIN_SCORE = 0.5
NORMALISATION = 10.0


class _CompiledPattern:
    """A pattern with extensions and keywords pre-lowered for matching."""

    __slots__ = ("pattern", "extensions", "keywords")

    def __init__(self, pattern: TechPattern) -> None:
        self.pattern = pattern
        self.extensions = frozenset(ext.lower() for ext in pattern.extensions)
        self.keywords = tuple(dict.fromkeys(kw.lower() for kw in pattern.keywords))

    def score(self, name: str, extension: str, content: str) -> float:
        score = 0.0
        if name in self.pattern.files:
            score += FILENAME_WEIGHT
        if extension in self.extensions:
            score += EXTENSION_WEIGHT
        matches = sum(1 for kw in self.keywords if kw in content)
        return score + matches * KEYWORD_WEIGHT


def confidence_for(score: float) -> float:
    """Map a raw score onto ``[0, 1]``; not a probability."""
    return min(1.0, max(0.0, score / NORMALISATION))


class TechnologyDetector:
    """Ranks the technologies used by a set of accepted files.

    Parameters
    ----------
    patterns:
        The detection table.  Names must be unique; order only matters for
        log output.
    """

    def __init__(self, patterns: Sequence[TechPattern]) -> None:
        seen: set[str] = set()
        for pattern in patterns:
            if pattern.name in seen:
                msg = f"Duplicate technology pattern name: '{pattern.name}'."
                raise ValueError(msg)
            seen.add(pattern.name)
        self._patterns = tuple(_CompiledPattern(p) for p in patterns)

    def detect(self, files: Sequence[FileRecord]) -> list[DetectedTechnology]:
        """Return detected technologies sorted by descending confidence.

        Ties are broken by raw score (descending) and then by name, so the
        ranking is deterministic for a given input order.
        """
        scores: dict[str, float] = {}
        contributors: dict[str, list[str]] = {}

        for record in files:
            name = record.name
            extension = record.extension
            content = record.content.lower()

            for compiled in self._patterns:
                score = compiled.score(name, extension, content)
                if score > 0:
                    tech = compiled.pattern.name
                    scores[tech] = scores.get(tech, 0.0) + score
                    contributors.setdefault(tech, []).append(record.path)

        detected: list[DetectedTechnology] = []
        for compiled in self._patterns:
            tech = compiled.pattern.name
            score = scores.get(tech, 0.0)
            if score <= MIN_SCORE:
                continue
            detected.append(
                DetectedTechnology(
                    name=tech,
                    confidence=confidence_for(score),
                    description=compiled.pattern.description,
                    files=tuple(contributors[tech]),
                    score=score,
                )
            )

        detected.sort(key=lambda t: (-t.confidence, -t.score, t.name))
        logger.debug(
            "Detected %d technologies: %s",
            len(detected),
            ", ".join(f"{t.name}={t.score:.1f}" for t in detected),
        )
        return detected


def primary_language(technologies: Sequence[DetectedTechnology]) -> str:
    """Name of the highest-ranked technology, or ``"Unknown"``."""
    return technologies[0].name if technologies else "Unknown"
