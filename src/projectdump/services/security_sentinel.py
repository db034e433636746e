"""Security sentinel: optional secret redaction for dumped file contents.

Patterns are pre-compiled once.  Matching errs on the side of
over-redaction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

REDACTION = "[REDACTED]"

# ── Compiled patterns ───────────────────────────────────────────────────────

_SECRET_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("private_key", re.compile(r"-----BEGIN (?:RSA |EC |DSA |OPENSSH )?PRIVATE KEY-----")),
    ("aws_access_key", re.compile(r"\b(?:AKIA|ASIA)[0-9A-Z]{16}\b")),
    ("github_token", re.compile(r"\bgh[pousr]_[A-Za-z0-9_]{36,}")),
    ("slack_token", re.compile(r"\bxox[abposr]-[A-Za-z0-9-]{10,}")),
    ("stripe_key", re.compile(r"\b[sr]k_live_[A-Za-z0-9]{16,}")),
    ("google_api_key", re.compile(r"\bAIza[0-9A-Za-z_\-]{35}")),
    ("jwt", re.compile(r"\beyJ[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}")),
    (
        "connection_string",
        re.compile(r"\b(?:postgres(?:ql)?|mysql|mongodb(?:\+srv)?|redis|amqp)://\S{10,}", re.I),
    ),
    (
        "bearer_token",
        re.compile(r"""\bBearer\s+[A-Za-z0-9_\-/.=+]{20,}""", re.I),
    ),
    (
        "api_key_assignment",
        re.compile(
            r"(?:api[_\-]?key|apikey|secret[_\-]?key|access[_\-]?token|auth[_\-]?token)"
            r"""\s*[:=]\s*['"]?[A-Za-z0-9_\-/+]{20,}['"]?""",
            re.I,
        ),
    ),
    (
        "password_assignment",
        re.compile(
            r"""(?:password|passwd|pwd|secret|credential)\s*[:=]\s*['"]?[^\s'"]{8,}['"]?""",
            re.I,
        ),
    ),
)


@dataclass(frozen=True, slots=True)
class SanitizedResult:
    """Cleaned text plus how many matches of each pattern were replaced."""

    clean_text: str
    counts: dict[str, int] = field(default_factory=dict)

    @property
    def redaction_count(self) -> int:
        return sum(self.counts.values())


def sanitize(text: str) -> SanitizedResult:
    """Replace every secret-looking span in *text* with ``[REDACTED]``.

    Patterns run from most to least specific so a token inside an assignment
    is attributed to its own label.
    """
    counts: dict[str, int] = {}
    for label, pattern in _SECRET_PATTERNS:
        text, num = pattern.subn(REDACTION, text)
        if num:
            counts[label] = num
    return SanitizedResult(clean_text=text, counts=counts)
