"""Shared matching helpers — offsets, context windows and placeholders."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

DEFAULT_CONTEXT_LINES = 3

# Values that look like documentation stand-ins rather than real secrets
PLACEHOLDER_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"your[_-]?api[_-]?key", re.IGNORECASE),
    re.compile(r"your[_-]?token", re.IGNORECASE),
    re.compile(r"your[_-]?secret", re.IGNORECASE),
    re.compile(r"^\*+$"),  # redacted, e.g. "****"
    re.compile(r"^x{4,}$", re.IGNORECASE),
    re.compile(r"^example", re.IGNORECASE),
    re.compile(r"placeholder", re.IGNORECASE),
    re.compile(r"replace[_-]?me", re.IGNORECASE),
    re.compile(r"^\$\{?\w+\}?$"),  # ${API_KEY} or $TOKEN
]


def is_placeholder(value: str) -> bool:
    """Check if a matched value is a known placeholder."""
    return any(p.search(value) for p in PLACEHOLDER_PATTERNS)


def line_of(text: str, offset: int) -> int:
    """0-indexed line number of a character offset."""
    return text.count("\n", 0, offset)


def column_of(text: str, offset: int) -> int:
    """0-indexed column of a character offset within its line."""
    return offset - (text.rfind("\n", 0, offset) + 1)


def captured_value(match: re.Match[str]) -> str:
    """The first capturing group if it matched something, else the whole match."""
    if match.re.groups and match.group(1):
        return match.group(1)
    return match.group(0)


def context_window(
    lines: Sequence[str],
    line: int,
    radius: int = DEFAULT_CONTEXT_LINES,
) -> str:
    """Join the lines within ``radius`` of ``line`` (inclusive)."""
    start = max(0, line - radius)
    end = min(len(lines) - 1, line + radius)
    return "\n".join(lines[start : end + 1])


def has_keyword(text: str, keywords: Iterable[re.Pattern[str]]) -> bool:
    return any(k.search(text) for k in keywords)
