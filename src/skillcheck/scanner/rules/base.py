"""Rule and pattern definitions plus the per-document evaluation loop."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Iterator
from dataclasses import dataclass

from skillcheck.scanner.matching import (
    DEFAULT_CONTEXT_LINES,
    captured_value,
    column_of,
    context_window,
    has_keyword,
    is_placeholder,
    line_of,
)
from skillcheck.scanner.models import Finding, Severity

logger = logging.getLogger(__name__)


class PatternBudgetExceeded(RuntimeError):
    """A pattern ran past its evaluation time budget."""


@dataclass(frozen=True)
class Pattern:
    """A detection pattern with compiled regex and metadata."""

    name: str
    regex: re.Pattern[str]
    description: str
    severity: Severity | None = None
    min_length: int | None = None
    suppressible: bool = True


@dataclass(frozen=True)
class Rule:
    """A named detector made of patterns and a suppression keyword set."""

    id: str
    name: str
    severity: Severity
    description: str
    remediation: str
    cwe: str
    message_prefix: str
    patterns: tuple[Pattern, ...]
    suppression_keywords: tuple[re.Pattern[str], ...] = ()

    def evaluate(
        self,
        content: str,
        file_path: str = "",
        context_lines: int = DEFAULT_CONTEXT_LINES,
        time_budget: float | None = None,
    ) -> list[Finding]:
        """Run every pattern over ``content`` and return the findings.

        A pattern that raises (or overruns ``time_budget`` seconds) is
        logged and contributes nothing; the other patterns still run.
        """
        lines = content.split("\n")
        findings: list[Finding] = []

        for pattern in self.patterns:
            try:
                findings.extend(
                    self._evaluate_pattern(
                        pattern, content, lines, file_path, context_lines, time_budget
                    )
                )
            except Exception as e:
                logger.warning(
                    "Pattern '%s' of rule %s failed on %s: %s",
                    pattern.name,
                    self.id,
                    file_path or "<memory>",
                    e,
                )

        return findings

    def _evaluate_pattern(
        self,
        pattern: Pattern,
        content: str,
        lines: list[str],
        file_path: str,
        context_lines: int,
        time_budget: float | None,
    ) -> list[Finding]:
        findings: list[Finding] = []
        for match in _iter_matches(pattern, content, time_budget):
            value = captured_value(match)
            if pattern.min_length and len(value) < pattern.min_length:
                continue
            if is_placeholder(value):
                continue

            line = line_of(content, match.start())
            if pattern.suppressible and self.suppression_keywords:
                window = context_window(lines, line, context_lines)
                if has_keyword(window, self.suppression_keywords):
                    logger.debug(
                        "Suppressed %s at %s:%d", pattern.name, file_path, line
                    )
                    continue

            findings.append(
                Finding(
                    rule_id=self.id,
                    severity=pattern.severity or self.severity,
                    message=f"{self.message_prefix}: {pattern.description}",
                    file_path=file_path,
                    line=line,
                    column=column_of(content, match.start()),
                    snippet=lines[line].strip(),
                    remediation=self.remediation,
                    cwe=self.cwe,
                    pattern_name=pattern.name,
                )
            )
        return findings


def _iter_matches(
    pattern: Pattern,
    content: str,
    time_budget: float | None,
) -> Iterator[re.Match[str]]:
    """Yield all non-overlapping matches, enforcing the time budget between them."""
    if time_budget is None:
        yield from pattern.regex.finditer(content)
        return

    deadline = time.monotonic() + time_budget
    for match in pattern.regex.finditer(content):
        if time.monotonic() > deadline:
            raise PatternBudgetExceeded(
                f"exceeded {time_budget:.2f}s budget"
            )
        yield match
