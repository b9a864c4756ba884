"""Scan engine — runs the rule set over documents and collects results."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from skillcheck.scanner.catalog import DEFAULT_CATALOG
from skillcheck.scanner.document import Document, is_within, parse_document
from skillcheck.scanner.matching import DEFAULT_CONTEXT_LINES
from skillcheck.scanner.models import ScanResult, Severity
from skillcheck.scanner.rules import Rule

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class ScanEngine:
    """Orchestrates rule evaluation across one or many documents.

    Rules are evaluated in order and their findings concatenated; the
    same line may be reported by several rules. Fenced code blocks are
    only filtered out when ``exclude_code_blocks`` is set.
    """

    def __init__(
        self,
        rules: Iterable[Rule] | None = None,
        exclude_code_blocks: bool = False,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        max_workers: int = DEFAULT_MAX_WORKERS,
        time_budget: float | None = None,
    ) -> None:
        self._rules = tuple(rules) if rules is not None else tuple(DEFAULT_CATALOG)
        self._exclude_code_blocks = exclude_code_blocks
        self._context_lines = context_lines
        self._max_workers = max(1, max_workers)
        self._time_budget = time_budget

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def scan(self, document: Document) -> ScanResult:
        """Scan a single document."""
        result = ScanResult(document=document)

        for rule in self._rules:
            findings = rule.evaluate(
                document.content,
                document.path,
                context_lines=self._context_lines,
                time_budget=self._time_budget,
            )
            if self._exclude_code_blocks:
                findings = [
                    f for f in findings if not is_within(f.line, document.excluded_spans)
                ]
            result.findings.extend(findings)

        logger.debug(
            "Scanned %s: %d finding(s)", document.path, len(result.findings)
        )
        return result

    def scan_many(self, documents: Sequence[Document]) -> list[ScanResult]:
        """Scan documents concurrently, returning results in input order."""
        if not documents:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(self.scan, documents))

    def scan_paths(self, paths: Sequence[str | Path]) -> list[ScanResult]:
        """Parse and scan files concurrently, returning results in input order.

        A file that cannot be read yields a result with ``error`` set and
        no findings; the rest of the batch is unaffected.
        """
        if not paths:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(self._scan_path, paths))

    def _scan_path(self, path: str | Path) -> ScanResult:
        try:
            document = parse_document(path)
        except OSError as e:
            logger.warning("Skipping %s: %s", path, e)
            return ScanResult(
                document=Document(path=str(path), name=Path(path).stem, content=""),
                error=str(e),
            )
        return self.scan(document)


def should_fail(results: Iterable[ScanResult], threshold: Severity) -> bool:
    """True if any finding is at or above ``threshold``."""
    return any(
        finding.severity.meets(threshold)
        for result in results
        for finding in result.findings
    )
