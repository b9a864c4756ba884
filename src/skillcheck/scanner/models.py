"""Scanner data models — severities, findings and scan results."""

from __future__ import annotations

import enum
import functools
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field

from skillcheck.scanner.document import Document


@functools.total_ordering
class Severity(enum.Enum):
    """Finding severity level, ordered CRITICAL > HIGH > MEDIUM > LOW."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        """Position in the severity order; CRITICAL is 0."""
        return _RANKS[self]

    def meets(self, threshold: Severity) -> bool:
        """True if this severity is at or above ``threshold``."""
        return self.rank <= threshold.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    @classmethod
    def parse(cls, text: str) -> Severity:
        """Parse a severity name in any case."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Invalid severity '{text}'. Must be one of: {choices}"
            ) from None


_RANKS = {severity: index for index, severity in enumerate(Severity)}


@dataclass(frozen=True)
class Finding:
    """A single reported occurrence of a suspected issue."""

    rule_id: str
    severity: Severity
    message: str
    file_path: str
    line: int
    remediation: str
    cwe: str = ""
    column: int | None = None
    snippet: str = ""
    pattern_name: str = ""

    def to_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass
class ScanResult:
    """Findings produced for one document."""

    document: Document
    findings: list[Finding] = field(default_factory=list)
    error: str | None = None

    @property
    def path(self) -> str:
        return self.document.path

    @property
    def failed(self) -> bool:
        """Whether the document could not be read."""
        return self.error is not None

    @property
    def highest_severity(self) -> Severity | None:
        if not self.findings:
            return None
        return max(f.severity for f in self.findings)

    def count_by(self, severity: Severity) -> int:
        return sum(1 for f in self.findings if f.severity == severity)


def count_by_severity(results: Iterable[ScanResult]) -> dict[Severity, int]:
    """Total finding counts per severity across results, in severity order."""
    counts = {severity: 0 for severity in Severity}
    for result in results:
        for finding in result.findings:
            counts[finding.severity] += 1
    return counts
