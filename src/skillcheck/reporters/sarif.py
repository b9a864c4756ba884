"""SARIF 2.1.0 reporter for code-scanning integrations."""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime, timezone

from skillcheck import __version__
from skillcheck.scanner.catalog import DEFAULT_CATALOG, RuleCatalog
from skillcheck.scanner.models import Finding, ScanResult, Severity

SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/"
    "Schemata/sarif-schema-2.1.0.json"
)
SARIF_VERSION = "2.1.0"
INFORMATION_URI = "https://github.com/agentigy/skillcheck"

_LEVELS = {
    Severity.CRITICAL: "error",
    Severity.HIGH: "error",
    Severity.MEDIUM: "warning",
    Severity.LOW: "note",
}

# GitHub code scanning ranks alerts by this 0-10 score
_SECURITY_SEVERITY = {
    Severity.CRITICAL: "9.0",
    Severity.HIGH: "7.0",
    Severity.MEDIUM: "5.0",
    Severity.LOW: "3.0",
}


class SarifReporter:
    """Builds a SARIF log with one rule per rule id and one result per finding."""

    def __init__(self, catalog: RuleCatalog = DEFAULT_CATALOG) -> None:
        self._catalog = catalog

    def render(self, results: Sequence[ScanResult]) -> str:
        return json.dumps(self.generate(results), indent=2)

    def generate(self, results: Sequence[ScanResult]) -> dict:
        findings = [f for result in results for f in result.findings]
        return {
            "$schema": SARIF_SCHEMA,
            "version": SARIF_VERSION,
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "skillcheck",
                            "informationUri": INFORMATION_URI,
                            "version": __version__,
                            "rules": self._rules(findings),
                        }
                    },
                    "results": [_result(f) for f in findings],
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "endTimeUtc": datetime.now(timezone.utc)
                            .isoformat(timespec="milliseconds")
                            .replace("+00:00", "Z"),
                        }
                    ],
                }
            ],
        }

    def _rules(self, findings: Sequence[Finding]) -> list[dict]:
        """One descriptor per distinct rule id, in first-seen order."""
        first: dict[str, Finding] = {}
        highest: dict[str, Severity] = {}
        for finding in findings:
            first.setdefault(finding.rule_id, finding)
            current = highest.get(finding.rule_id)
            if current is None or finding.severity > current:
                highest[finding.rule_id] = finding.severity

        descriptors = []
        for rule_id, finding in first.items():
            rule = self._catalog.get(rule_id)
            name = rule.name if rule else rule_id
            short = rule.description if rule else finding.message
            help_text = finding.remediation
            if finding.cwe:
                help_text += f"\n\nReference: {finding.cwe}"
            tags = ["security"]
            if finding.cwe:
                tags.append(finding.cwe)

            descriptors.append(
                {
                    "id": rule_id,
                    "name": name,
                    "shortDescription": {"text": short},
                    "fullDescription": {"text": finding.remediation},
                    "help": {"text": help_text},
                    "properties": {
                        "tags": tags,
                        "security-severity": _SECURITY_SEVERITY[highest[rule_id]],
                    },
                }
            )
        return descriptors


def _result(finding: Finding) -> dict:
    region: dict[str, object] = {"startLine": finding.line + 1}
    if finding.column is not None:
        region["startColumn"] = finding.column + 1
    if finding.snippet:
        region["snippet"] = {"text": finding.snippet}

    result: dict[str, object] = {
        "ruleId": finding.rule_id,
        "level": _LEVELS[finding.severity],
        "message": {"text": finding.message},
        "locations": [
            {
                "physicalLocation": {
                    "artifactLocation": {"uri": finding.file_path},
                    "region": region,
                }
            }
        ],
    }
    if finding.cwe:
        result["properties"] = {"cwe": finding.cwe}
    return result
