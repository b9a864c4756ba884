"""Console reporter — human-readable scan summary using rich."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skillcheck.scanner.models import (
    Finding,
    ScanResult,
    Severity,
    count_by_severity,
)

_SEVERITY_COLORS = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}


class ConsoleReporter:
    """Prints a summary followed by findings grouped per document."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def report(self, results: Sequence[ScanResult]) -> None:
        console = self._console
        total = sum(len(r.findings) for r in results)
        with_issues = sum(1 for r in results if r.findings)

        console.print("\n[bold]Security Scan Results[/bold]")
        console.print("=" * 50 + "\n")
        console.print(f"Files scanned: {len(results)}")
        console.print(f"Files with issues: {with_issues}")
        console.print(f"Total findings: {total}\n")

        failed = [r for r in results if r.failed]
        for result in failed:
            console.print(
                f"[yellow]Could not read {escape(result.path)}: "
                f"{escape(result.error or '')}[/yellow]"
            )

        if total == 0:
            console.print("[bold green]No security issues found![/bold green]\n")
            return

        counts = count_by_severity(results)
        table = Table(title="Findings by severity", show_lines=False)
        table.add_column("Severity", style="bold", width=10)
        table.add_column("Count", justify="right")
        for severity, count in counts.items():
            if count:
                color = _SEVERITY_COLORS[severity]
                table.add_row(f"[{color}]{severity.value}[/{color}]", str(count))
        console.print(table)

        console.print("\n[bold]Issues Found:[/bold]")
        for result in results:
            if not result.findings:
                continue
            console.print(f"\n[bold]{escape(result.document.name)}[/bold]")
            for finding in result.findings:
                self._print_finding(finding)

        console.print("\n" + "=" * 50)
        if counts[Severity.CRITICAL]:
            console.print("[bold red]Critical security issues found![/bold red]")
        elif counts[Severity.HIGH]:
            console.print("[bold yellow]High severity issues found![/bold yellow]")
        console.print()

    def _print_finding(self, finding: Finding) -> None:
        console = self._console
        color = _SEVERITY_COLORS[finding.severity]
        line = finding.line + 1

        console.print(
            f"\n[bold {color}]\\[{finding.severity.value}][/bold {color}] "
            f"{escape(finding.message)}"
        )
        console.print(f"  [dim]{escape(finding.file_path)}:{line}[/dim]")
        if finding.snippet:
            console.print(f"  [cyan]{line}:[/cyan] {escape(finding.snippet)}")
        console.print(f"  [dim]Fix: {escape(finding.remediation)}[/dim]")
        if finding.cwe:
            console.print(f"  [dim]Reference: {finding.cwe}[/dim]")
