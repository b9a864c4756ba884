"""Output renderers for scan results."""

from skillcheck.reporters.console import ConsoleReporter
from skillcheck.reporters.sarif import SarifReporter

__all__ = ["ConsoleReporter", "SarifReporter"]
