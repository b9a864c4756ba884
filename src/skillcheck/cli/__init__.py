"""CLI entry point — skillcheck <path>."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml
from rich.console import Console
from rich.markup import escape

from skillcheck import __version__
from skillcheck.config import SkillCheckConfig, parse_format
from skillcheck.reporters import ConsoleReporter, SarifReporter
from skillcheck.scanner.catalog import DEFAULT_CATALOG
from skillcheck.scanner.discovery import find_skill_files
from skillcheck.scanner.engine import ScanEngine, should_fail
from skillcheck.scanner.models import Severity

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__, prog_name="skillcheck")
@click.argument("path", required=False, type=click.Path())
@click.option(
    "--format",
    "output_format",
    default=None,
    metavar="[console|sarif]",
    help="Output format. [default: console]",
)
@click.option(
    "--fail-on",
    default=None,
    metavar="[CRITICAL|HIGH|MEDIUM|LOW]",
    help="Exit 1 if issues of this severity or higher are found. [default: CRITICAL]",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the report to a file instead of stdout.",
)
@click.option(
    "--rule",
    "-r",
    "rule_ids",
    multiple=True,
    help="Only run these rule ids (repeatable).",
)
@click.option(
    "--exclude-code-blocks/--include-code-blocks",
    default=None,
    help="Ignore findings inside fenced code blocks.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML config file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(
    path: str | None,
    output_format: str | None,
    fail_on: str | None,
    output: str | None,
    rule_ids: tuple[str, ...],
    exclude_code_blocks: bool | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Scan skill descriptor files for security vulnerabilities."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # All option validation happens before anything is scanned
    try:
        config = SkillCheckConfig.load(config_path)
        if output_format is not None:
            config.output_format = parse_format(output_format)
        if fail_on is not None:
            config.fail_on = Severity.parse(fail_on)
    except (ValueError, OSError, yaml.YAMLError) as e:
        _fail(str(e))

    if exclude_code_blocks is not None:
        config.exclude_code_blocks = exclude_code_blocks

    catalog = DEFAULT_CATALOG.without(config.disabled_rules)
    if rule_ids:
        unknown = [r for r in rule_ids if r not in DEFAULT_CATALOG]
        if unknown:
            _fail(
                f"Unknown rule id(s): {', '.join(unknown)}. "
                f"Available: {', '.join(DEFAULT_CATALOG.ids)}"
            )
        rules = catalog.by_ids(rule_ids)
    else:
        rules = list(catalog)

    if not path:
        _fail("No path specified", show_usage=True)

    try:
        files = find_skill_files(path)
    except FileNotFoundError as e:
        _fail(str(e))

    logger.debug("Discovered %d file(s) under %s", len(files), path)
    if not files:
        err_console.print("No .md files found to scan.")
        return

    engine = ScanEngine(
        rules=rules,
        exclude_code_blocks=config.exclude_code_blocks,
        context_lines=config.context_lines,
        max_workers=config.max_workers,
        time_budget=config.pattern_time_budget,
    )
    results = engine.scan_paths(files)

    if config.output_format == "sarif":
        payload = SarifReporter().render(results)
        if output:
            _write_file(output, payload + "\n")
        else:
            click.echo(payload)
    elif output:
        buffer = io.StringIO()
        ConsoleReporter(Console(file=buffer, width=120)).report(results)
        _write_file(output, buffer.getvalue())
    else:
        ConsoleReporter(Console()).report(results)

    if should_fail(results, config.fail_on):
        sys.exit(1)


def _fail(message: str, show_usage: bool = False) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    if show_usage:
        click.echo(click.get_current_context().get_help(), err=True)
    sys.exit(1)


def _write_file(output: str, payload: str) -> None:
    output_file = Path(output)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(payload, encoding="utf-8")
    err_console.print(f"Report written to {output}")
