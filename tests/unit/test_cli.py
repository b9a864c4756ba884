"""Tests for the CLI using Click's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from skillcheck import __version__
from skillcheck.cli import main


def test_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "--format" in result.output
    assert "--fail-on" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_clean_file_passes(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(main, [str(fixtures_dir / "clean-skill.md")])
    assert result.exit_code == 0
    assert "No security issues found!" in result.output


def test_critical_finding_fails(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(main, [str(fixtures_dir / "vulnerable-secrets.md")])
    assert result.exit_code == 1
    assert "AWS Access Key" in result.output


def test_fail_on_threshold(tmp_path: Path):
    skill = tmp_path / "skill.md"
    skill.write_text("chmod 777 /srv\n")
    runner = CliRunner()

    result = runner.invoke(main, [str(skill)])
    assert result.exit_code == 0

    result = runner.invoke(main, ["--fail-on", "high", str(skill)])
    assert result.exit_code == 1


def test_rule_selection(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["--rule", "PATH_TRAVERSAL_001", str(fixtures_dir / "vulnerable-secrets.md")],
    )
    assert result.exit_code == 0


def test_unknown_rule(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["--rule", "NOPE", str(fixtures_dir)])
    assert result.exit_code == 1
    assert "Unknown rule" in result.output


def test_invalid_format(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["--format", "xml", str(fixtures_dir)])
    assert result.exit_code == 1
    assert "Invalid format" in result.output


def test_invalid_fail_on(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["--fail-on", "urgent", str(fixtures_dir)])
    assert result.exit_code == 1
    assert "Invalid severity" in result.output


def test_missing_path_argument():
    runner = CliRunner()
    result = runner.invoke(main, [])
    assert result.exit_code == 1
    assert "No path specified" in result.output


def test_nonexistent_path(tmp_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, [str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_no_files_found(tmp_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, [str(tmp_path)])
    assert result.exit_code == 0
    assert "No .md files found to scan." in result.output


def test_sarif_output(fixtures_dir: Path):
    runner = CliRunner()
    result = runner.invoke(
        main, ["--format", "sarif", str(fixtures_dir / "vulnerable-secrets.md")]
    )
    assert result.exit_code == 1
    log = json.loads(result.stdout)
    rule_ids = {r["ruleId"] for r in log["runs"][0]["results"]}
    assert "SECRET_EXPOSURE_001" in rule_ids


def test_sarif_written_to_file(fixtures_dir: Path, tmp_path: Path):
    out = tmp_path / "reports" / "scan.sarif"
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "--format",
            "SARIF",
            "--output",
            str(out),
            str(fixtures_dir / "clean-skill.md"),
        ],
    )
    assert result.exit_code == 0
    log = json.loads(out.read_text())
    assert log["runs"][0]["results"] == []


def test_exclude_code_blocks(tmp_path: Path):
    skill = tmp_path / "skill.md"
    skill.write_text("Example:\n\n```bash\nsudo reboot\n```\n")
    runner = CliRunner()

    assert runner.invoke(main, [str(skill)]).exit_code == 1
    result = runner.invoke(main, ["--exclude-code-blocks", str(skill)])
    assert result.exit_code == 0


def test_config_file(tmp_path: Path):
    skill = tmp_path / "skill.md"
    skill.write_text("chmod 777 /srv\n")
    config = tmp_path / "skillcheck.yaml"
    config.write_text("fail_on: HIGH\n")
    runner = CliRunner()
    result = runner.invoke(main, ["--config", str(config), str(skill)])
    assert result.exit_code == 1


def test_console_report_written_to_new_directory(fixtures_dir: Path, tmp_path: Path):
    out = tmp_path / "reports" / "scan.txt"
    runner = CliRunner()
    result = runner.invoke(
        main, ["--output", str(out), str(fixtures_dir / "vulnerable-secrets.md")]
    )
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert result.exit_code == 1
    assert "Security Scan Results" in out.read_text()
