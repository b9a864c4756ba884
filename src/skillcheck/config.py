"""Global configuration — defaults, YAML config file, env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from skillcheck.scanner.matching import DEFAULT_CONTEXT_LINES
from skillcheck.scanner.models import Severity

DEFAULT_CONFIG_FILE = ".skillcheck.yaml"
OUTPUT_FORMATS = ("console", "sarif")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class SkillCheckConfig:
    """Application-wide configuration."""

    fail_on: Severity = Severity.CRITICAL
    output_format: str = "console"
    exclude_code_blocks: bool = False
    context_lines: int = DEFAULT_CONTEXT_LINES
    max_workers: int = 8
    pattern_time_budget: float | None = None
    disabled_rules: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path | None = None) -> SkillCheckConfig:
        """Load config from a YAML file, then apply environment overrides.

        Without ``path`` the file ``.skillcheck.yaml`` in the working
        directory is used when it exists.
        """
        config = cls()

        if path is None and Path(DEFAULT_CONFIG_FILE).is_file():
            path = DEFAULT_CONFIG_FILE
        if path is not None:
            config._apply_file(Path(path))

        env_fail_on = os.environ.get("SKILLCHECK_FAIL_ON")
        if env_fail_on:
            config.fail_on = Severity.parse(env_fail_on)

        env_format = os.environ.get("SKILLCHECK_FORMAT")
        if env_format:
            config.output_format = parse_format(env_format)

        env_workers = os.environ.get("SKILLCHECK_MAX_WORKERS")
        if env_workers:
            config.max_workers = int(env_workers)

        env_exclude = os.environ.get("SKILLCHECK_EXCLUDE_CODE_BLOCKS")
        if env_exclude:
            config.exclude_code_blocks = _parse_bool(env_exclude)

        return config

    def _apply_file(self, path: Path) -> None:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        if data is None:
            return
        if not isinstance(data, dict):
            raise ValueError("Config YAML must be a mapping")

        if "fail_on" in data:
            self.fail_on = Severity.parse(str(data["fail_on"]))
        if "format" in data:
            self.output_format = parse_format(str(data["format"]))
        if "exclude_code_blocks" in data:
            self.exclude_code_blocks = _coerce_bool(data["exclude_code_blocks"])
        if "context_lines" in data:
            self.context_lines = int(data["context_lines"])
        if "max_workers" in data:
            self.max_workers = int(data["max_workers"])
        if "pattern_time_budget" in data:
            budget = data["pattern_time_budget"]
            self.pattern_time_budget = float(budget) if budget is not None else None

        disabled = data.get("disabled_rules", [])
        if isinstance(disabled, str):
            disabled = [disabled]
        self.disabled_rules = [str(rule_id) for rule_id in disabled]


def parse_format(value: str) -> str:
    fmt = value.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid format '{value}'. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )
    return fmt


def _coerce_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _parse_bool(value)
    raise ValueError(f"Invalid boolean value {value!r}")


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Invalid boolean value '{value}'")
