"""Command injection — shell execution with interpolated variables."""

from __future__ import annotations

import re

from skillcheck.scanner.models import Severity
from skillcheck.scanner.rules.base import Pattern, Rule

VALIDATION_KEYWORDS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(stem, re.IGNORECASE)
    for stem in (
        r"validat",
        r"sanitiz",
        r"escape",
        r"allow[_-]?list",
        r"whitelist",
        r"filter",
        r"check",
    )
)

PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="bash_interpolation",
        regex=re.compile(
            r"bash[^;{]*(?:command|cmd|c)[^;{]*['\"]\s*.*?[$\{]\w+",
            re.IGNORECASE,
        ),
        description="Shell command execution with variable interpolation",
    ),
    Pattern(
        name="eval_variables",
        regex=re.compile(r"\beval\s*\([^)]*[$\{]\w+", re.IGNORECASE),
        description="Dynamic code evaluation with variables (eval)",
    ),
    Pattern(
        name="exec_variables",
        regex=re.compile(r"\bexec\s*\([^)]*[$\{]\w+", re.IGNORECASE),
        description="Code execution with variables (exec)",
    ),
    Pattern(
        name="subprocess_shell",
        regex=re.compile(
            r"subprocess\.[^(]+\([^)]*shell\s*=\s*True", re.IGNORECASE
        ),
        description="Python subprocess with shell enabled",
        severity=Severity.HIGH,
    ),
    Pattern(
        name="os_system",
        regex=re.compile(r"os\.system\s*\([^)]*[$\{]\w+", re.IGNORECASE),
        description="Direct system command execution with variables",
    ),
    Pattern(
        name="child_process_exec",
        regex=re.compile(r"child_process\.exec\s*\([^)]*[$\{`]\w+", re.IGNORECASE),
        description="Node.js command execution with variables",
        severity=Severity.HIGH,
    ),
    Pattern(
        name="command_parameter",
        regex=re.compile(
            r"<parameter name=\"command\">[^<]*[$\{](?:user|input|request|param)",
            re.IGNORECASE,
        ),
        description="Bash tool command parameter with user input",
        severity=Severity.HIGH,
    ),
)

COMMAND_INJECTION_RULE = Rule(
    id="CMD_INJECTION_001",
    name="Command Injection",
    severity=Severity.CRITICAL,
    description="Detects potential command injection vulnerabilities in shell commands",
    remediation=(
        "Validate and sanitize all user inputs. Use parameterized commands "
        "or allowlists. Avoid shell=True."
    ),
    cwe="CWE-78",
    message_prefix="Potential command injection",
    patterns=PATTERNS,
    suppression_keywords=VALIDATION_KEYWORDS,
)
