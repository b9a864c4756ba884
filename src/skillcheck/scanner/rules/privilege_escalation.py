"""Privilege escalation — elevated execution and permission changes."""

from __future__ import annotations

import re

from skillcheck.scanner.models import Severity
from skillcheck.scanner.rules.base import Pattern, Rule

AUTHORIZATION_KEYWORDS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(stem, re.IGNORECASE)
    for stem in (
        r"authori[zs]ation",
        r"permission",
        r"access[_-]?control",
        r"check[_-]?admin",
        r"require[_-]?root",
        r"verify[_-]?user",
    )
)

PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="sudo",
        regex=re.compile(r"\bsudo\s+(?!-[vklnA]\b)[^\n;|&]+", re.IGNORECASE),
        description="Execution of commands with sudo (elevated privileges)",
    ),
    Pattern(
        name="setuid_call",
        regex=re.compile(r"\b(?:setuid|setgid|seteuid|setegid)\s*\(", re.IGNORECASE),
        description="Setting user/group ID for privilege escalation (setuid/setgid)",
    ),
    # chmod patterns describe the file itself; authorization talk nearby
    # does not make them safer.
    Pattern(
        name="chmod_setuid_bit",
        regex=re.compile(
            r"chmod\s+(?:-R\s+)?(?:[ugoa]*\+[rwx]*s|[2467][0-7]{3}\b)", re.IGNORECASE
        ),
        description="Setting setuid/setgid bit on files",
        severity=Severity.HIGH,
        suppressible=False,
    ),
    Pattern(
        name="chmod_world_writable",
        regex=re.compile(r"chmod\s+(?:-R\s+)?[0-7]?[0-7][0-7][2367]\b", re.IGNORECASE),
        description="Overly permissive file permissions",
        severity=Severity.HIGH,
        suppressible=False,
    ),
    Pattern(
        name="su_root",
        regex=re.compile(r"\bsu\s+(?:-\s+)?(?:root|admin)", re.IGNORECASE),
        description="Switching to root or admin user",
    ),
    Pattern(
        name="pkexec",
        regex=re.compile(r"\bpkexec\s+[^\n;|&]+", re.IGNORECASE),
        description="PolicyKit command execution with elevated privileges",
    ),
    Pattern(
        name="doas",
        regex=re.compile(r"\bdoas\s+[^\n;|&]+", re.IGNORECASE),
        description="OpenBSD doas command execution with elevated privileges",
    ),
    Pattern(
        name="runas_admin",
        regex=re.compile(r"RunAs\s+(?:Administrator|TrustedInstaller)", re.IGNORECASE),
        description="Windows UAC bypass or privilege escalation",
    ),
    Pattern(
        name="system_file_write",
        regex=re.compile(
            r"(?:write|edit|modify|append|>|>>)\s+"
            r"(?:/etc/|/sys/|/proc/|/boot/|C:\\Windows\\)",
            re.IGNORECASE,
        ),
        description="Direct modification of system directories",
    ),
    Pattern(
        name="kernel_module",
        regex=re.compile(r"\b(?:insmod|modprobe|kextload)\s+[^\n;|&]+", re.IGNORECASE),
        description="Loading kernel modules (requires root)",
    ),
    Pattern(
        name="docker_socket",
        regex=re.compile(r"/var/run/docker\.sock", re.IGNORECASE),
        description="Direct access to Docker socket (equivalent to root)",
        severity=Severity.HIGH,
    ),
)

PRIVILEGE_ESCALATION_RULE = Rule(
    id="PRIV_ESCALATION_001",
    name="Privilege Escalation",
    severity=Severity.CRITICAL,
    description=(
        "Detects patterns that could lead to privilege escalation "
        "or unauthorized elevated access"
    ),
    remediation=(
        "Avoid running commands with elevated privileges. If required, "
        "implement proper authorization checks and use principle of "
        "least privilege."
    ),
    cwe="CWE-250",
    message_prefix="Potential privilege escalation",
    patterns=PATTERNS,
    suppression_keywords=AUTHORIZATION_KEYWORDS,
)
