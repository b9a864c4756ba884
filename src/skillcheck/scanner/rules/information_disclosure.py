"""Information disclosure — reads of credentials, keys and system details."""

from __future__ import annotations

import re

from skillcheck.scanner.models import Severity
from skillcheck.scanner.rules.base import Pattern, Rule

REDACTION_KEYWORDS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(stem, re.IGNORECASE)
    for stem in (
        r"redact",
        r"filter",
        r"sanitiz",
        r"mask",
        r"obfuscate",
        r"strip",
        r"remove[_-]?sensitive",
    )
)

_READ = r"(?:read|cat|type|Get-Content)\s+"

# Only exposure and dump patterns have legitimate redacted uses, so only
# those honour nearby redaction keywords.
PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="env_exposure",
        regex=re.compile(
            r"(?:\bprintenv\b|\benv\s*$|^env\s|\bexport\s*$|^export\s"
            r"|\bprocess\.env\b|\bos\.environ\b|\bSystem\.getenv\b)",
            re.IGNORECASE | re.MULTILINE,
        ),
        description="Exposing environment variables (may contain secrets)",
    ),
    Pattern(
        name="passwd_read",
        regex=re.compile(_READ + r"(?:/etc/passwd|/etc/shadow)", re.IGNORECASE),
        description="Reading system password files",
        suppressible=False,
    ),
    Pattern(
        name="ssh_key_access",
        regex=re.compile(
            _READ + r".*?(?:\.ssh/id_rsa|\.ssh/id_ed25519|\.pem|authorized_keys)",
            re.IGNORECASE,
        ),
        description="Accessing SSH private keys or authorized keys",
        severity=Severity.CRITICAL,
        suppressible=False,
    ),
    Pattern(
        name="aws_credentials_access",
        regex=re.compile(_READ + r".*?(?:\.aws/credentials|\.aws/config)", re.IGNORECASE),
        description="Accessing AWS credential files",
        severity=Severity.CRITICAL,
        suppressible=False,
    ),
    Pattern(
        name="env_file_access",
        regex=re.compile(
            _READ + r".*?\.env(?:\.local|\.production)?(?:\s|$|[\"'])",
            re.IGNORECASE,
        ),
        description="Reading .env files containing sensitive configuration",
        suppressible=False,
    ),
    Pattern(
        name="database_dump",
        regex=re.compile(
            r"(?:mysqldump|pg_dump|mongodump|sqlite3\s+.*?\.dump)"
            r"(?!\s+--.*?(?:redact|mask|anonymize))",
            re.IGNORECASE,
        ),
        description="Database dump without apparent redaction",
    ),
    Pattern(
        name="private_key_assignment",
        regex=re.compile(r"(?:private[_-]?key|privateKey)\s*[=:]\s*['\"]", re.IGNORECASE),
        description="Private key assignment in code",
        severity=Severity.CRITICAL,
        suppressible=False,
    ),
    Pattern(
        name="system_info",
        regex=re.compile(
            r"(?:uname\s+-a|systeminfo|hostnamectl|cat\s+/proc/version|lsb_release)",
            re.IGNORECASE,
        ),
        description="Exposing detailed system information",
        severity=Severity.MEDIUM,
        suppressible=False,
    ),
    Pattern(
        name="network_config_exposure",
        regex=re.compile(
            r"(?:ifconfig|ip\s+addr|ipconfig\s+/all|netstat\s+-[rn])", re.IGNORECASE
        ),
        description="Exposing network configuration details",
        severity=Severity.MEDIUM,
    ),
    Pattern(
        name="browser_data_access",
        regex=re.compile(
            r"(?:read|cat)\s+.*?(?:cookies|History|Bookmarks)"
            r".*?(?:Chrome|Firefox|Safari|Edge)",
            re.IGNORECASE,
        ),
        description="Accessing browser history or cookies",
        suppressible=False,
    ),
    Pattern(
        name="git_credentials_exposure",
        regex=re.compile(
            _READ + r".*?(?:\.git-credentials|\.netrc|\.gitconfig)", re.IGNORECASE
        ),
        description="Accessing Git credential files",
    ),
    Pattern(
        name="docker_secrets_access",
        regex=re.compile(_READ + r"/run/secrets/", re.IGNORECASE),
        description="Accessing Docker secrets",
        suppressible=False,
    ),
    Pattern(
        name="kubernetes_secrets_access",
        regex=re.compile(r"kubectl\s+get\s+secret(?!s\s+--help)", re.IGNORECASE),
        description="Accessing Kubernetes secrets",
        suppressible=False,
    ),
    Pattern(
        name="connection_string_password",
        regex=re.compile(
            r"(?:connection[_-]?string|connStr|connectionString)\s*[=:]\s*"
            r"[\"'][^\"']*(?:password|pwd)=[^\"']*[\"']",
            re.IGNORECASE,
        ),
        description="Connection string with embedded password",
        severity=Severity.CRITICAL,
        suppressible=False,
    ),
    Pattern(
        name="process_list_exposure",
        regex=re.compile(
            r"\b(?:ps\s+aux|Get-Process|tasklist)(?!\s*\|\s*grep)", re.IGNORECASE
        ),
        description=(
            "Full process list disclosure "
            "(may contain sensitive info in command lines)"
        ),
        severity=Severity.MEDIUM,
    ),
    Pattern(
        name="sensitive_directory_listing",
        regex=re.compile(
            r"\b(?:ls|dir|Get-ChildItem)\s+.*?"
            r"(?:/root|/home/.*?/\.|C:\\Users\\.*?\\AppData)",
            re.IGNORECASE,
        ),
        description="Listing contents of sensitive directories",
        severity=Severity.MEDIUM,
        suppressible=False,
    ),
)

INFORMATION_DISCLOSURE_RULE = Rule(
    id="INFO_DISCLOSURE_001",
    name="Information Disclosure",
    severity=Severity.HIGH,
    description=(
        "Detects patterns that could lead to unauthorized disclosure "
        "of sensitive information"
    ),
    remediation=(
        "Avoid exposing sensitive files, credentials, or system information. "
        "Implement proper access controls and redaction for sensitive data."
    ),
    cwe="CWE-200",
    message_prefix="Potential information disclosure",
    patterns=PATTERNS,
    suppression_keywords=REDACTION_KEYWORDS,
)
