"""Hardcoded secrets — API keys, tokens, private keys and credentials."""

from __future__ import annotations

import re

from skillcheck.scanner.models import Severity
from skillcheck.scanner.rules.base import Pattern, Rule

# Secrets are never suppressed by nearby keywords; placeholder values and
# minimum lengths are the only exclusions.
PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="aws_access_key",
        regex=re.compile(r"AKIA[0-9A-Z]{16}"),
        description="AWS Access Key",
        suppressible=False,
    ),
    Pattern(
        name="aws_secret_key",
        regex=re.compile(
            r"aws.{0,20}?(?:secret|access).{0,20}?['\"]\s*([A-Za-z0-9/+=]{40})\s*['\"]",
            re.IGNORECASE,
        ),
        description="AWS Secret Key",
        min_length=40,
        suppressible=False,
    ),
    Pattern(
        name="generic_api_key",
        regex=re.compile(
            r"api[_-]?key\s*[=:]\s*['\"]\s*([A-Za-z0-9_\-]{20,})\s*['\"]",
            re.IGNORECASE,
        ),
        description="Generic API Key",
        min_length=20,
        suppressible=False,
    ),
    Pattern(
        name="jwt_token",
        regex=re.compile(r"eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_.\-+/]+"),
        description="JWT Token",
        suppressible=False,
    ),
    Pattern(
        name="private_key",
        regex=re.compile(r"-----BEGIN\s+(?:RSA\s+|EC\s+)?PRIVATE\s+KEY-----"),
        description="Private Key",
        suppressible=False,
    ),
    Pattern(
        name="github_token",
        regex=re.compile(r"gh[ps]_[A-Za-z0-9_]{36,}"),
        description="GitHub Token",
        suppressible=False,
    ),
    Pattern(
        name="generic_secret",
        regex=re.compile(
            r"(?:secret|token|password)\s*[=:]\s*['\"]\s*([A-Za-z0-9_\-!@#$%^&*]{16,})\s*['\"]",
            re.IGNORECASE,
        ),
        description="Generic Secret/Token",
        min_length=16,
        suppressible=False,
    ),
)

SECRETS_RULE = Rule(
    id="SECRET_EXPOSURE_001",
    name="Hardcoded Secrets",
    severity=Severity.CRITICAL,
    description="Detects hardcoded secrets such as API keys, tokens, and credentials",
    remediation=(
        "Remove hardcoded secrets and use environment variables "
        "or secure secret management"
    ),
    cwe="CWE-798",
    message_prefix="Potential hardcoded secret",
    patterns=PATTERNS,
)
