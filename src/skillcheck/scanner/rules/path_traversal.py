"""Path traversal — file operations on unvalidated, user-controlled paths."""

from __future__ import annotations

import re

from skillcheck.scanner.models import Severity
from skillcheck.scanner.rules.base import Pattern, Rule

PATH_VALIDATION_KEYWORDS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(stem, re.IGNORECASE)
    for stem in (
        r"path\.resolve",
        r"path\.normalize",
        r"validat.*path",
        r"sanitiz.*path",
        r"allow[_-]?list",
        r"whitelist",
        r"realpath",
    )
)

PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="traversal_sequence",
        regex=re.compile(r"\.\.[/\\]"),
        description="Path traversal sequence (../) detected",
    ),
    Pattern(
        name="path_from_user_input",
        regex=re.compile(
            r"(?:file_?path|path|filename)\s*=\s*f?[\"'][^\"']*"
            r"\{(?:user|input|request|param|filename)",
            re.IGNORECASE,
        ),
        description="File path constructed with user input",
    ),
    # One entry covers the Read, Write and Edit tools: they share the
    # file_path parameter.
    Pattern(
        name="file_tool_parameter",
        regex=re.compile(
            r"<parameter name=\"file_path\">[^<]*[$\{](?:user|input|request|param)",
            re.IGNORECASE,
        ),
        description="Read/Write/Edit tool file_path parameter with user input",
    ),
    Pattern(
        name="fs_call_variables",
        regex=re.compile(
            r"(?:readFile|writeFile|appendFile)\s*\(\s*"
            r"(?:[$\{`]\w+|(?:user|input|param|request)\w*)",
            re.IGNORECASE,
        ),
        description="File system operation with variables (readFile/writeFile)",
    ),
    Pattern(
        name="python_open_variables",
        regex=re.compile(r"\bopen\s*\([^)]*[$\{]\w+", re.IGNORECASE),
        description="Python open() with variables",
        severity=Severity.MEDIUM,
    ),
)

PATH_TRAVERSAL_RULE = Rule(
    id="PATH_TRAVERSAL_001",
    name="Path Traversal",
    severity=Severity.HIGH,
    description="Detects potential path traversal vulnerabilities in file operations",
    remediation=(
        "Validate file paths using path.resolve() or path.normalize(). "
        "Use allowlists for permitted directories."
    ),
    cwe="CWE-22",
    message_prefix="Potential path traversal",
    patterns=PATTERNS,
    suppression_keywords=PATH_VALIDATION_KEYWORDS,
)
