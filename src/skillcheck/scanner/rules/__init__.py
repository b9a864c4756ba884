"""Built-in security rules, in catalog order."""

from skillcheck.scanner.rules.base import Pattern, PatternBudgetExceeded, Rule
from skillcheck.scanner.rules.command_injection import COMMAND_INJECTION_RULE
from skillcheck.scanner.rules.information_disclosure import (
    INFORMATION_DISCLOSURE_RULE,
)
from skillcheck.scanner.rules.path_traversal import PATH_TRAVERSAL_RULE
from skillcheck.scanner.rules.privilege_escalation import PRIVILEGE_ESCALATION_RULE
from skillcheck.scanner.rules.secrets import SECRETS_RULE

BUILTIN_RULES: tuple[Rule, ...] = (
    SECRETS_RULE,
    COMMAND_INJECTION_RULE,
    PATH_TRAVERSAL_RULE,
    PRIVILEGE_ESCALATION_RULE,
    INFORMATION_DISCLOSURE_RULE,
)

__all__ = [
    "BUILTIN_RULES",
    "COMMAND_INJECTION_RULE",
    "INFORMATION_DISCLOSURE_RULE",
    "PATH_TRAVERSAL_RULE",
    "PRIVILEGE_ESCALATION_RULE",
    "SECRETS_RULE",
    "Pattern",
    "PatternBudgetExceeded",
    "Rule",
]
