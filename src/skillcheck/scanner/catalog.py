"""Rule catalog — a fixed, ordered, read-only collection of rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from skillcheck.scanner.models import Severity
from skillcheck.scanner.rules import BUILTIN_RULES, Rule


class RuleCatalog:
    """An immutable ordered set of rules with lookup helpers."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules = tuple(rules)
        ids = [rule.id for rule in self._rules]
        if len(set(ids)) != len(ids):
            raise ValueError("Rule ids must be unique")

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return self.get(rule_id) is not None  # type: ignore[arg-type]

    @property
    def ids(self) -> list[str]:
        return [rule.id for rule in self._rules]

    def get(self, rule_id: str) -> Rule | None:
        """Look up a rule by identifier."""
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def by_severity(self, severity: Severity) -> list[Rule]:
        """Rules whose default severity equals ``severity``."""
        return [rule for rule in self._rules if rule.severity == severity]

    def by_ids(self, ids: Iterable[str]) -> list[Rule]:
        """Rules whose id is in ``ids``, in catalog order."""
        wanted = set(ids)
        return [rule for rule in self._rules if rule.id in wanted]

    def without(self, ids: Iterable[str]) -> RuleCatalog:
        """A new catalog with the given rule ids removed."""
        dropped = set(ids)
        return RuleCatalog(rule for rule in self._rules if rule.id not in dropped)


DEFAULT_CATALOG = RuleCatalog(BUILTIN_RULES)
