"""
Rule base for the Permission Rules Service.

A rule base is always queried for one permission. The permission itself and
every permission it depends on are run through the rule base, and the last
defined rule (the rule with the highest index) matching *any* of them
decides.

Example, with a resource permission depending on its space permission:

1. Deny all
2. Allow space 'crm'
3. Deny resource 'account'

Checking resource 'account' expands to [space:crm, resource:account]. The
space permission matches rules 1 and 2, the resource permission rules 1
and 3. Rule 3 is the last match, so access is denied. Swap rules 2 and 3
and the allow on space 'crm' becomes the last match, overruling the more
specific resource rule.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from shared.errors import MalformedRuleError
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from .keys import permission_match_keys


@dataclass(frozen=True)
class Decision:
    """Result of running a permission through a rule base."""
    allowed: bool
    reason: str
    rule_index: Optional[int] = None
    rule_key: Optional[str] = None
    matched_keys: Tuple[str, ...] = field(default_factory=tuple)
    evaluation_time_ms: float = 0.0


class RuleBase:
    """Indexed, immutable view over an ordered rule sequence.

    Rules may be any objects exposing a string ``key`` and a boolean
    ``allow``. Index 0 has the lowest priority, the last rule the highest.
    """

    def __init__(self, rules: Iterable[Any], metrics: Optional[MetricsCollector] = None):
        self.logger = get_logger("permissions.rule_base")
        self.metrics = metrics
        self._rules: Tuple[Any, ...] = tuple(rules)
        self._index: Dict[str, int] = self._build_index()

        if self.metrics:
            self.metrics.record_rule_base_build(len(self._rules))
        self.logger.debug("Rule base built", rules=len(self._rules), keys=len(self._index))

    @property
    def rules(self) -> Tuple[Any, ...]:
        return self._rules

    @property
    def index(self) -> Dict[str, int]:
        """Mapping of rule key to the highest index bearing that key."""
        return dict(self._index)

    def __len__(self) -> int:
        return len(self._rules)

    def _build_index(self) -> Dict[str, int]:
        index: Dict[str, int] = {}

        for idx, rule in enumerate(self._rules):
            key = getattr(rule, "key", None)
            allow = getattr(rule, "allow", None)
            if not isinstance(key, str) or not key:
                raise MalformedRuleError(
                    "Rule has no computable key",
                    details={"index": idx, "rule": repr(rule)}
                )
            if not isinstance(allow, bool):
                raise MalformedRuleError(
                    "Rule allow flag must be true or false",
                    details={"index": idx, "rule": repr(rule)}
                )

            # Later duplicates shadow earlier ones
            index[key] = idx

        return index

    def lookup(self, key: str) -> Optional[Any]:
        """Return the deciding rule for a key, if any rule carries it."""
        idx = self._index.get(key)
        return None if idx is None else self._rules[idx]

    def run(self, permission: Any) -> bool:
        """Run a permission through the rule base.

        Returns True if the permission is allowed, False if not.
        """
        return self.evaluate(permission).allowed

    def evaluate(self, permission: Any) -> Decision:
        """Run a permission through the rule base and report the deciding rule."""
        start_time = time.time()

        last_rule_index: Optional[int] = None
        matched_keys: List[str] = []

        for dependency in permission.with_dependencies():
            keys = permission_match_keys(dependency.kind, dependency.name, dependency.action)

            for key in keys:
                idx = self._index.get(key)
                if idx is None:
                    continue
                if key not in matched_keys:
                    matched_keys.append(key)
                if last_rule_index is None or idx > last_rule_index:
                    last_rule_index = idx

        if last_rule_index is None:
            # The default policy is to deny the permission if no rules match
            reason = "Rule base is empty" if not self._rules else "No applicable rules matched"
            decision = Decision(
                allowed=False,
                reason=reason,
                evaluation_time_ms=(time.time() - start_time) * 1000
            )
        else:
            rule = self._rules[last_rule_index]
            decision = Decision(
                allowed=rule.allow,
                reason=f"Rule '{rule.key}' matched",
                rule_index=last_rule_index,
                rule_key=rule.key,
                matched_keys=tuple(matched_keys),
                evaluation_time_ms=(time.time() - start_time) * 1000
            )

        if self.metrics:
            self.metrics.record_permission_check(decision.allowed, decision.evaluation_time_ms / 1000)

        self.logger.debug(
            "Permission evaluated",
            allowed=decision.allowed,
            reason=decision.reason,
            rule_index=decision.rule_index
        )
        return decision
