"""
Permission holder composition.

A holder owns a reference to its rule collection and lazily builds a
RuleBase from it. The cached rule base is only dropped by an explicit
invalidate_rule_base() or rule_base(reload=True).
"""

import threading
from typing import Any, Callable, Iterable, Optional, Union

from shared.logging import get_logger, holder_context
from shared.metrics import MetricsCollector
from ..permissions.models import Permission
from ..permissions.registry import PermissionRegistry
from ..rules.engine import Decision, RuleBase
from .accessors import PermissionAccessors

RuleSource = Union[Iterable[Any], Callable[[], Iterable[Any]]]


class PermissionHolder(PermissionAccessors):
    """Something that can be granted or denied permissions, e.g. a user or a group."""
    
    def __init__(
        self,
        holder_id: str,
        rules: RuleSource,
        registry: Optional[PermissionRegistry] = None,
        metrics: Optional[MetricsCollector] = None,
        strict_actions: bool = True
    ):
        self.holder_id = holder_id
        self.permission_registry = registry
        self.strict_actions = strict_actions
        self.metrics = metrics
        self.logger = get_logger("permissions.holder")
        self._rules = rules
        self._rule_base: Optional[RuleBase] = None
        self._lock = threading.Lock()
    
    def _load_rules(self) -> Iterable[Any]:
        if callable(self._rules):
            return self._rules()
        return self._rules
    
    def rule_base(self, reload: bool = False) -> RuleBase:
        """Return the cached rule base, building it on first use or on reload."""
        with self._lock:
            if reload or self._rule_base is None:
                self._rule_base = RuleBase(self._load_rules(), metrics=self.metrics)
                self.logger.info(
                    "Rule base built for holder",
                    holder_id=self.holder_id,
                    rules=len(self._rule_base)
                )
            return self._rule_base
    
    def invalidate_rule_base(self) -> None:
        """Drop the cached rule base so the next check rebuilds it."""
        with self._lock:
            self._rule_base = None
        self.logger.info("Rule base invalidated", holder_id=self.holder_id)
    
    def has_permission(self, permission: Permission) -> bool:
        """Determine whether this holder has the given permission."""
        return self.evaluate(permission).allowed
    
    def evaluate(self, permission: Permission) -> Decision:
        with holder_context(self.holder_id):
            return self.rule_base().evaluate(permission)
