"""
Permission Rules Service wiring.
"""

from typing import Any, Iterable, Optional

from shared.base_service import BaseService
from shared.config import ServiceConfig, get_config
from shared.errors import PermissionsException
from shared.logging import set_request_id

from .holders.holder import PermissionHolder, RuleSource
from .permissions.registry import PermissionRegistry, build_default_registry
from .rules.engine import Decision, RuleBase


class PermissionService(BaseService):
    """Permission service implementation."""
    
    def __init__(self, config: Optional[ServiceConfig] = None, registry: Optional[PermissionRegistry] = None):
        super().__init__("permissions", config)
        
        self.registry = registry or build_default_registry()
        if not self.registry.frozen:
            self.registry.freeze()
        
        self.logger.info("Permission kinds loaded", kinds=self.registry.kinds)
    
    def holder(self, holder_id: str, rules: RuleSource) -> PermissionHolder:
        """Create a holder bound to this service's registry and metrics."""
        return PermissionHolder(
            holder_id,
            rules,
            registry=self.registry,
            metrics=self.metrics,
            strict_actions=self.config.strict_actions
        )
    
    def check(self, rules: Iterable[Any], target: Any, action: Optional[Any] = None) -> Decision:
        """Run a one-off check of a target against a rule list."""
        set_request_id()
        try:
            permission = self.registry.resolve(target, action)
            return RuleBase(rules, metrics=self.metrics).evaluate(permission)
        except PermissionsException as e:
            if self.metrics:
                self.metrics.record_error(e.code)
            self.logger.error("Permission check failed", code=e.code, error=e.message)
            raise


def create_service(**overrides) -> PermissionService:
    """Create a service with configuration overrides."""
    return PermissionService(get_config("permissions", **overrides))
