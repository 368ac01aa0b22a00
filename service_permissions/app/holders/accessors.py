"""
may / may_access accessors for permission holders.
"""

from typing import Any, Optional

from shared.errors import HolderNotConfiguredError, UnavailableActionError, ValidationError
from ..permissions.models import Permission
from ..permissions.registry import PermissionRegistry
from ..rules.keys import segment


class PermissionAccessors:
    """Adds may?-style checks to any class providing has_permission()."""

    permission_registry: Optional[PermissionRegistry] = None
    strict_actions: bool = True

    def has_permission(self, permission: Permission) -> bool:
        raise HolderNotConfiguredError(
            f"{self.__class__.__name__} is not set up as a permission holder"
        )

    def _resolve(self, target: Any, action: Optional[Any] = None) -> Permission:
        if isinstance(target, Permission):
            return target
        if self.permission_registry is None:
            raise HolderNotConfiguredError(
                f"{self.__class__.__name__} has no permission registry"
            )
        return self.permission_registry.resolve(target, action)

    def may(self, action: Any, target: Any) -> bool:
        """Determine whether the holder may perform an action on a target.

        The target may be anything the registry can resolve into a permission.
        """
        permission = self._resolve(target, action)
        if segment(action) != permission.action:
            raise ValidationError(
                f"action '{action}' does not match the action of {permission!r}",
                details={"action": segment(action), "permission_action": permission.action}
            )
        if self.strict_actions and permission.action not in permission.available_actions():
            raise UnavailableActionError(
                str(permission.action),
                str(permission.kind),
                details={"available_actions": sorted(permission.available_actions())}
            )

        return self.has_permission(permission)

    def may_access(self, target: Any) -> bool:
        """Check a permission without querying a specific action."""
        return self.has_permission(self._resolve(target))

    def may_not(self, action: Any, target: Any) -> bool:
        return not self.may(action, target)

    def may_not_access(self, target: Any) -> bool:
        return not self.may_access(target)
