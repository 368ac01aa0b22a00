"""
Permission kind registry.

Maps permission kinds to their classes and resolves arbitrary targets into
permissions. A registry is built once, frozen, and then passed to whoever
needs it.
"""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

from shared.errors import (
    DuplicatePermissionKindError, PermissionResolutionError,
    RegistryFrozenError, ValidationError
)
from shared.logging import get_logger
from .models import Permission
from .kinds import (
    SpacePermission, ResourcePermission, CustomPermission,
    resolve_space, resolve_resource, resolve_custom
)

Resolver = Callable[[Any], Optional[Any]]
Lister = Callable[[], Iterable[Any]]


@dataclass(frozen=True)
class PermissionKind:
    """A registered permission kind."""
    kind: str
    permission_class: Type[Permission]
    resolver: Optional[Resolver] = None
    lister: Optional[Lister] = None


class PermissionRegistry:
    """Registry of permission kinds."""
    
    def __init__(self):
        self.logger = get_logger("permissions.registry")
        self._kinds: Dict[str, PermissionKind] = {}
        self._frozen = False
        self._lock = threading.Lock()
    
    @property
    def frozen(self) -> bool:
        return self._frozen
    
    @property
    def kinds(self) -> List[str]:
        """Registered kinds, in registration order."""
        return list(self._kinds)
    
    def __contains__(self, kind: str) -> bool:
        return kind in self._kinds
    
    def get(self, kind: str) -> Optional[PermissionKind]:
        return self._kinds.get(kind)
    
    def register(
        self,
        permission_class: Type[Permission],
        resolver: Optional[Resolver] = None,
        lister: Optional[Lister] = None
    ) -> PermissionKind:
        """Register a permission class under its kind.
        
        The resolver turns a target into the object the permission is built
        around, returning None when it does not apply. The lister returns every
        target of the kind known to the application.
        """
        if not isinstance(permission_class, type) or not issubclass(permission_class, Permission):
            raise ValidationError(
                f"{permission_class!r} cannot be registered as a permission kind: "
                "it should be derived from Permission"
            )
        kind = permission_class.kind
        if not kind:
            raise ValidationError(
                f"{permission_class.__name__} cannot be registered as a permission kind: it declares no kind"
            )
        
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"cannot register kind '{kind}'",
                    details={"kind": kind}
                )
            if kind in self._kinds:
                raise DuplicatePermissionKindError(kind)
            
            entry = PermissionKind(kind, permission_class, resolver, lister)
            self._kinds[kind] = entry
        
        self.logger.debug("Permission kind registered", kind=kind, permission_class=permission_class.__name__)
        return entry
    
    def freeze(self) -> "PermissionRegistry":
        """Prevent further registrations."""
        with self._lock:
            self._frozen = True
        return self
    
    def resolve(self, target: Any, action: Optional[Any] = None) -> Permission:
        """Resolve a target into a permission.
        
        Permissions are returned as is. Otherwise every kind with a resolver is
        tried in registration order and the first non-None result is wrapped
        in that kind's permission class.
        """
        if isinstance(target, Permission):
            return target
        
        for entry in self._kinds.values():
            if entry.resolver is None:
                continue
            resolved = entry.resolver(target)
            if resolved is not None:
                return entry.permission_class(resolved, action)
        
        self.logger.warning("Permission resolution failed", target=repr(target))
        raise PermissionResolutionError(
            f"target {target!r} could not be resolved into a permission",
            details={"kinds": self.kinds}
        )
    
    def available_permissions(self) -> Dict[str, List[Permission]]:
        """List every available permission, organized by kind."""
        available: Dict[str, List[Permission]] = {}
        
        for kind, entry in self._kinds.items():
            if entry.lister is None:
                continue
            available[kind] = [entry.permission_class(target) for target in entry.lister()]
        
        return available


def build_default_registry(
    spaces: Optional[Lister] = None,
    resources: Optional[Lister] = None,
    custom: Optional[Lister] = None
) -> PermissionRegistry:
    """Build a frozen registry holding the shipped permission kinds."""
    registry = PermissionRegistry()
    registry.register(ResourcePermission, resolver=resolve_resource, lister=resources)
    registry.register(SpacePermission, resolver=resolve_space, lister=spaces)
    registry.register(CustomPermission, resolver=resolve_custom, lister=custom)
    return registry.freeze()
