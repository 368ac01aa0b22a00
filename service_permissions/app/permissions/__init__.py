"""
Permissions package.

Permission kinds describe what is being checked: a kind, a target name, an
optional action and the permissions a check depends on. The registry turns
application objects into permissions.
"""

from .models import Permission
from .kinds import (
    Space, Resource, SpacePermission, ResourcePermission, CustomPermission
)
from .registry import PermissionKind, PermissionRegistry, build_default_registry

__all__ = [
    "Permission",
    "Space",
    "Resource",
    "SpacePermission",
    "ResourcePermission",
    "CustomPermission",
    "PermissionKind",
    "PermissionRegistry",
    "build_default_registry",
]
