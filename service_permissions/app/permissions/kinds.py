"""
Permission kinds shipped with the service.

- SpacePermission: access to a space (a collection of resources).
- ResourcePermission: access to a resource; requires access to its space.
- CustomPermission: application-defined permissions named by a string.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional

from .models import Permission


@dataclass(frozen=True)
class Space:
    """A named collection of resources."""
    name: str


@dataclass(frozen=True)
class Resource:
    """A named resource living in a space."""
    name: str
    space: Optional[Space] = None


class SpacePermission(Permission):
    kind = "space"


class ResourcePermission(Permission):
    kind = "resource"

    ACTIONS = frozenset({"view", "create", "update", "delete"})

    def available_actions(self) -> FrozenSet[str]:
        return self.ACTIONS

    def dependencies(self) -> List[Permission]:
        space = getattr(self.target, "space", None)
        if space is None:
            return []
        return [SpacePermission(space)]


class CustomPermission(Permission):
    kind = "custom"

    def available_actions(self) -> FrozenSet[str]:
        return frozenset({"access"})


def resolve_space(target: Any) -> Optional[Space]:
    return target if isinstance(target, Space) else None


def resolve_resource(target: Any) -> Optional[Resource]:
    return target if isinstance(target, Resource) else None


def resolve_custom(target: Any) -> Optional[str]:
    if isinstance(target, str) and target.strip():
        return target.strip()
    return None
