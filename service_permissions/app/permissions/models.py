"""
Permission model for the Permission Rules Service.

A permission encapsulates a permission *query*: it does not state that
anyone has been granted anything. It is run through a RuleBase to find out.

    permission = ResourcePermission(account, "create")
    holder.has_permission(permission)
"""

from typing import Any, ClassVar, FrozenSet, List, Optional, Set, Tuple

from shared.errors import DependencyCycleError
from ..rules.keys import permission_match_keys, segment


class Permission:
    """Base class for permission kinds.

    Subclasses declare a class-level ``kind`` and may override
    ``dependencies()`` and ``available_actions()``.
    """

    kind: ClassVar[Optional[str]] = None

    __slots__ = ("_target", "_action")

    def __init__(self, target: Any, action: Optional[Any] = None):
        self._target = target
        self._action = segment(action)

    @property
    def target(self) -> Any:
        """The object this permission is about."""
        return self._target

    @property
    def action(self) -> Optional[str]:
        """The action the holder wishes to perform, or None."""
        return self._action

    @property
    def name(self) -> str:
        """The name of the permission, taken from the target."""
        if isinstance(self._target, str):
            return self._target
        return str(self._target.name)

    def available_actions(self) -> FrozenSet[str]:
        return frozenset()

    def dependencies(self) -> List["Permission"]:
        """Permissions that must also resolve through the rule base. None by default."""
        return []

    def with_dependencies(self) -> List["Permission"]:
        """Return all dependencies, depth first, followed by the permission itself.

        Dependencies of dependencies are included. A permission that shows
        up more than once is only listed the first time.
        """
        chain: List[Permission] = []
        self._expand(chain, set(), [])
        return chain

    def _expand(self, chain: List["Permission"], seen: Set[Tuple], stack: List[Tuple]) -> None:
        identity = self.identity
        if identity in stack:
            raise DependencyCycleError(
                f"permission {self.key} depends on itself",
                details={"path": [":".join(str(part) for part in item if part) for item in stack + [identity]]}
            )
        if identity in seen:
            return

        stack.append(identity)
        for dependency in self.dependencies():
            dependency._expand(chain, seen, stack)
        stack.pop()

        seen.add(identity)
        chain.append(self)

    def match_keys(self) -> List[str]:
        """Every rule key that applies to this permission."""
        return permission_match_keys(self.kind, self.name, self.action)

    @property
    def identity(self) -> Tuple[Optional[str], str, Optional[str]]:
        return (segment(self.kind), self.name, self.action)

    @property
    def key(self) -> str:
        return self.match_keys()[0]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r}, name={self.name!r}, action={self.action!r})"
