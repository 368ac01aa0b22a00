"""
Rule creation helpers.

    allow("resource", "account")           # => resource:account
    deny("resource", "all", "create")      # => resource:all:create
    allow_all()                            # => all
    deny_all("resource")                   # => resource:all
"""

from typing import Any, Optional

from .keys import WILDCARD
from .models import Rule


def allow(kind: Any, name: Any, action: Optional[Any] = None) -> Rule:
    """Build an allow rule for the given kind and name."""
    return Rule.build(kind=kind, name=name, action=action, allow=True)


def deny(kind: Any, name: Any, action: Optional[Any] = None) -> Rule:
    """Build a deny rule for the given kind and name."""
    return Rule.build(kind=kind, name=name, action=action, allow=False)


def allow_all(kind: Any = WILDCARD, action: Optional[Any] = None) -> Rule:
    """Build an 'allow all' rule, for every kind or for every target of one kind."""
    return allow(kind, WILDCARD, action)


def deny_all(kind: Any = WILDCARD, action: Optional[Any] = None) -> Rule:
    """Build a 'deny all' rule, for every kind or for every target of one kind."""
    return deny(kind, WILDCARD, action)
