"""
Holders package.

Wires permission holders (users, groups, API keys) to their rule
collections and provides the may/may_access family of checks.
"""

from .accessors import PermissionAccessors
from .holder import PermissionHolder

__all__ = ["PermissionAccessors", "PermissionHolder"]
