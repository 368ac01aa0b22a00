"""
Rules package.

Defines the rule model, key generation, rule builders and the rule base
used to decide permission checks. The rule base indexes rules by key and
resolves every check with a last-match-wins policy across the permission
and all of its dependencies.

Modules of interest:
- keys: Canonical rule keys and permission match keys.
- models: Validated Rule model.
- builders: allow/deny/allow_all/deny_all helpers.
- engine: RuleBase index and decision algorithm.
"""

from .keys import WILDCARD, rule_key, permission_match_keys
from .models import Rule
from .builders import allow, deny, allow_all, deny_all
from .engine import RuleBase, Decision

__all__ = [
    "WILDCARD",
    "rule_key",
    "permission_match_keys",
    "Rule",
    "allow",
    "deny",
    "allow_all",
    "deny_all",
    "RuleBase",
    "Decision",
]
