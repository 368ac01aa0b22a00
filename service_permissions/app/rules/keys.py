"""
Rule key and permission match-key generation.
"""

from enum import Enum
from typing import Any, List, Optional

from shared.errors import ValidationError

WILDCARD = "all"
SEPARATOR = ":"


def segment(value: Any) -> Optional[str]:
    """Normalize a kind, name or action into a key segment.

    Enum members contribute their value, blank strings become None.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    value = str(value).strip()
    return value or None


def rule_key(kind: Any, name: Any, action: Any = None) -> str:
    """Build the canonical key for a rule pattern."""
    kind = segment(kind)
    if kind == WILDCARD:
        return WILDCARD

    parts = [kind, segment(name), segment(action)]
    return SEPARATOR.join(part for part in parts if part is not None)


def permission_match_keys(kind: Any, name: Any, action: Any = None) -> List[str]:
    """List every rule key that applies to a permission, most specific first.

    The order is informational; the rule base ranks matches by rule position.
    """
    kind_segment = segment(kind)
    name_segment = segment(name)
    if kind_segment is None or name_segment is None:
        raise ValidationError(
            "Permission needs a kind and a name to be matched against rules",
            details={"kind": kind, "name": name}
        )

    kind, name, action = kind_segment, name_segment, segment(action)

    keys = []
    if action is not None:
        keys.append(SEPARATOR.join((kind, name, action)))
        keys.append(SEPARATOR.join((kind, WILDCARD, action)))

    keys.append(SEPARATOR.join((kind, name)))
    keys.append(SEPARATOR.join((kind, WILDCARD)))
    keys.append(WILDCARD)
    return keys
