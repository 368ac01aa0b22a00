"""
Rule data models for the Permission Rules Service.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic import ValidationError as PydanticValidationError

from shared.errors import MalformedRuleError
from .keys import rule_key

KIND_MAX_LENGTH = 20
NAME_MAX_LENGTH = 80
ACTION_MAX_LENGTH = 20


class Rule(BaseModel):
    """A single allow or deny statement for a kind/name/action pattern.

    A rule's priority is not stored on the rule: it is the rule's position
    in the sequence handed to a RuleBase, later rules outranking earlier ones.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., min_length=1, max_length=KIND_MAX_LENGTH)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    action: Optional[str] = Field(None, max_length=ACTION_MAX_LENGTH)
    allow: StrictBool

    @field_validator("kind", "name", "action", mode="before")
    @classmethod
    def _coerce_segment(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            value = value.strip()
        return value

    @field_validator("action", mode="before")
    @classmethod
    def _blank_action_is_none(cls, value: Any) -> Any:
        # Coerce a blank action into an absolute None
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @classmethod
    def build(cls, **attributes: Any) -> "Rule":
        """Validate attributes into a rule, raising MalformedRuleError on failure."""
        try:
            return cls(**attributes)
        except PydanticValidationError as e:
            raise MalformedRuleError(
                "Rule failed validation",
                details={"errors": [
                    {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"]}
                    for error in e.errors()
                ]}
            ) from e

    @property
    def key(self) -> str:
        """A key identifying the pattern this rule matches."""
        return rule_key(self.kind, self.name, self.action)

    def to_display(self) -> str:
        return self.key
