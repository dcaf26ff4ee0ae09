"""
Field model — field definitions and the fields of a typed message.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

from packet_msg.validators import validate_unknown_field

# Well-known field keys, used by code that needs a particular field without
# knowing the kind's tag for it.
KEY_ORIGIN_MSG_NO = "ORIGIN_MSG_NO"
KEY_DESTINATION_MSG_NO = "DESTINATION_MSG_NO"
KEY_HANDLING = "HANDLING"
KEY_SUBJECT = "SUBJECT"
KEY_BODY = "BODY"
KEY_OP_CALL = "OP_CALL"
KEY_OP_NAME = "OP_NAME"
KEY_TAC_CALL = "TAC_CALL"
KEY_TAC_NAME = "TAC_NAME"

# A validator returns "" when the field is acceptable, or a description of
# the problem. It must not modify the field or the message.
Validator = Callable[..., str]


class FieldDef(BaseModel):
    """Definition of one field of a message kind."""
    tag: str
    label: str = ""
    key: str = ""
    required: bool = False
    validators: list[Validator] = Field(default_factory=list)
    default: str = ""
    default_factory: Optional[Callable[[], str]] = None
    choices: Optional[list[str]] = None
    help: str = ""
    hint: str = ""

    model_config = {"frozen": True}

    @property
    def unknown(self) -> bool:
        return False

    def default_value(self) -> str:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


class UnknownFieldDef(FieldDef):
    """Definition synthesized for a form entry the kind does not declare."""

    @classmethod
    def for_tag(cls, tag: str) -> UnknownFieldDef:
        return cls(tag=tag, label=tag, validators=[validate_unknown_field])

    @property
    def unknown(self) -> bool:
        return True


class MessageField(BaseModel):
    definition: FieldDef
    value: str = ""

    @property
    def tag(self) -> str:
        return self.definition.tag

    @property
    def key(self) -> str:
        return self.definition.key

    @property
    def label(self) -> str:
        return self.definition.label or self.definition.tag

    def set_value(self, value: str) -> None:
        self.value = value

    def default(self) -> str:
        return self.definition.default_value()

    def problem(self, message: Any = None) -> str:
        """Return "" if the value is acceptable, else the first problem found."""
        if self.definition.required and self.value == "":
            return f"A value for the {self.label!r} field is required."
        for validator in self.definition.validators:
            problem = validator(self, message)
            if problem:
                return problem
        return ""

    def is_valid(self, message: Any = None) -> bool:
        return self.problem(message) == ""

    def __repr__(self) -> str:
        return f"MessageField(tag={self.tag!r}, value={self.value!r})"
