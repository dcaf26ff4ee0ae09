"""
Typed messages: a raw message interpreted as one registered kind.
"""

from __future__ import annotations

from typing import Optional

from packet_msg.models.field import FieldDef, MessageField
from packet_msg.models.form import Form
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType


class TypedMessage:
    """A message of a known kind.

    The kind-specific fields are owned by the typed message. The raw message
    is held by reference: headers the kind does not own pass through
    untouched, and encode() rewrites only the subject and body.
    """

    def __init__(
        self,
        message_type: MessageType,
        fields: Optional[list[MessageField]] = None,
        raw: Optional[RawMessage] = None,
        form: Optional[Form] = None,
    ):
        self.message_type = message_type
        self.raw = raw if raw is not None else RawMessage()
        self.form = form
        self._fields: list[MessageField] = list(fields or [])

    @classmethod
    def from_defs(
        cls,
        message_type: MessageType,
        defs: list[FieldDef],
        raw: Optional[RawMessage] = None,
        defaults: bool = True,
    ) -> TypedMessage:
        """Build a message with one field per definition.

        Fields start at their defaults, or empty when defaults is False.
        """
        fields = [MessageField(definition=d, value=d.default_value() if defaults else "") for d in defs]
        return cls(message_type, fields, raw)

    def fields(self) -> list[MessageField]:
        return list(self._fields)

    def field(self, tag: str) -> Optional[MessageField]:
        for f in self._fields:
            if f.tag == tag:
                return f
        return None

    def key_field(self, key: str) -> Optional[MessageField]:
        for f in self._fields:
            if f.key == key:
                return f
        return None

    def add_field(self, field: MessageField) -> None:
        if self.field(field.tag) is not None:
            raise ValueError(f"duplicate field tag {field.tag!r}")
        self._fields.append(field)

    def value(self, tag: str) -> str:
        f = self.field(tag)
        return f.value if f is not None else ""

    def key_value(self, key: str) -> str:
        f = self.key_field(key)
        return f.value if f is not None else ""

    def set_value(self, tag: str, value: str) -> bool:
        """Set a field's value. Returns False if the message has no such field."""
        f = self.field(tag)
        if f is None:
            return False
        f.set_value(value)
        return True

    def validate(self) -> list[str]:
        """Return the problems with the field values, in field order."""
        problems = []
        for f in self._fields:
            problem = f.problem(self)
            if problem:
                problems.append(problem)
        return problems

    def encoded_subject(self) -> str:
        if self.message_type.encode_subject is not None:
            return self.message_type.encode_subject(self)
        return self.raw.subject

    def encoded_body(self) -> str:
        if self.message_type.encode_body is not None:
            return self.message_type.encode_body(self)
        return self.raw.body

    def encode(self) -> None:
        """Write the kind fields into the raw message's subject and body."""
        self.raw.set("Subject", self.encoded_subject())
        self.raw.body = self.encoded_body()

    def save(self) -> str:
        self.encode()
        return self.raw.save()

    def transmit(self) -> tuple[list[str], str, str]:
        self.encode()
        return self.raw.transmit()

    def __repr__(self) -> str:
        return f"TypedMessage(type={self.message_type.tag!r}, fields={len(self._fields)})"
