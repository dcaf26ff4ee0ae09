"""
Shared machinery for receipt kinds.

A receipt is recognized by a fixed subject prefix plus a body pattern whose
named groups are field tags; it is encoded by a body template that uses the
same tags. The receipt's subject field holds the subject with the prefix
removed.
"""

import re

from packet_msg.models.field import FieldDef
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.typed import TypedMessage


def receipt_type(
    tag: str,
    name: str,
    prefix: str,
    pattern: re.Pattern,
    template: str,
    subject_tag: str,
    defs: list[FieldDef],
) -> MessageType:
    mtype: MessageType

    def create() -> TypedMessage:
        return TypedMessage.from_defs(mtype, defs)

    def recognize(raw: RawMessage):
        subject = raw.subject
        if not subject.startswith(prefix):
            return None
        match = pattern.match(raw.body)
        if match is None:
            return None
        m = TypedMessage.from_defs(mtype, defs, raw=raw, defaults=False)
        m.set_value(subject_tag, subject[len(prefix):])
        for ftag, value in match.groupdict().items():
            m.set_value(ftag, value)
        return m

    def encode_subject(m: TypedMessage) -> str:
        return prefix + m.value(subject_tag)

    def encode_body(m: TypedMessage) -> str:
        return template.format(**{f.tag: f.value for f in m.fields()})

    mtype = MessageType(
        tag=tag,
        name=name,
        article="a",
        create=create,
        recognize=recognize,
        encode_subject=encode_subject,
        encode_body=encode_body,
    )
    return mtype
