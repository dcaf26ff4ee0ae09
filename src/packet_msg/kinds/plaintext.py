"""
Plain text messages: the kind of last resort.

Any message no other kind claims is a plain text message. When its subject
is an XSC standard subject without a form tag, the message number and
handling order are split out into their own fields.
"""

from packet_msg.models.field import (
    KEY_BODY,
    KEY_HANDLING,
    KEY_ORIGIN_MSG_NO,
    KEY_SUBJECT,
    FieldDef,
)
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.subject import HandlingOrder, XSCSubject, encode_subject
from packet_msg.typed import TypedMessage
from packet_msg.validators import validate_message_number

TAG = "plain"


def validate_handling(field, _message=None) -> str:
    if field.value and HandlingOrder.parse(field.value) is None:
        return f"{field.value!r} is not a valid handling order for the {field.label!r} field."
    return ""


field_defs = [
    FieldDef(tag="MsgNo", label="Message Number", key=KEY_ORIGIN_MSG_NO,
             validators=[validate_message_number], hint="XXX-###S"),
    FieldDef(tag="Handling", label="Handling Order", key=KEY_HANDLING,
             validators=[validate_handling], choices=[ho.name for ho in HandlingOrder]),
    FieldDef(tag="Subject", label="Subject", key=KEY_SUBJECT, required=True),
    FieldDef(tag="Message", label="Message", key=KEY_BODY),
]


def create() -> TypedMessage:
    return TypedMessage.from_defs(message_type, field_defs)


def recognize(raw: RawMessage) -> TypedMessage:
    m = TypedMessage.from_defs(message_type, field_defs, raw=raw, defaults=False)
    subject = XSCSubject.parse(raw.subject)
    # Subjects with a form tag or the obsolete severity code are kept whole
    # so that they re-encode unchanged.
    if (
        subject is not None
        and not subject.form_tag
        and not subject.severity_code
        and subject.handling is not None
    ):
        m.set_value("MsgNo", subject.message_number)
        m.set_value("Handling", subject.handling_code)
        m.set_value("Subject", subject.subject)
    else:
        m.set_value("Subject", raw.subject)
    m.set_value("Message", raw.body)
    return m


def encode_plain_subject(m: TypedMessage) -> str:
    if m.value("MsgNo") and m.value("Handling"):
        return encode_subject(m.value("MsgNo"), m.value("Handling"), "", m.value("Subject"))
    return m.value("Subject")


def encode_plain_body(m: TypedMessage) -> str:
    return m.value("Message")


message_type = MessageType(
    tag=TAG,
    name="plain text message",
    article="a",
    create=create,
    recognize=recognize,
    encode_subject=encode_plain_subject,
    encode_body=encode_plain_body,
)
