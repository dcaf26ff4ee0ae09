"""
Form-based message kinds: building, adopting and encoding PackItForms
messages from a kind's ordered list of field definitions.
"""

from packet_msg.models.field import (
    KEY_HANDLING,
    KEY_ORIGIN_MSG_NO,
    KEY_SUBJECT,
    FieldDef,
    MessageField,
    UnknownFieldDef,
)
from packet_msg.models.form import CURRENT_PIFO_VERSION, Form, FormEntry
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.subject import encode_subject
from packet_msg.typed import TypedMessage


def create_form(mtype: MessageType, defs: list[FieldDef]) -> TypedMessage:
    """Create a new form message with every field at its default."""
    return TypedMessage.from_defs(mtype, defs)


def adopt_form(mtype: MessageType, defs: list[FieldDef], raw: RawMessage, form: Form) -> TypedMessage:
    """Build a form message from a received form.

    Entries for declared fields fill those fields. Entries the kind does not
    declare are kept as unknown fields, unless their value is empty.
    """
    m = TypedMessage.from_defs(mtype, defs, raw=raw, defaults=False)
    m.form = form
    for entry in form.fields:
        f = m.field(entry.tag)
        if f is None:
            if entry.value == "":
                continue
            f = MessageField(definition=UnknownFieldDef.for_tag(entry.tag))
            m.add_field(f)
        f.set_value(entry.value)
    return m


def encode_form_body(m: TypedMessage) -> str:
    """Encode every non-empty field, declared and unknown, in field order."""
    entries = [FormEntry(tag=f.tag, value=f.value) for f in m.fields() if f.value != ""]
    if m.form is not None:
        # A received form keeps its own header and surrounding text.
        form = m.form.model_copy(update={"fields": entries})
    else:
        mtype = m.message_type
        form = Form(
            form_type=mtype.html,
            form_version=mtype.version,
            pifo_version=CURRENT_PIFO_VERSION,
            fields=entries,
        )
    return form.encode()


def encode_form_subject(m: TypedMessage) -> str:
    return encode_subject(
        m.key_value(KEY_ORIGIN_MSG_NO),
        m.key_value(KEY_HANDLING),
        m.message_type.tag,
        m.key_value(KEY_SUBJECT),
    )
