"""
Shared machinery for check-in and check-out messages.

    Subject: XSC-001P_R_Check-In KA6ABC, Jane Doe
    Body:    Check-In KA6ABC, Jane Doe

A station using a tactical call sign puts the tactical call and name on the
first line and the operator's call and name on the second.
"""

import re

from packet_msg.models.field import (
    KEY_HANDLING,
    KEY_OP_CALL,
    KEY_OP_NAME,
    KEY_ORIGIN_MSG_NO,
    KEY_TAC_CALL,
    KEY_TAC_NAME,
    FieldDef,
)
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.subject import XSCSubject, encode_subject
from packet_msg.typed import TypedMessage
from packet_msg.validators import (
    both_or_neither,
    validate_call_sign,
    validate_choices,
    validate_fcc_call_sign,
    validate_message_number,
)

HANDLING_CHOICES = ["ROUTINE", "PRIORITY", "IMMEDIATE"]


def station_field_defs() -> list[FieldDef]:
    return [
        FieldDef(tag="MsgNo", label="Message Number", key=KEY_ORIGIN_MSG_NO, required=True,
                 validators=[validate_message_number], hint="XXX-###S"),
        FieldDef(tag="Handling", label="Handling", key=KEY_HANDLING, required=True,
                 validators=[validate_choices], choices=HANDLING_CHOICES, default="ROUTINE",
                 help="How fast the message needs to be delivered."),
        FieldDef(tag="TacCall", label="Tactical Call Sign", key=KEY_TAC_CALL,
                 validators=[validate_call_sign]),
        FieldDef(tag="TacName", label="Tactical Station Name", key=KEY_TAC_NAME,
                 validators=[both_or_neither("TacCall")]),
        FieldDef(tag="OpCall", label="Operator Call Sign", key=KEY_OP_CALL, required=True,
                 validators=[validate_fcc_call_sign]),
        FieldDef(tag="OpName", label="Operator Name", key=KEY_OP_NAME, required=True),
    ]


def station_type(tag: str, name: str, defs: list[FieldDef]) -> MessageType:
    """Build the descriptor for a station message whose subject and body start with tag."""
    body_re = re.compile(
        rf"^{re.escape(tag)}\s+([A-Z][A-Z0-9]{{2,5}})\s*,(.*)(?:\n([AKNW][A-Z0-9]{{2,5}})\s*,(.*))?",
        re.IGNORECASE,
    )
    lead = tag.lower() + " "
    mtype: MessageType

    def create() -> TypedMessage:
        return TypedMessage.from_defs(mtype, defs)

    def recognize(raw: RawMessage):
        subject = XSCSubject.parse(raw.subject)
        if subject is None or subject.form_tag or not subject.subject.lower().startswith(lead):
            return None
        match = body_re.match(raw.body)
        if match is None:
            return None
        m = TypedMessage.from_defs(mtype, defs, raw=raw, defaults=False)
        m.set_value("MsgNo", subject.message_number)
        # Unrecognized handling codes are kept as received.
        ho = subject.handling
        m.set_value("Handling", ho.name if ho else subject.handling_code)
        call, sname, opcall, opname = match.groups()
        if opcall:
            m.set_value("TacCall", call)
            m.set_value("TacName", sname.strip())
            m.set_value("OpCall", opcall)
            m.set_value("OpName", opname.strip())
        else:
            m.set_value("OpCall", call)
            m.set_value("OpName", sname.strip())
        return m

    def first_line(m: TypedMessage) -> str:
        if m.value("TacCall"):
            return f"{tag} {m.value('TacCall')}, {m.value('TacName')}"
        return f"{tag} {m.value('OpCall')}, {m.value('OpName')}"

    def encode_station_subject(m: TypedMessage) -> str:
        return encode_subject(m.value("MsgNo"), m.value("Handling"), "", first_line(m))

    def encode_station_body(m: TypedMessage) -> str:
        if m.value("TacCall"):
            return f"{first_line(m)}\n{m.value('OpCall')}, {m.value('OpName')}\n"
        return first_line(m) + "\n"

    mtype = MessageType(
        tag=tag,
        name=name,
        article="a",
        create=create,
        recognize=recognize,
        encode_subject=encode_station_subject,
        encode_body=encode_station_body,
    )
    return mtype
