"""
ICS-213 general message form (PackItForms form-ics213.html, version 2.2).
"""

from packet_msg.forms import adopt_form, create_form, encode_form_body, encode_form_subject
from packet_msg.models.field import (
    KEY_BODY,
    KEY_DESTINATION_MSG_NO,
    KEY_HANDLING,
    KEY_OP_CALL,
    KEY_OP_NAME,
    KEY_ORIGIN_MSG_NO,
    KEY_SUBJECT,
    FieldDef,
)
from packet_msg.models.form import Form
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.typed import TypedMessage
from packet_msg.validators import (
    default_date,
    default_time,
    validate_call_sign,
    validate_choices,
    validate_date,
    validate_message_number,
    validate_phone_number,
    validate_time,
)

TAG = "ICS213"
HTML = "form-ics213.html"
VERSION = "2.2"

HANDLING_CHOICES = ["IMMEDIATE", "PRIORITY", "ROUTINE"]
YES_NO = ["Yes", "No"]
METHOD_CHOICES = ["Telephone", "Dispatch Center", "EOC Radio", "FAX", "Courier", "Amateur Radio", "Other"]


def validate_other(field, message=None) -> str:
    """The Other field is filled in exactly when Method is Other."""
    if message is None:
        return ""
    if message.value("Method") == "Other":
        if field.value == "":
            return 'A value for the "Other" field is required when the "Other" option is selected.'
    elif field.value != "":
        return 'A value cannot be specified for the "Other" field unless the "Other" option is selected.'
    return ""


field_defs = [
    FieldDef(tag="MsgNo", label="2. Origin Msg #", key=KEY_ORIGIN_MSG_NO, required=True,
             validators=[validate_message_number], hint="XXX-###S",
             help="The message number assigned to this message by its origin station."),
    FieldDef(tag="3.", label="3. Destination Msg #", key=KEY_DESTINATION_MSG_NO,
             validators=[validate_message_number], hint="XXX-###S"),
    FieldDef(tag="1a.", label="1. Date", required=True, validators=[validate_date],
             default_factory=default_date, hint="MM/DD/YYYY"),
    FieldDef(tag="1b.", label="1. Time", required=True, validators=[validate_time],
             default_factory=default_time, hint="HH:MM"),
    FieldDef(tag="5.", label="5. Handling", key=KEY_HANDLING, required=True,
             validators=[validate_choices], choices=HANDLING_CHOICES),
    FieldDef(tag="6a.", label="6. Take Action", validators=[validate_choices], choices=YES_NO),
    FieldDef(tag="6b.", label="6. Reply", validators=[validate_choices], choices=YES_NO),
    FieldDef(tag="6d.", label="6. Reply by", validators=[validate_time], hint="HH:MM"),
    FieldDef(tag="7.", label="7. To ICS Position", required=True),
    FieldDef(tag="8.", label="8. From ICS Position", required=True),
    FieldDef(tag="9a.", label="9. To Location", required=True),
    FieldDef(tag="9b.", label="9b. From Location", required=True),
    FieldDef(tag="ToName", label="To Name"),
    FieldDef(tag="FmName", label="From Name"),
    FieldDef(tag="ToTel", label="To Telephone #", validators=[validate_phone_number]),
    FieldDef(tag="FmTel", label="From Telephone #", validators=[validate_phone_number]),
    FieldDef(tag="10.", label="10. Subject", key=KEY_SUBJECT, required=True),
    FieldDef(tag="11.", label="11. Reference"),
    FieldDef(tag="12.", label="12. Message", key=KEY_BODY, required=True),
    FieldDef(tag="OpRelayRcvd", label="Relay Rcvd"),
    FieldDef(tag="OpRelaySent", label="Relay Sent"),
    FieldDef(tag="Rec-Sent", label="Receiver or Sender", required=True,
             validators=[validate_choices], choices=["receiver", "sender"], default="sender"),
    FieldDef(tag="OpCall", label="Operator Call Sign", key=KEY_OP_CALL, required=True,
             validators=[validate_call_sign]),
    FieldDef(tag="OpName", label="Operator Name", key=KEY_OP_NAME, required=True),
    FieldDef(tag="Method", label="How Received or Sent", required=True,
             validators=[validate_choices], choices=METHOD_CHOICES, default="Other"),
    FieldDef(tag="Other", label="How Received or Sent: Other", validators=[validate_other], default="Packet"),
    FieldDef(tag="OpDate", label="Operator Date", required=True, validators=[validate_date],
             default_factory=default_date, hint="MM/DD/YYYY"),
    FieldDef(tag="OpTime", label="Operator Time", required=True, validators=[validate_time],
             default_factory=default_time, hint="HH:MM"),
]


def create() -> TypedMessage:
    return create_form(message_type, field_defs)


def recognize(raw: RawMessage):
    form = Form.decode(raw.body)
    if form is None or form.form_type != HTML:
        return None
    return adopt_form(message_type, field_defs, raw, form)


message_type = MessageType(
    tag=TAG,
    name="ICS-213 general message",
    article="an",
    create=create,
    recognize=recognize,
    encode_subject=encode_form_subject,
    encode_body=encode_form_body,
    html=HTML,
    version=VERSION,
)
