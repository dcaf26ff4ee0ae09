"""
Forms of a type no registered kind claims.

Every entry of such a form is kept as an unknown field, and the subject
line is left exactly as received. Users cannot create these.
"""

from packet_msg.forms import adopt_form, encode_form_body
from packet_msg.models.form import Form
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType

TAG = "UNKNOWN"


def recognize(raw: RawMessage):
    form = Form.decode(raw.body)
    if form is None:
        return None
    return adopt_form(message_type, [], raw, form)


message_type = MessageType(
    tag=TAG,
    name="unrecognized form",
    article="an",
    recognize=recognize,
    encode_body=encode_form_body,
)
