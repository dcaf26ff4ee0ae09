"""Read receipts, sent when a message is first read by a person."""

import re

from packet_msg.kinds.receipt import receipt_type
from packet_msg.models.field import FieldDef
from packet_msg.validators import default_timestamp

TAG = "READ"
PREFIX = "READ: "

READ_RECEIPT_RE = re.compile(r"^!RR!(?P<ReadTime>.+)\n.*\n\nTo: (?P<ReadTo>.+)")

BODY_TEMPLATE = (
    "!RR!{ReadTime}\n"
    "Your Message\n"
    "\n"
    "To: {ReadTo}\n"
    "Subject: {ReadSubject}\n"
    "\n"
    "was read on {ReadTime}\n"
)

field_defs = [
    FieldDef(tag="ReadTo", label="Read To", required=True),
    FieldDef(tag="ReadSubject", label="Read Subject", required=True),
    FieldDef(tag="ReadTime", label="Read Time", required=True,
             default_factory=default_timestamp, hint="MM/DD/YYYY HH:MM"),
]

message_type = receipt_type(
    TAG, "read receipt", PREFIX, READ_RECEIPT_RE, BODY_TEMPLATE, "ReadSubject", field_defs,
)
