"""Delivery receipts, sent automatically when a message reaches its recipient."""

import re

from packet_msg.kinds.receipt import receipt_type
from packet_msg.models.field import FieldDef
from packet_msg.validators import default_timestamp

TAG = "DELIVERED"
PREFIX = "DELIVERED: "

DELIVERY_RECEIPT_RE = re.compile(
    r"^!LMI!(?P<LocalMessageID>[^!]+)!DR!(?P<DeliveredTime>.+)\n.*\nTo: (?P<DeliveredTo>.+)"
)

BODY_TEMPLATE = (
    "!LMI!{LocalMessageID}!DR!{DeliveredTime}\n"
    "Your Message\n"
    "To: {DeliveredTo}\n"
    "Subject: {DeliveredSubject}\n"
    "was delivered on {DeliveredTime}\n"
    "Recipient's Local Message ID: {LocalMessageID}\n"
)

field_defs = [
    FieldDef(tag="DeliveredTo", label="Delivered To", required=True,
             help="The address of the recipient to whom the message was delivered."),
    FieldDef(tag="DeliveredSubject", label="Delivered Subject", required=True),
    FieldDef(tag="LocalMessageID", label="Recipient's Local Message ID", required=True),
    FieldDef(tag="DeliveredTime", label="Delivered Time", required=True,
             default_factory=default_timestamp, hint="MM/DD/YYYY HH:MM"),
]

message_type = receipt_type(
    TAG, "delivery receipt", PREFIX, DELIVERY_RECEIPT_RE, BODY_TEMPLATE, "DeliveredSubject", field_defs,
)
