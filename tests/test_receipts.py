import re

import pytest

from packet_msg import create, recognize
from packet_msg.kinds import delivrcpt, readrcpt
from packet_msg.models.message import RawMessage

DELIVERY = RawMessage(
    headers=[("Subject", "DELIVERED: Weekly Status")],
    body="!LMI!AB123!DR!01/02/2024 10:00\nYour Message\nTo: KA6ABC\n",
)


def test_delivery_receipt_example():
    m = recognize(DELIVERY)
    assert m.message_type.tag == "DELIVERED"
    assert m.value("LocalMessageID") == "AB123"
    assert m.value("DeliveredTime") == "01/02/2024 10:00"
    assert m.value("DeliveredTo") == "KA6ABC"
    assert m.value("DeliveredSubject") == "Weekly Status"
    assert m.validate() == []


def test_create_delivery_receipt():
    m = create("DELIVERED")
    assert m.message_type is delivrcpt.message_type
    assert [f.tag for f in m.fields()] == ["DeliveredTo", "DeliveredSubject", "LocalMessageID", "DeliveredTime"]
    assert re.match(r"^\d\d/\d\d/\d{4} \d\d:\d\d$", m.value("DeliveredTime"))
    assert create("BOGUS") is None


def test_missing_required_fields_are_reported():
    m = create("DELIVERED")
    problems = m.validate()
    assert "A value for the 'Delivered To' field is required." in problems
    assert len(problems) == 3


@pytest.mark.parametrize("subject", ["Weekly Status", "delivered: Weekly Status", "RE: DELIVERED: x"])
def test_delivery_receipt_needs_prefix(subject):
    raw = RawMessage(headers=[("Subject", subject)], body=DELIVERY.body)
    assert delivrcpt.message_type.recognize(raw) is None


def test_delivery_receipt_needs_matching_body():
    raw = RawMessage(headers=[("Subject", "DELIVERED: Weekly Status")], body="Thanks for your message.\n")
    assert delivrcpt.message_type.recognize(raw) is None
    # Falls through to the plain text kind.
    assert recognize(raw).message_type.tag == "plain"


def test_delivery_receipt_round_trip():
    m = create("DELIVERED")
    m.set_value("DeliveredTo", "KB6DEF@w2xsc.ampr.org")
    m.set_value("DeliveredSubject", "XSC-101P_R_ICS213_Water")
    m.set_value("LocalMessageID", "W2X-17")
    m.set_value("DeliveredTime", "03/04/2024 12:34")
    m.raw.set("To", "KA6ABC@w1xsc.ampr.org")
    saved = m.save()
    assert "Subject: DELIVERED: XSC-101P_R_ICS213_Water\n" in saved
    again = recognize(RawMessage.parse(saved))
    assert again.message_type.tag == "DELIVERED"
    assert [(f.tag, f.value) for f in again.fields()] == [(f.tag, f.value) for f in m.fields()]
    assert again.save() == saved


def test_read_receipt_round_trip():
    m = create("READ")
    m.set_value("ReadTo", "KB6DEF@w2xsc.ampr.org")
    m.set_value("ReadSubject", "Weekly Status")
    m.set_value("ReadTime", "05/06/2024 07:08")
    saved = m.save()
    assert saved.startswith("Subject: READ: Weekly Status\n\n!RR!05/06/2024 07:08\n")
    again = recognize(RawMessage.parse(saved))
    assert again.message_type is readrcpt.message_type
    assert again.value("ReadTo") == "KB6DEF@w2xsc.ampr.org"
    assert again.value("ReadSubject") == "Weekly Status"
    assert again.value("ReadTime") == "05/06/2024 07:08"


def test_read_receipt_needs_prefix_and_body():
    body = "!RR!05/06/2024 07:08\nYour Message\n\nTo: KA6ABC\n"
    assert readrcpt.message_type.recognize(RawMessage(headers=[("Subject", "READ: x")], body=body))
    assert readrcpt.message_type.recognize(RawMessage(headers=[("Subject", "x")], body=body)) is None
    assert readrcpt.message_type.recognize(RawMessage(headers=[("Subject", "READ: x")], body="hi\n")) is None


def test_encode_leaves_other_headers_alone():
    raw = DELIVERY.model_copy(deep=True)
    raw.headers.insert(0, ("From", "KA6ABC@w1xsc.ampr.org"))
    m = recognize(raw)
    m.set_value("DeliveredSubject", "Monthly Status")
    m.encode()
    assert raw.get("From") == "KA6ABC@w1xsc.ampr.org"
    assert raw.subject == "DELIVERED: Monthly Status"
    assert "Subject: Monthly Status\n" in raw.body
