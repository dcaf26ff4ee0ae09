import pytest

from packet_msg.errors import MessageParseError
from packet_msg.models.message import RawMessage

STORED = (
    "From: KA6ABC@w1xsc.ampr.org\n"
    "To: KB6DEF@w2xsc.ampr.org, Jane <KC6GHI@w3xsc.ampr.org>\n"
    "Subject: XSC-001P_R_Hello\n"
    "\n"
    "Hello, world.\n"
)


def test_parse_splits_headers_and_body():
    raw = RawMessage.parse(STORED)
    assert raw.get("from") == "KA6ABC@w1xsc.ampr.org"
    assert raw.subject == "XSC-001P_R_Hello"
    assert raw.body == "Hello, world.\n"
    assert [name for name, _ in raw.iterate()] == ["From", "To", "Subject"]


def test_parse_joins_continuation_lines():
    raw = RawMessage.parse("Subject: a long\n  subject line\n\nbody\n")
    assert raw.subject == "a long subject line"


def test_parse_crlf():
    raw = RawMessage.parse(STORED.replace("\n", "\r\n"))
    assert raw.body == "Hello, world.\n"


def test_parse_rejects_malformed_header():
    with pytest.raises(MessageParseError) as exc:
        RawMessage.parse("this is not a header\n\nbody\n")
    assert exc.value.code == "parse_error"
    assert exc.value.details == {"line": 1}


def test_parse_rejects_leading_continuation():
    with pytest.raises(MessageParseError):
        RawMessage.parse(" continued\n\nbody\n")


def test_get_missing_header():
    raw = RawMessage()
    assert raw.get("Subject") is None
    assert raw.subject == ""


def test_set_replaces_or_appends():
    raw = RawMessage.parse(STORED)
    raw.set("subject", "changed")
    assert raw.subject == "changed"
    assert len(raw.headers) == 3
    raw.set("Date", "today")
    assert raw.headers[-1] == ("Date", "today")


def test_save_round_trip():
    assert RawMessage.parse(STORED).save() == STORED


def test_save_skips_empty_headers_and_adds_final_newline():
    raw = RawMessage(headers=[("Subject", "x"), ("Cc", "")], body="no newline")
    assert raw.save() == "Subject: x\n\nno newline\n"


def test_transmit():
    addresses, subject, body = RawMessage.parse(STORED).transmit()
    assert addresses == ["KB6DEF@w2xsc.ampr.org", "KC6GHI@w3xsc.ampr.org"]
    assert subject == "XSC-001P_R_Hello"
    assert body == "Hello, world.\n"
