from packet_msg.models.form import MAX_LINE, Form, FormEntry

BODY = (
    "!SCCoPIFO!\n"
    "#T: form-ics213.html\n"
    "#V: 3.9-2.2\n"
    "MsgNo: [XSC-101P]\n"
    "12.: [line one\\nline two]\n"
    "!/ADDON!\n"
)


def test_decode():
    form = Form.decode(BODY)
    assert form.form_type == "form-ics213.html"
    assert form.pifo_version == "3.9"
    assert form.form_version == "2.2"
    assert [(e.tag, e.value) for e in form.fields] == [
        ("MsgNo", "XSC-101P"),
        ("12.", "line one\nline two"),
    ]
    assert form.get("MsgNo") == "XSC-101P"
    assert form.get("missing") is None


def test_encode_matches_decoded_input():
    assert Form.decode(BODY).encode() == BODY


def test_text_around_form_is_kept():
    body = "Please see below.\n" + BODY + "Thanks\n"
    form = Form.decode(body)
    assert form.text_before == "Please see below.\n"
    assert form.text_after == "Thanks\n"
    assert form.encode() == body


def test_decode_rejects_non_forms():
    assert Form.decode("just some text\n") is None
    assert Form.decode("!SCCoPIFO!\nno header\n!/ADDON!\n") is None


def test_decode_rejects_duplicate_tags():
    body = BODY.replace("12.: [", "MsgNo: [")
    assert Form.decode(body) is None


def test_decode_rejects_unterminated_value():
    body = "!SCCoPIFO!\n#T: form-x.html\n#V: 3.9-1.0\nA: [open\n!/ADDON!\n"
    assert Form.decode(body) is None


def _encoded_line(value):
    form = Form(form_type="form-x.html", form_version="1.0", fields=[FormEntry(tag="A", value=value)])
    return form.encode().split("\n")[3]


def test_value_escaping():
    assert _encoded_line("a\\b") == "A: [a\\\\b]"
    assert _encoded_line("x]y") == "A: [x`]y]"
    assert _encoded_line("tick`") == "A: [tick`]]]"


def test_escaped_values_decode():
    values = ["a\\b", "x]y", "tick`", "``]]", "multi\nline\n"]
    form = Form(form_type="form-x.html", form_version="1.0",
                fields=[FormEntry(tag=f"F{i}", value=v) for i, v in enumerate(values)])
    decoded = Form.decode(form.encode())
    assert [e.value for e in decoded.fields] == values


def test_long_values_are_wrapped():
    value = "word " * 100 + "\\ and a backslash"
    form = Form(form_type="form-x.html", form_version="1.0", fields=[FormEntry(tag="Long", value=value)])
    encoded = form.encode()
    assert all(len(line) <= MAX_LINE for line in encoded.split("\n"))
    assert Form.decode(encoded).get("Long") == value


def test_empty_values_are_not_encoded():
    form = Form(form_type="form-x.html", form_version="1.0",
                fields=[FormEntry(tag="A", value=""), FormEntry(tag="B", value="b")])
    assert "A: [" not in form.encode()
    assert "B: [b]\n" in form.encode()
