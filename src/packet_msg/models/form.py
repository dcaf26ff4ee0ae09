"""
PackItForms form encoding.

A form-bearing message body looks like:

    !SCCoPIFO!
    #T: form-ics213.html
    #V: 3.9-2.2
    MsgNo: [XSC-101P]
    12.: [first line\\nsecond line]
    !/ADDON!

Inside brackets, "\\n" is a newline, "\\\\" a backslash and "`]" a close
bracket; a value ending in a backtick is written "`]]]" (which includes the
bracket closing the value). Literal newlines inside brackets are ignored, so
long lines can be wrapped.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field

CURRENT_PIFO_VERSION = "3.9"
FORM_START = "!SCCoPIFO!\n"
FORM_END = "!/ADDON!\n"
MAX_LINE = 128

HEADER_RE = re.compile(r"^#T: ([a-z][-a-z0-9]+\.html)\n#V: (\d+(?:\.\d+)*)-(\d+(?:\.\d+)*)\n")
FIELD_LINE_RE = re.compile(r"^([A-Z0-9][-A-Z0-9.]*): \[", re.IGNORECASE)


class FormEntry(BaseModel):
    tag: str
    value: str = ""


class Form(BaseModel):
    """A decoded PackItForms form."""
    form_type: str
    form_version: str
    pifo_version: str = CURRENT_PIFO_VERSION
    fields: list[FormEntry] = Field(default_factory=list)
    text_before: str = ""
    text_after: str = ""

    def get(self, tag: str) -> Optional[str]:
        for entry in self.fields:
            if entry.tag == tag:
                return entry.value
        return None

    @classmethod
    def decode(cls, body: str) -> Optional[Form]:
        """Decode a message body. Returns None if it holds no well-formed form."""
        if body.startswith(FORM_START):
            before, rest = "", body[len(FORM_START):]
        else:
            idx = body.find("\n" + FORM_START)
            if idx < 0:
                return None
            before, rest = body[:idx + 1], body[idx + 1 + len(FORM_START):]
        match = HEADER_RE.match(rest)
        if not match:
            return None
        form_type, pifo_version, form_version = match.groups()
        rest = rest[match.end():]
        entries: list[FormEntry] = []
        seen: set[str] = set()
        while True:
            match = FIELD_LINE_RE.match(rest)
            if not match:
                break
            tag = match.group(1)
            if tag in seen:
                return None
            seen.add(tag)
            parsed = _parse_bracketed_value(rest[match.end():])
            if parsed is None:
                return None
            value, rest = parsed
            entries.append(FormEntry(tag=tag, value=value))
        if not rest.startswith(FORM_END):
            return None
        return cls(
            form_type=form_type,
            form_version=form_version,
            pifo_version=pifo_version,
            fields=entries,
            text_before=before,
            text_after=rest[len(FORM_END):],
        )

    def encode(self) -> str:
        parts = [
            self.text_before,
            FORM_START,
            f"#T: {self.form_type}\n#V: {self.pifo_version}-{self.form_version}\n",
        ]
        for entry in self.fields:
            if entry.value == "":
                continue
            line = f"{entry.tag}: ["
            for unit in _escape_units(entry.value):
                if len(line) + len(unit) > MAX_LINE:
                    parts.append(line + "\n")
                    line = ""
                line += unit
            parts.append(line + "\n")
        parts.append(FORM_END)
        parts.append(self.text_after)
        return "".join(parts)


def _escape_units(value: str) -> list[str]:
    # Escape sequences are never split across wrapped lines.
    units = []
    for ch in value:
        if ch == "\\":
            units.append("\\\\")
        elif ch == "\n":
            units.append("\\n")
        elif ch == "]":
            units.append("`]")
        else:
            units.append(ch)
    if units and units[-1] == "`":
        units[-1] = "`]]]"
    else:
        units.append("]")
    return units


def _parse_bracketed_value(text: str) -> Optional[tuple[str, str]]:
    """Parse a value up to its closing bracket.

    Returns the value and the text after the newline that must follow the
    bracket, or None if the value is malformed.
    """
    out: list[str] = []
    idx = 0
    closed = False
    while idx < len(text):
        ch = text[idx]
        if ch == "]":
            closed = True
            idx += 1
            break
        if ch == "\n":
            idx += 1
        elif text.startswith("\\\\", idx):
            out.append("\\")
            idx += 2
        elif text.startswith("\\n", idx):
            out.append("\n")
            idx += 2
        elif text.startswith("`]]]", idx):
            out.append("`")
            idx += 4
            closed = True
            break
        elif text.startswith("`]", idx):
            out.append("]")
            idx += 2
        else:
            out.append(ch)
            idx += 1
    if not closed or not text.startswith("\n", idx):
        return None
    return "".join(out), text[idx + 1:]
