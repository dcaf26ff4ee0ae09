"""
Raw message — RFC-5322-style headers plus a plain-text body.

This is the minimal collaborator the typed-message layer is built on: it
knows nothing about message kinds, only about header lines and the body.
"""

from __future__ import annotations

import re
from email.utils import getaddresses
from typing import Optional

from pydantic import BaseModel, Field

from packet_msg.errors import MessageParseError

# A header line is "Name: value"; the name is any run of printable ASCII
# other than the colon.
HEADER_LINE_RE = re.compile(r"^([!-9;-~]+):[ \t]?(.*)$")

ADDRESS_HEADERS = ("To", "Cc", "Bcc")


class RawMessage(BaseModel):
    headers: list[tuple[str, str]] = Field(default_factory=list)
    body: str = ""

    @classmethod
    def parse(cls, text: str) -> RawMessage:
        """Split stored message text into headers and body.

        Headers run up to the first empty line; lines starting with
        whitespace continue the previous header.
        """
        headers: list[tuple[str, str]] = []
        text = text.replace("\r\n", "\n")
        lines = text.split("\n")
        idx = 0
        while idx < len(lines):
            line = lines[idx]
            idx += 1
            if line == "":
                break
            if line[0] in " \t":
                if not headers:
                    raise MessageParseError(
                        "message starts with a header continuation line",
                        details={"line": idx},
                    )
                name, value = headers[-1]
                headers[-1] = (name, value + " " + line.strip())
                continue
            match = HEADER_LINE_RE.match(line)
            if not match:
                raise MessageParseError(f"malformed header line {line!r}", details={"line": idx})
            headers.append((match.group(1), match.group(2)))
        return cls(headers=headers, body="\n".join(lines[idx:]))

    def get(self, key: str) -> Optional[str]:
        """Return the first header named key (case-insensitive), or None."""
        key = key.lower()
        for name, value in self.headers:
            if name.lower() == key:
                return value
        return None

    def set(self, key: str, value: str) -> None:
        lkey = key.lower()
        for idx, (name, _) in enumerate(self.headers):
            if name.lower() == lkey:
                self.headers[idx] = (name, value)
                return
        self.headers.append((key, value))

    def iterate(self) -> list[tuple[str, str]]:
        return list(self.headers)

    @property
    def subject(self) -> str:
        return self.get("Subject") or ""

    def addresses(self) -> list[str]:
        """Bare destination addresses from the To, Cc and Bcc headers."""
        values = [value for name, value in self.headers if name.title() in ADDRESS_HEADERS]
        return [addr or name for name, addr in getaddresses(values) if addr or name]

    def save(self) -> str:
        """Return the message formatted for local storage."""
        parts = [f"{name}: {value}\n" for name, value in self.headers if value != ""]
        parts.append("\n")
        parts.append(self.body)
        if self.body and not self.body.endswith("\n"):
            parts.append("\n")
        return "".join(parts)

    def transmit(self) -> tuple[list[str], str, str]:
        """Return the destination addresses, subject and body for sending."""
        return self.addresses(), self.subject, self.body
