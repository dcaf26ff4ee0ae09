"""
Santa Clara County (XSC) standard subject lines:

    <msgno>_<handling>_<form tag>_<subject>
    <msgno>_<handling>_<subject>

An obsolete severity code may precede the handling order ("S/H").
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel

SUBJECT_LINE_RE = re.compile(
    r"^([A-Z0-9]+-?[0-9]+[A-Z]?)_(?:([A-Z])/)?([A-Z])_(?:([^_\s]+)_)?([^_\s]+(?:\s.*|$))",
    re.IGNORECASE,
)


class HandlingOrder(str, Enum):
    IMMEDIATE = "I"
    PRIORITY = "P"
    ROUTINE = "R"

    @classmethod
    def parse(cls, value: str) -> Optional[HandlingOrder]:
        """Accept either the one-letter code or the full name."""
        for ho in cls:
            if value in (ho.value, ho.name):
                return ho
        return None


class XSCSubject(BaseModel):
    message_number: str
    severity_code: str = ""
    handling_code: str
    form_tag: str = ""
    subject: str

    @property
    def handling(self) -> Optional[HandlingOrder]:
        return HandlingOrder.parse(self.handling_code)

    @classmethod
    def parse(cls, line: str) -> Optional[XSCSubject]:
        match = SUBJECT_LINE_RE.match(line)
        if not match:
            return None
        return cls(
            message_number=match.group(1),
            severity_code=match.group(2) or "",
            handling_code=match.group(3),
            form_tag=match.group(4) or "",
            subject=match.group(5),
        )


def encode_subject(msgno: str, handling: str, form_tag: str, subject: str) -> str:
    """Build an XSC subject line. handling may be a code or a full name."""
    ho = HandlingOrder.parse(handling)
    code = ho.value if ho else handling
    if form_tag:
        return f"{msgno}_{code}_{form_tag}_{subject}"
    return f"{msgno}_{code}_{subject}"
