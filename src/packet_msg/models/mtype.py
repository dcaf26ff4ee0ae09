"""
Message type descriptor — the metadata and behaviors that make a kind.
"""

from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel


class MessageType(BaseModel):
    tag: str
    name: str
    article: Literal["a", "an"] = "a"
    # Builds a new outgoing message with default values. None means end
    # users may not originate messages of this kind.
    create: Optional[Callable[[], Any]] = None
    # Returns a typed message for a raw message of this kind, or None.
    recognize: Optional[Callable[[Any], Any]] = None
    # Produce the subject line and body for a typed message of this kind.
    # When None, the raw message's subject or body is left as it is.
    encode_subject: Optional[Callable[[Any], str]] = None
    encode_body: Optional[Callable[[Any], str]] = None
    # PackItForms form HTML name and form version, for form kinds.
    html: str = ""
    version: str = ""

    model_config = {"frozen": True}

    @property
    def creatable(self) -> bool:
        return self.create is not None

    def __str__(self) -> str:
        return f"{self.article} {self.name}"
