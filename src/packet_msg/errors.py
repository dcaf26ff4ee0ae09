"""
packet-msg error types.

Recognition mismatches, validation problems and unknown type tags are not
errors; they are reported as None results or per-field problem strings.
Only the conditions below raise.
"""

from typing import Any, Optional


class PacketMessageError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class MessageParseError(PacketMessageError):
    """The raw message text could not be split into headers and body."""

    def __init__(self, message: str, code: str = "parse_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class RegistryFrozenError(PacketMessageError):
    def __init__(self, message: str):
        super().__init__("registry_frozen", message)
