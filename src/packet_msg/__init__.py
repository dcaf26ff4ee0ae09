"""
packet-msg — typed messages for packet radio message networks.

Recognizes raw messages as delivery receipts, read receipts, check-ins and
PackItForms forms, exposes their fields for validation and editing, and
encodes them back for storage or transmission.
"""

from packet_msg.allmsg import register_all
from packet_msg.errors import MessageParseError, PacketMessageError, RegistryFrozenError
from packet_msg.models.field import FieldDef, MessageField, UnknownFieldDef
from packet_msg.models.form import Form, FormEntry
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.registry import Registry, create, default_registry, recognize, register
from packet_msg.typed import TypedMessage

register_all(default_registry)

__version__ = "0.1.0"
__all__ = [
    "create",
    "recognize",
    "register",
    "register_all",
    "Registry",
    "default_registry",
    "RawMessage",
    "TypedMessage",
    "MessageType",
    "FieldDef",
    "UnknownFieldDef",
    "MessageField",
    "Form",
    "FormEntry",
    "PacketMessageError",
    "MessageParseError",
    "RegistryFrozenError",
]
