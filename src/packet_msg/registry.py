"""
Registry of message kinds.

A registry is filled once at startup (see packet_msg.allmsg.register_all)
and then frozen; after that it is read-only and may be shared between
threads. Recognizers are tried in registration order and the first one that
claims a message wins, so kinds with broad heuristics (unknown forms, plain
text) must be registered last.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from packet_msg.errors import RegistryFrozenError
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.typed import TypedMessage

logger = logging.getLogger(__name__)


class Registry:
    def __init__(self) -> None:
        self._types: dict[str, MessageType] = {}
        self._recognizers: list[tuple[str, Callable[[RawMessage], Any]]] = []
        self._frozen = False
        self._lock = threading.Lock()

    def register(self, mtype: MessageType) -> None:
        """Add a kind.

        Registering a tag again replaces the earlier descriptor for create and
        lookup; the earlier recognizer stays in place ahead of the new one.

        Raises RegistryFrozenError once the registry has been frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(f"cannot register {mtype.tag!r}: registry is frozen")
            if mtype.tag in self._types:
                logger.warning("Message type %r registered again; replacing it", mtype.tag)
            self._types[mtype.tag] = mtype
            if mtype.recognize is not None:
                self._recognizers.append((mtype.tag, mtype.recognize))
        logger.debug("Registered message type %r (%s)", mtype.tag, mtype.name)

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def lookup(self, tag: str) -> Optional[MessageType]:
        return self._types.get(tag)

    def types(self) -> list[MessageType]:
        return list(self._types.values())

    def create(self, tag: str) -> Optional[TypedMessage]:
        """Create a new outgoing message of the given kind.

        Returns None if the tag is unknown or the kind cannot be created by
        end users.
        """
        mtype = self._types.get(tag)
        if mtype is None or mtype.create is None:
            return None
        return mtype.create()

    def recognize(self, raw: RawMessage) -> Optional[TypedMessage]:
        """Interpret a raw message as the first registered kind that claims it."""
        for tag, fn in self._recognizers:
            tm = fn(raw)
            if tm is not None:
                logger.debug("Message %r recognized as %r", raw.subject, tag)
                return tm
        logger.debug("Message %r not recognized", raw.subject)
        return None


default_registry = Registry()


def register(mtype: MessageType) -> None:
    default_registry.register(mtype)


def create(tag: str) -> Optional[TypedMessage]:
    return default_registry.create(tag)


def recognize(raw: RawMessage) -> Optional[TypedMessage]:
    return default_registry.recognize(raw)
