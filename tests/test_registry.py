import logging

import pytest

from packet_msg.allmsg import register_all
from packet_msg.errors import RegistryFrozenError
from packet_msg.models.message import RawMessage
from packet_msg.models.mtype import MessageType
from packet_msg.registry import Registry
from packet_msg.typed import TypedMessage


def _kind(tag, accept=None, creatable=True):
    """A test kind recognizing messages whose subject equals accept."""
    mtype = None

    def create():
        return TypedMessage(mtype)

    def recognize(raw):
        if accept is not None and raw.subject == accept:
            return TypedMessage(mtype, raw=raw)
        return None

    mtype = MessageType(tag=tag, name=f"{tag} message", create=create if creatable else None,
                        recognize=recognize)
    return mtype


def _raw(subject):
    return RawMessage(headers=[("Subject", subject)], body="")


def test_create_known_and_unknown():
    reg = Registry()
    reg.register(_kind("A"))
    assert reg.create("A").message_type.tag == "A"
    assert reg.create("B") is None


def test_create_not_creatable():
    reg = Registry()
    reg.register(_kind("A", creatable=False))
    assert reg.create("A") is None
    assert not reg.lookup("A").creatable


def test_recognize_first_registered_wins():
    reg = Registry()
    reg.register(_kind("first", accept="x"))
    reg.register(_kind("second", accept="x"))
    assert reg.recognize(_raw("x")).message_type.tag == "first"


def test_recognize_none():
    reg = Registry()
    reg.register(_kind("A", accept="x"))
    assert reg.recognize(_raw("y")) is None
    assert Registry().recognize(_raw("y")) is None


def test_reregistering_replaces_descriptor_and_appends_recognizer(caplog):
    reg = Registry()
    old = _kind("A", accept="x")
    new = _kind("A", accept="y")
    reg.register(old)
    reg.register(_kind("B", accept="y"))
    with caplog.at_level(logging.WARNING, logger="packet_msg.registry"):
        reg.register(new)
    assert "registered again" in caplog.text
    assert reg.lookup("A") is new
    assert reg.create("A").message_type is new
    assert [t.tag for t in reg.types()] == ["A", "B"]
    # The earlier recognizer is still consulted first.
    assert reg.recognize(_raw("x")).message_type is old
    assert reg.recognize(_raw("y")).message_type.tag == "B"


def test_frozen_registry_rejects_registration():
    reg = Registry()
    reg.register(_kind("A"))
    reg.freeze()
    assert reg.is_frozen
    with pytest.raises(RegistryFrozenError):
        reg.register(_kind("B"))
    assert reg.create("A") is not None


def test_register_all_order():
    reg = register_all(Registry())
    assert reg.is_frozen
    assert [t.tag for t in reg.types()] == ["DELIVERED", "READ", "Check-In", "Check-Out", "ICS213", "UNKNOWN", "plain"]
    assert reg.create("UNKNOWN") is None


def test_register_all_without_freeze():
    reg = register_all(Registry(), freeze=False)
    reg.register(_kind("extra"))
    assert reg.lookup("extra") is not None
