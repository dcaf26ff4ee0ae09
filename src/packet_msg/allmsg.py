"""
Registration of every message kind this package knows.
"""

from typing import Optional

from packet_msg.kinds import checkin, checkout, delivrcpt, ics213, plaintext, readrcpt, unkform
from packet_msg.registry import Registry, default_registry

# Recognition order. The unknown-form and plain-text kinds accept almost
# anything and must stay at the end.
KINDS = [
    delivrcpt.message_type,
    readrcpt.message_type,
    checkin.message_type,
    checkout.message_type,
    ics213.message_type,
    unkform.message_type,
    plaintext.message_type,
]


def register_all(registry: Optional[Registry] = None, freeze: bool = True) -> Registry:
    """Register all known kinds, in recognition order, and freeze the registry."""
    if registry is None:
        registry = default_registry
    for mtype in KINDS:
        registry.register(mtype)
    if freeze:
        registry.freeze()
    return registry
