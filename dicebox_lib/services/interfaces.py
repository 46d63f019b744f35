"""Central re-exports for package-local Protocols.

Place truly cross-cutting Protocols here for discoverability, while the
canonical definitions live beside their implementations in each package.
"""

from dicebox_lib.dice.interfaces import DiceStoreProtocol
from dicebox_lib.messaging.interfaces import MessageBusProtocol
from dicebox_lib.network.interfaces import NetworkProtocol

__all__ = [
    "DiceStoreProtocol",
    "MessageBusProtocol",
    "NetworkProtocol",
]
