"""Services package: the service registry and the protocols it wires.

Keep this package minimal. It only exposes the registry, its errors and
the cross-cutting Protocols used by the composition root.
"""
from .container import (
    CircularDependencyError,
    ServiceNotFoundError,
    ServiceRegistry,
    ServiceRegistryError,
)
from .interfaces import (
    DiceStoreProtocol,
    MessageBusProtocol,
    NetworkProtocol,
)

__all__ = [
    "ServiceRegistry",
    "ServiceRegistryError",
    "ServiceNotFoundError",
    "CircularDependencyError",
    "DiceStoreProtocol",
    "MessageBusProtocol",
    "NetworkProtocol",
]
