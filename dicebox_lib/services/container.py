import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, TypeVar, Union, cast

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceRegistryError(Exception):
    """Base class for registry lookup failures."""


class ServiceNotFoundError(ServiceRegistryError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Service not found: {self.key}"


class CircularDependencyError(ServiceRegistryError, RuntimeError):
    def __init__(self, chain: List[str]) -> None:
        self.chain = list(chain)
        super().__init__(f"Circular dependency: {' -> '.join(self.chain)}")


@dataclass(frozen=True)
class Instance:
    value: Any


@dataclass(frozen=True)
class Factory:
    factory: Callable[["ServiceRegistry"], Any]


@dataclass(frozen=True)
class Resolved:
    value: Any


ServiceEntry = Union[Instance, Factory, Resolved]


class ServiceRegistry:
    """A small, explicit registry of named application services.

    Services are registered either as ready-made instances or as factories
    taking the registry itself. A factory runs on the first `get` for its key
    and its result replaces the factory entry, so every later `get` returns
    the same object. Factories may resolve other keys while they run; the
    order of registration does not matter, only the order of resolution.

    Usage:
        registry = ServiceRegistry()
        registry.register_instance("config", {"port": 3000})
        registry.register("network", lambda r: LoopbackNetwork(r.get("message_bus")))
        network = registry.get("network")
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ServiceEntry] = {}
        # keys whose factories are currently running, outermost first
        self._resolving: List[str] = []

    def register_instance(self, key: str, value: Any) -> None:
        logger.debug("Registering instance for '%s'", key)
        self._entries[key] = Instance(value)

    def register(self, key: str, factory: Callable[["ServiceRegistry"], Any]) -> None:
        logger.debug("Registering factory for '%s'", key)
        self._entries[key] = Factory(factory)

    def get(self, key: str) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            raise ServiceNotFoundError(key)
        if isinstance(entry, (Instance, Resolved)):
            return entry.value

        if key in self._resolving:
            chain = self._resolving[self._resolving.index(key):] + [key]
            raise CircularDependencyError(chain)

        self._resolving.append(key)
        try:
            value = entry.factory(self)
        finally:
            self._resolving.pop()

        # The factory may have replaced or removed its own key while running;
        # only memoize when the entry we started from is still in place.
        if self._entries.get(key) is entry:
            self._entries[key] = Resolved(value)
        logger.debug("Constructed service '%s'", key)
        return value

    def get_typed(self, key: str) -> T:
        """Resolve and cast to the expected type."""
        return cast(T, self.get(key))

    def has(self, key: str) -> bool:
        return key in self._entries

    def remove(self, key: str) -> None:
        if self._entries.pop(key, None) is not None:
            logger.debug("Removed service '%s'", key)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> Iterable[str]:
        return list(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
