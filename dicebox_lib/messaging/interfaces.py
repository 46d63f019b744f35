from typing import Protocol, Any, Callable, Optional, runtime_checkable


@runtime_checkable
class MessageBusProtocol(Protocol):
    """Message bus surface used by the network layer and strategies."""

    def on(self, type: str, handler: Callable[[Any, dict], Any]) -> Callable[[], None]: ...

    def use(self, middleware: Callable[[dict, dict], Optional[dict]]) -> None: ...

    def dispatch(self, message: dict, context: Optional[dict] = None) -> None: ...
