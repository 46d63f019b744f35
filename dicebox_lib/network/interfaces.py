from typing import Protocol, Any, Callable, runtime_checkable


@runtime_checkable
class NetworkProtocol(Protocol):
    """Network surface consumed by dice strategies.

    Strategies only ever broadcast to peers and subscribe to typed messages;
    transport details stay behind this interface.
    """

    def broadcast(self, type: str, payload: Any) -> None: ...

    def on_message(self, type: str, handler: Callable[[Any, dict], Any]) -> Callable[[], None]: ...
