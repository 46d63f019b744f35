"""In-process network adapter.

`LoopbackNetwork` gives strategies the same `broadcast`/`on_message` surface
a peer-to-peer transport would, but delivers every broadcast straight onto
the local message bus. Broadcasts are also kept in `sent` so callers can
inspect what would have gone out to peers.
"""
import logging
from typing import Any, Callable, Dict, List

from dicebox_lib.messaging.interfaces import MessageBusProtocol

logger = logging.getLogger(__name__)


class LoopbackNetwork:
    def __init__(self, message_bus: MessageBusProtocol, peer_id: str):
        self._bus = message_bus
        self.peer_id = peer_id
        self.sent: List[Dict[str, Any]] = []

    def broadcast(self, type: str, payload: Any) -> None:
        logger.debug("Broadcasting '%s' from %s", type, self.peer_id)
        message = {'type': type, 'payload': payload}
        self.sent.append(message)
        self._bus.dispatch(message, {'from_peer_id': self.peer_id})

    def on_message(self, type: str, handler: Callable[[Any, dict], Any]) -> Callable[[], None]:
        return self._bus.on(type, handler)
