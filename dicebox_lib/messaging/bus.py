"""Type-routed message bus.

Handlers subscribe to a message type and receive `(payload, context)`.
Middlewares see every message before the handlers do and may rewrite it or
halt dispatch by returning None. Dispatch is synchronous: all handlers run
to completion before `dispatch` returns.

    bus = MessageBus()
    unsubscribe = bus.on('dice:roll', lambda payload, ctx: print(payload))
    bus.dispatch({'type': 'dice:roll', 'payload': {'values': [1, 2, 3]}})
    unsubscribe()
"""
import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Handler = Callable[[Any, dict], Any]
Middleware = Callable[[dict, dict], Optional[dict]]


class MessageBus:
    def __init__(self) -> None:
        # dict-as-ordered-set keeps subscription order for dispatch
        self._handlers: Dict[str, Dict[Handler, None]] = {}
        self._middlewares: List[Middleware] = []

    def on(self, type: str, handler: Handler) -> Callable[[], None]:
        """Register `handler` for `type` and return an unsubscribe callable."""
        self._handlers.setdefault(type, {})[handler] = None

        def unsubscribe() -> None:
            handlers = self._handlers.get(type)
            if handlers is None:
                return
            handlers.pop(handler, None)
            if not handlers:
                del self._handlers[type]

        return unsubscribe

    def once(self, type: str, handler: Handler) -> Callable[[], None]:
        """Register a handler that unsubscribes itself after the first call."""
        def wrapper(payload: Any, context: dict) -> Any:
            unsubscribe()
            return handler(payload, context)

        unsubscribe = self.on(type, wrapper)
        return unsubscribe

    def use(self, middleware: Middleware) -> None:
        self._middlewares.append(middleware)

    def dispatch(self, message: dict, context: Optional[dict] = None) -> None:
        ctx = context if context is not None else {}
        processed: Optional[dict] = message
        for middleware in self._middlewares:
            processed = middleware(processed, ctx)
            if processed is None:
                logger.debug("Dispatch of '%s' halted by middleware", message.get('type'))
                return

        handlers = self._handlers.get(processed.get('type'))
        if not handlers:
            return
        # copy: handlers may unsubscribe while we iterate
        for handler in list(handlers):
            handler(processed.get('payload'), ctx)

    def has_handlers(self, type: str) -> bool:
        return bool(self._handlers.get(type))

    def handler_count(self, type: str) -> int:
        return len(self._handlers.get(type, {}))

    def off(self, type: str) -> None:
        self._handlers.pop(type, None)

    def clear(self) -> None:
        self._handlers.clear()
        self._middlewares = []
