from .bus import MessageBus

__all__ = ["MessageBus"]
