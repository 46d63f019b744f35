from .loopback import LoopbackNetwork

__all__ = ["LoopbackNetwork"]
