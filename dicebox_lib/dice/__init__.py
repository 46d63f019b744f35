from .store import DiceStore
from .strategies import (
    DEFAULT_STRATEGY,
    STRATEGIES,
    DiceRollingStrategy,
    DragPickupStrategy,
    create_strategy,
)

__all__ = [
    "DiceStore",
    "DiceRollingStrategy",
    "DragPickupStrategy",
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    "create_strategy",
]
