from typing import Protocol, Any, Dict, List, Optional, runtime_checkable


@runtime_checkable
class DiceStoreProtocol(Protocol):
    """Protocol for `DiceStore` public surface used by strategies."""

    @property
    def dice_config(self) -> Dict[str, Any]: ...

    @property
    def dice_values(self) -> Dict[str, List[int]]: ...

    def set_config(self, config: Dict[str, Any]) -> None: ...

    def apply_roll(self, roll_result: Dict[str, Any]) -> None: ...

    def try_grab(self, set_id: str, player_id: str, username: Optional[str]) -> bool: ...

    def clear_holder(self, set_id: str) -> None: ...

    def get_snapshot(self) -> Dict[str, Any]: ...

    def load_snapshot(self, snapshot: Dict[str, Any]) -> None: ...
