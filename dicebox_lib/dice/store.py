"""Dice state: configuration, current values, holders and last rollers.

All per-set maps are keyed by dice set id. Every mutator builds new maps
instead of editing the current ones in place, so subscribers can compare
`old_state` with `new_state`.
"""
import copy
from typing import Any, Dict, Iterable, List, Optional

from dicebox_lib.state.store import Store

_INITIAL_STATE: Dict[str, Any] = {
    # dice configuration, set at room creation: [{'id', 'count', 'color'}]
    'config': {'dice_sets': []},
    'values': {},
    'holders': {},
    'last_roller': {},
    'holder_has_rolled': {},
}


class DiceStore(Store):
    def __init__(self) -> None:
        super().__init__(copy.deepcopy(_INITIAL_STATE))

    # config

    @property
    def dice_config(self) -> Dict[str, Any]:
        return self.state['config']

    def set_config(self, config: Dict[str, Any]) -> None:
        self.update({'config': config})

    def find_set(self, set_id: str) -> Optional[Dict[str, Any]]:
        for dice_set in self.dice_config.get('dice_sets', []):
            if dice_set.get('id') == set_id:
                return dice_set
        return None

    # values

    @property
    def dice_values(self) -> Dict[str, List[int]]:
        return self.state['values']

    def set_values(self, set_id: str, values: List[int]) -> None:
        self.update(lambda s: {**s, 'values': {**s['values'], set_id: list(values)}})

    # holders

    @property
    def holders(self) -> Dict[str, Dict[str, Any]]:
        return self.state['holders']

    def try_grab(self, set_id: str, player_id: str, username: Optional[str]) -> bool:
        """Grab a dice set for a player. First come, first served."""
        if set_id in self.holders:
            return False
        self.set_holder(set_id, player_id, username)
        return True

    def set_holder(self, set_id: str, player_id: str, username: Optional[str]) -> None:
        self.update(lambda s: {
            **s,
            'holders': {**s['holders'], set_id: {'player_id': player_id, 'username': username}},
            'holder_has_rolled': {**s['holder_has_rolled'], set_id: False},
        })

    def clear_holder(self, set_id: str) -> None:
        def _clear(s):
            holders = dict(s['holders'])
            holders.pop(set_id, None)
            holder_has_rolled = dict(s['holder_has_rolled'])
            holder_has_rolled.pop(set_id, None)
            return {**s, 'holders': holders, 'holder_has_rolled': holder_has_rolled}

        self.update(_clear)

    # rolling

    @property
    def last_roller(self) -> Dict[str, Dict[str, Any]]:
        return self.state['last_roller']

    @property
    def holder_has_rolled(self) -> Dict[str, bool]:
        return self.state['holder_has_rolled']

    def apply_roll(self, roll_result: Dict[str, Any]) -> None:
        """Apply one roll result: `{'set_id', 'values', 'player_id', 'username'}`."""
        self.apply_rolls([roll_result])

    def apply_rolls(self, roll_results: Iterable[Dict[str, Any]]) -> None:
        results = list(roll_results)

        def _apply(s):
            values = dict(s['values'])
            last_roller = dict(s['last_roller'])
            holder_has_rolled = dict(s['holder_has_rolled'])
            for result in results:
                set_id = result['set_id']
                values[set_id] = list(result['values'])
                last_roller[set_id] = {
                    'player_id': result.get('player_id'),
                    'username': result.get('username'),
                }
                holder_has_rolled[set_id] = True
            return {
                **s,
                'values': values,
                'last_roller': last_roller,
                'holder_has_rolled': holder_has_rolled,
            }

        self.update(_apply)

    # serialization, used to sync a joining peer

    def load_snapshot(self, snapshot: Dict[str, Any]) -> None:
        super().load_snapshot({
            'config': snapshot.get('config') or {'dice_sets': []},
            'values': snapshot.get('values') or {},
            'holders': snapshot.get('holders') or {},
            'last_roller': snapshot.get('last_roller') or {},
            'holder_has_rolled': snapshot.get('holder_has_rolled') or {},
        })

    def reset(self) -> None:
        self.update(copy.deepcopy(_INITIAL_STATE))
