"""Dice rolling strategies.

A strategy owns the interaction logic for one way of rolling dice. It gets
a context dict with the shared services it needs:

- `state`: the `DiceStore`
- `network`: something with `broadcast(type, payload)`
- `local_player`: `{'id': ..., 'username': ...}`

Strategies are looked up by id in `STRATEGIES`; `create_strategy` builds one.
"""
import logging
import random
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class DiceRollingStrategy:
    """Base class for dice rolling strategies. Not usable on its own."""

    name = ''
    description = ''

    def __init__(self, context: Dict[str, Any], rng: Optional[random.Random] = None):
        if type(self) is DiceRollingStrategy:
            raise TypeError("DiceRollingStrategy is abstract and cannot be instantiated directly")
        self.context = context
        self._rng = rng or random.Random()

    def roll(self, player_id: str, set_ids: List[str]) -> List[dict]:
        raise NotImplementedError("roll")

    def handle_message(self, type: str, payload: dict, from_peer_id: Optional[str] = None) -> None:
        raise NotImplementedError("handle_message")

    def get_state(self) -> dict:
        return self.context['state'].get_snapshot()

    def load_state(self, snapshot: dict) -> None:
        self.context['state'].load_snapshot(snapshot)

    def activate(self) -> None:
        pass

    def deactivate(self) -> None:
        pass

    def _roll_die(self) -> int:
        return self._rng.randint(1, 6)


class DragPickupStrategy(DiceRollingStrategy):
    """Pick up any dice across all sets, then roll only those.

    Any player may roll any die at any time; there is no grabbing or holding.
    Dice are addressed by their global index in `get_all_dice()`.
    """

    name = 'Drag to Pick Up'
    description = 'Drag across dice to pick them up, release to roll. Touch-friendly.'

    def get_all_dice(self) -> List[dict]:
        state = self.context['state']
        dice = []
        for dice_set in state.dice_config.get('dice_sets', []):
            values = state.dice_values.get(dice_set['id'], [])
            for i in range(dice_set['count']):
                dice.append({
                    'set_id': dice_set['id'],
                    'die_index': i,
                    'color': dice_set.get('color'),
                    'value': values[i] if i < len(values) else None,
                })
        return dice

    def roll_picked_dice(self, picked_indices: Iterable[int]) -> List[dict]:
        picked = list(dict.fromkeys(picked_indices))
        if not picked:
            return []

        state = self.context['state']
        network = self.context['network']
        player = self.context['local_player']
        all_dice = self.get_all_dice()

        # set_id -> die indices picked within that set, in first-seen order
        picked_by_set: Dict[str, List[int]] = {}
        for global_index in picked:
            if not 0 <= global_index < len(all_dice):
                continue
            die = all_dice[global_index]
            picked_by_set.setdefault(die['set_id'], []).append(die['die_index'])

        results = []
        for set_id, indices in picked_by_set.items():
            dice_set = state.find_set(set_id)
            if dice_set is None:
                continue
            current = state.dice_values.get(set_id, [])
            if len(current) == dice_set['count']:
                new_values = list(current)
            else:
                new_values = [1] * dice_set['count']
            for die_index in indices:
                new_values[die_index] = self._roll_die()

            result = {
                'set_id': set_id,
                'values': new_values,
                'player_id': player['id'],
                'username': player.get('username'),
                'rolled_indices': indices,
            }
            results.append(result)
            state.apply_roll(result)

        for result in results:
            network.broadcast('dice:roll', result)
        rolled = sum(len(r['rolled_indices']) for r in results)
        logger.info("Player %s rolled %d dice in %d set(s)", player['id'], rolled, len(results))
        return results

    def roll(self, player_id: str, set_ids: List[str]) -> List[dict]:
        raise NotImplementedError("DragPickupStrategy uses roll_picked_dice() instead of roll()")

    def handle_message(self, type: str, payload: dict, from_peer_id: Optional[str] = None) -> None:
        if type == 'dice:roll':
            self.context['state'].apply_roll(payload)


STRATEGIES = {
    'drag-pickup': DragPickupStrategy,
}

DEFAULT_STRATEGY = 'drag-pickup'


def create_strategy(strategy_id: str, context: Dict[str, Any], rng: Optional[random.Random] = None) -> DiceRollingStrategy:
    strategy_cls = STRATEGIES.get(strategy_id)
    if strategy_cls is None:
        raise ValueError(f"Unknown strategy: {strategy_id}. Available: {', '.join(STRATEGIES)}")
    return strategy_cls(context, rng=rng)
