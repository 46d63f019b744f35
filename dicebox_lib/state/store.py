"""Observable state container.

`Store` holds a plain dict and notifies subscribers after every update with
`(new_state, old_state)`. Subclasses expose domain-specific accessors and
mutators on top of `update`.
"""
import copy
from typing import Any, Callable, Dict, List, Optional, Union

State = Dict[str, Any]
Listener = Callable[[State, Optional[State]], None]


class Store:
    def __init__(self, initial_state: State):
        self._state: State = initial_state
        self._listeners: List[Listener] = []

    @property
    def state(self) -> State:
        return self._state

    def update(self, updater: Union[State, Callable[[State], State]]) -> None:
        """Replace the state.

        Accepts either a partial state dict, merged over the current state,
        or a function receiving the current state and returning the new one.
        """
        old_state = self._state
        if callable(updater):
            self._state = updater(old_state)
        else:
            self._state = {**old_state, **updater}
        self._notify(old_state)

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def get_snapshot(self) -> State:
        return copy.deepcopy(self._state)

    def load_snapshot(self, snapshot: State) -> None:
        self._state = copy.deepcopy(snapshot)
        self._notify(None)

    def _notify(self, old_state: Optional[State]) -> None:
        for listener in list(self._listeners):
            listener(self._state, old_state)
