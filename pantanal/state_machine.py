"""Explicit state machine for organism lifecycles.

All valid states are enumerated, valid transitions are declared up front,
and an invalid transition raises immediately instead of leaving an organism
in an impossible state. Organisms only ever go Alive -> Dead; there is no
resurrection.

Usage:
------
    lifecycle = create_lifecycle_state_machine()
    lifecycle.transition(LifecycleState.DEAD, step=12, reason="starvation")
    lifecycle.transition(LifecycleState.ALIVE)  # Raises LifecycleError
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Generic, List, TypeVar

from pantanal.exceptions import LifecycleError

S = TypeVar("S", bound=Enum)


@dataclass
class StateTransition(Generic[S]):
    """Record of a state transition for debugging.

    Attributes:
        from_state: The state before transition
        to_state: The state after transition
        step: The simulation step when the transition occurred
        reason: Why the transition happened
    """

    from_state: S
    to_state: S
    step: int
    reason: str = ""


class StateMachine(Generic[S]):
    """A generic state machine with explicit transition validation."""

    def __init__(
        self,
        initial_state: S,
        valid_transitions: Dict[S, List[S]],
        track_history: bool = False,
    ) -> None:
        if initial_state not in valid_transitions:
            raise ValueError(
                f"Initial state {initial_state} not in valid_transitions. "
                f"Valid states: {list(valid_transitions.keys())}"
            )
        self._state = initial_state
        self._transitions = valid_transitions
        self._track_history = track_history
        self._history: List[StateTransition[S]] = []

    @property
    def state(self) -> S:
        return self._state

    @property
    def history(self) -> List[StateTransition[S]]:
        """Transition history (empty if tracking disabled)."""
        return self._history.copy()

    def can_transition(self, target: S) -> bool:
        return target in self._transitions.get(self._state, [])

    def transition(self, target: S, step: int = 0, reason: str = "") -> S:
        """Move to ``target``.

        Raises:
            LifecycleError: If ``target`` is not reachable from the current state
        """
        if not self.can_transition(target):
            valid_targets = self._transitions.get(self._state, [])
            raise LifecycleError(
                f"Invalid transition: {self._state.name} -> {target.name}. "
                f"Valid targets from {self._state.name}: {[t.name for t in valid_targets]}"
            )

        old_state = self._state
        self._state = target
        if self._track_history:
            self._history.append(StateTransition(old_state, target, step, reason))
        return target

    def __repr__(self) -> str:
        return f"StateMachine(state={self._state.name})"


class LifecycleState(Enum):
    ALIVE = auto()
    DEAD = auto()  # Terminal


LIFECYCLE_TRANSITIONS: Dict[LifecycleState, List[LifecycleState]] = {
    LifecycleState.ALIVE: [LifecycleState.DEAD],
    LifecycleState.DEAD: [],
}


def create_lifecycle_state_machine(track_history: bool = False) -> StateMachine[LifecycleState]:
    return StateMachine(
        initial_state=LifecycleState.ALIVE,
        valid_transitions=LIFECYCLE_TRANSITIONS,
        track_history=track_history,
    )
