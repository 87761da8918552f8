"""Base organism and per-step context.

An organism lives on exactly one field cell while alive. Death is a one-way
transition enforced by a state machine: the organism gives up its cell at the
moment it dies and never acts again.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Mapping, Optional

from pantanal.config.species import Species, SpeciesPolicy
from pantanal.exceptions import LifecycleError
from pantanal.location import Location
from pantanal.state_machine import LifecycleState, create_lifecycle_state_machine

if TYPE_CHECKING:
    from pantanal.field import Field

logger = logging.getLogger(__name__)


class DeathCause(Enum):
    OLD_AGE = "old_age"
    STARVATION = "starvation"
    DISEASE = "disease"
    OVERCROWDING = "overcrowding"
    PREDATION = "predation"
    EATEN = "eaten"  # Plant bitten past its limit
    DISPLACED = "displaced"  # Plant whose cell was taken by an animal


@dataclass
class StepContext:
    """Per-step state shared by every organism acting in one sweep.

    Attributes:
        step: The step being simulated (1-based)
        census: Per-species counts observed at the end of the previous step
        newborns: Organisms created during this sweep; merged by the engine
            only after the sweep, so they never act in their birth step
    """

    step: int = 0
    census: Mapping[Species, int] = field(default_factory=dict)
    newborns: List["Organism"] = field(default_factory=list)

    def add_newborn(self, organism: "Organism") -> None:
        self.newborns.append(organism)


class Organism(ABC):
    """Base class for everything that occupies a field cell.

    Attributes:
        policy: Constant configuration for this organism's species
        species: Species tag (from the policy)
        color: Color marker for renderers
        organism_id: Identifier assigned by the engine on registration
        age: Steps lived
        field: Field the organism lives on (None once dead)
        location: Current cell (None once dead)
        death_cause: Why the organism died (None while alive)
    """

    def __init__(
        self,
        field: "Field",
        location: Location,
        policy: SpeciesPolicy,
        *,
        color: Optional[str] = None,
    ) -> None:
        self.policy = policy
        self.species: Species = policy.species
        self.color: str = color or policy.color
        self.organism_id: Optional[int] = None
        self.age: int = 0
        self.death_cause: Optional[DeathCause] = None
        self._lifecycle = create_lifecycle_state_machine()
        self.field: Optional["Field"] = field
        self.location: Optional[Location] = None
        self._move_to(location)

    @property
    def lifecycle_state(self) -> LifecycleState:
        return self._lifecycle.state

    def is_alive(self) -> bool:
        return self._lifecycle.state is LifecycleState.ALIVE

    @abstractmethod
    def act(self, context: StepContext) -> None:
        """Run one step of this organism's lifecycle."""

    def _move_to(self, new_location: Location) -> None:
        """Occupy ``new_location``, displacing a Plant that was growing there."""
        if self.field is None:
            raise LifecycleError(f"{self!r} has no field to move in")
        occupant = self.field.occupant_at(new_location)
        if occupant is not None and occupant is not self:
            occupant._displaced_by(self)
        if self.location is not None:
            self.field.clear(self.location)
        self.location = new_location
        self.field.place(self, new_location)

    def _displaced_by(self, newcomer: "Organism") -> None:
        raise LifecycleError(
            f"{newcomer!r} cannot take {self.location}: it holds a living {self.species.label}"
        )

    def set_dead(self, cause: DeathCause, context: Optional[StepContext] = None) -> None:
        """Mark the organism dead and vacate its cell. Calling it again is a no-op."""
        if not self.is_alive():
            return
        step = context.step if context is not None else 0
        self._lifecycle.transition(LifecycleState.DEAD, step=step, reason=cause.value)
        self.death_cause = cause

        field, location = self.field, self.location
        self.field = None
        self.location = None
        if field is not None and location is not None:
            field.clear(location)
            self._on_vacated(field, location, context)

        logger.debug(f"{self!r} died of {cause.value} at age {self.age} (step {step})")

    def _on_vacated(
        self, field: "Field", location: Location, context: Optional[StepContext]
    ) -> None:
        """Hook run after death frees ``location``."""

    def _increment_age(self, max_age: int, context: StepContext) -> None:
        self.age += 1
        if self.age > max_age:
            self.set_dead(DeathCause.OLD_AGE, context)

    def __repr__(self) -> str:
        ident = f"#{self.organism_id}" if self.organism_id is not None else ""
        return f"{self.species.label}{ident}@{self.location}"
