"""Plants: stationary food that regrows and seeds neighbouring cells.

Plants have no gene and no sex. They age to a fixed limit, accumulate bite
damage from grazers (healing one bite every few steps), and seed empty
adjacent cells until the plant census reaches its ceiling.
"""

import logging
from typing import TYPE_CHECKING, Optional

from pantanal.config.plants import (
    PLANT_GROWTH_INTERVAL,
    PLANT_MAX_AGE,
    PLANT_MAX_BITES,
    PLANT_MAX_SEEDS,
    PLANT_REGROWTH_COLOR,
    PLANT_SEED_PROBABILITY,
)
from pantanal.config.species import Species, get_policy
from pantanal.entities.base import DeathCause, Organism, StepContext
from pantanal.field import Occupancy
from pantanal.location import Location
from pantanal.state_machine import LifecycleState
from pantanal.util.rng import require_rng

if TYPE_CHECKING:
    from pantanal.field import Field

logger = logging.getLogger(__name__)


class Plant(Organism):
    """A plant occupying one cell.

    Attributes:
        growth_counter: Steps since the plant last healed a bite
        bites: Accumulated bite damage
    """

    sex = None
    gene = None

    def __init__(
        self,
        field: "Field",
        location: Location,
        *,
        color: str = PLANT_REGROWTH_COLOR,
        age: int = 0,
    ) -> None:
        super().__init__(field, location, get_policy(Species.PLANT), color=color)
        self.age = age
        self.growth_counter = 0
        self.bites = 0

    def act(self, context: StepContext) -> None:
        if not self.is_alive():
            return

        self._increment_age(PLANT_MAX_AGE, context)
        if not self.is_alive():
            return

        self.growth_counter += 1
        self._pollinate(context)

        if self.growth_counter >= PLANT_GROWTH_INTERVAL:
            self.grow()
            self.growth_counter = 0

    def grow(self) -> None:
        """Heal one bite of damage.

        An unbitten plant goes negative, banking resistance against later bites.
        """
        self.bites -= 1

    def take_bite(self, context: Optional[StepContext] = None) -> None:
        self.bites += 1
        if self.bites > PLANT_MAX_BITES:
            self.set_dead(DeathCause.EATEN, context)

    def _displaced_by(self, newcomer: Organism) -> None:
        # The newcomer takes over the cell, so it is not cleared here.
        if not self.is_alive():
            return
        self._lifecycle.transition(LifecycleState.DEAD, reason=DeathCause.DISPLACED.value)
        self.death_cause = DeathCause.DISPLACED
        logger.debug(f"Plant at {self.location} displaced by {newcomer!r}")
        self.field = None
        self.location = None

    def _pollinate(self, context: StepContext) -> None:
        """Asexual reproduction into empty adjacent cells."""
        cap = self.policy.population_cap
        if cap is not None and context.census.get(Species.PLANT, 0) >= cap:
            return

        rng = require_rng(self.field, "Plant._pollinate")
        seeds = self._number_of_seeds(rng)
        if seeds == 0:
            return

        empty = [
            where
            for where in self.field.neighbors(self.location)
            if self.field.occupancy(where) is Occupancy.EMPTY
        ]
        for where in empty[:seeds]:
            context.add_newborn(Plant(self.field, where))

    @staticmethod
    def _number_of_seeds(rng) -> int:
        if rng.random() <= PLANT_SEED_PROBABILITY:
            return rng.randint(1, PLANT_MAX_SEEDS)
        return 0
