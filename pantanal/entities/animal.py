"""Animals: one generic lifecycle for every animal species.

Capybaras, deer, squirrels, jaguars and crocodiles all age, starve, breed,
forage and fall ill the same way. Everything that distinguishes them (diet,
food values, evasion, how long a disease takes to kill) comes from their
SpeciesPolicy, and everything that distinguishes individuals comes from
their own gene.

Per-step order:
    1. Age; past max age -> dead
    2. Metabolism; food level at or below zero -> dead
    3. Reproduce, then forage or move (no room -> overcrowding death),
       then disease progression
"""

import logging
import random
from typing import TYPE_CHECKING, Optional

from pantanal.config.plants import PLANT_REGROWTH_COLOR
from pantanal.config.species import Sex, Species, SpeciesPolicy
from pantanal.entities.base import DeathCause, Organism, StepContext
from pantanal.entities.plant import Plant
from pantanal.field import Occupancy
from pantanal.genetics import crossover, encode_random, mutate, parse
from pantanal.location import Location
from pantanal.util.rng import require_rng

if TYPE_CHECKING:
    from pantanal.field import Field

logger = logging.getLogger(__name__)


def random_sex(rng: random.Random) -> Sex:
    return rng.choice((Sex.MALE, Sex.FEMALE))


class Animal(Organism):
    """An animal whose life-cycle constants come from its gene.

    Attributes:
        gene: The 14-digit gene string
        traits: Traits decoded from the gene (owned by this individual)
        sex: This individual's sex
        food_level: Current food; metabolism is subtracted every step
        infected: Whether the animal carries the disease
        disease_duration: Steps spent infected
    """

    def __init__(
        self,
        policy: SpeciesPolicy,
        field: "Field",
        location: Location,
        gene: str,
        sex: Sex,
        *,
        age: int = 0,
        color: Optional[str] = None,
    ) -> None:
        if policy.species is Species.PLANT:
            raise ValueError("Plants are not animals; use Plant")
        self.gene = gene
        self.traits = parse(gene)
        self.sex = sex
        super().__init__(field, location, policy, color=color)
        self.age = age
        self.food_level: float = float(policy.max_food_level)
        self.infected = False
        self.disease_duration = 0

    @classmethod
    def founder(
        cls,
        policy: SpeciesPolicy,
        field: "Field",
        location: Location,
        rng: random.Random,
    ) -> "Animal":
        """Create a first-generation animal with a random gene, sex and age."""
        gene = encode_random(rng)
        max_age = parse(gene).max_age
        age = rng.randrange(max_age) if max_age > 0 else 0
        return cls(policy, field, location, gene, random_sex(rng), age=age)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def act(self, context: StepContext) -> None:
        if not self.is_alive():
            return

        self._increment_age(self.traits.max_age, context)
        if self.is_alive():
            self._increment_hunger(context)
        if not self.is_alive():
            return

        rng = require_rng(self.field, "Animal.act")
        self._give_birth(context, rng)

        new_location = self._find_food(context, rng)
        if new_location is None:
            new_location = self.field.first_free_adjacent(self.location)
        if new_location is None:
            self.set_dead(DeathCause.OVERCROWDING, context)
            return
        self._move_to(new_location)

        if not self.infected:
            self.try_gain_disease(rng)
        else:
            self._spread_disease(rng)
            self._increment_disease_duration(context)

    def _increment_hunger(self, context: StepContext) -> None:
        self.food_level -= self.traits.metabolism
        if self.food_level <= 0:
            self.set_dead(DeathCause.STARVATION, context)

    def _on_vacated(
        self, field: "Field", location: Location, context: Optional[StepContext]
    ) -> None:
        # Decomposition: a plant regrows where the animal died.
        plant = Plant(field, location, color=PLANT_REGROWTH_COLOR)
        if context is not None:
            context.add_newborn(plant)

    # ------------------------------------------------------------------
    # Reproduction
    # ------------------------------------------------------------------

    def can_breed(self) -> bool:
        return self.age >= self.traits.breeding_age

    def _breed(self, rng: random.Random) -> int:
        """Number of births attempted this step (may be zero)."""
        if not self.can_breed() or self.traits.max_litter_size < 1:
            return 0
        if rng.random() <= self.traits.breeding_probability:
            return rng.randint(1, self.traits.max_litter_size)
        return 0

    def _find_mate(self) -> Optional["Animal"]:
        """First living same-species neighbor of the opposite sex, if any."""
        for neighbor in self.field.living_animal_neighbors(self.location):
            if neighbor.species is self.species and neighbor.sex is not self.sex:
                return neighbor
        return None

    def _give_birth(self, context: StepContext, rng: random.Random) -> None:
        """Place offspring in free adjacent cells, one mate search per slot.

        The litter size is an upper bound: slots with no opposite-sex
        neighbor are skipped, and there are never more births than free
        cells counted before the first birth.
        """
        free = self.field.free_adjacent(self.location)
        births = self._breed(rng)

        for _ in range(births):
            if not free:
                break
            where = free.pop(0)
            mate = self._find_mate()
            if mate is None:
                continue
            child_gene = mutate(crossover(self.gene, mate.gene), rng)
            young = Animal(
                self.policy,
                self.field,
                where,
                child_gene,
                random_sex(rng),
                color=self.color,
            )
            context.add_newborn(young)
            logger.debug(f"{self!r} and {mate!r} produced {young!r}")

    # ------------------------------------------------------------------
    # Foraging
    # ------------------------------------------------------------------

    def evades(self, rng: random.Random) -> bool:
        """Flee check, rolled fresh on every attack."""
        return rng.random() < self.policy.flee_probability

    def _eat(self, food_value: int) -> None:
        self.food_level = min(self.food_level + food_value, self.policy.max_food_level)

    def _find_food(self, context: StepContext, rng: random.Random) -> Optional[Location]:
        """Eat from the first suitable neighbor and return its cell, if any."""
        for where in self.field.neighbors(self.location):
            occupancy = self.field.occupancy(where)
            if occupancy is Occupancy.EMPTY:
                continue
            food = self.field.occupant_at(where)
            if not food.is_alive() or not self.policy.eats(food.species):
                continue

            if occupancy is Occupancy.PLANT:
                food.take_bite(context)
            else:
                if food.evades(rng):
                    continue
                food.set_dead(DeathCause.PREDATION, context)
            self._eat(self.policy.food_value(food.species))
            return where
        return None

    # ------------------------------------------------------------------
    # Disease
    # ------------------------------------------------------------------

    def try_gain_disease(self, rng: random.Random) -> bool:
        """Roll for infection; returns True if the animal became infected."""
        if self.infected:
            return False
        if rng.random() <= self.traits.disease_probability:
            self.infected = True
            self.disease_duration = 0
            return True
        return False

    def _spread_disease(self, rng: random.Random) -> None:
        for neighbor in self.field.living_animal_neighbors(self.location):
            if neighbor.species is self.species:
                neighbor.try_gain_disease(rng)

    def _increment_disease_duration(self, context: StepContext) -> None:
        self.disease_duration += 1
        if self.disease_duration >= self.policy.disease_duration_limit:
            self.set_dead(DeathCause.DISEASE, context)
