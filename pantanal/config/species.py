"""Species policies.

Every animal species runs the same lifecycle; what differs between them is
data: diet and food values, how hard it is to catch, how long a disease takes
to kill it. That data lives here, so adding a species is a configuration
change rather than new code.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from pantanal.config.plants import MAX_PLANT_COUNT, PLANT_COLOR


class Species(Enum):
    """Species tags used for dispatch, statistics and rendering."""

    PLANT = "Plant"
    CAPYBARA = "Capybara"
    DEER = "Deer"
    SQUIRREL = "Squirrel"
    JAGUAR = "Jaguar"
    CROCODILE = "Crocodile"

    @property
    def label(self) -> str:
        return self.value


class Sex(Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class SpeciesPolicy:
    """Constant per-species configuration consumed by the generic lifecycle.

    Attributes:
        species: Species tag this policy configures
        color: Hex color marker for renderers
        max_food_level: Food level cap; newborn and seeded animals start here
        diet: Map of edible species to the food value gained by eating one
        flee_probability: Chance this species evades a predator per attack
        disease_duration_limit: Infected steps before the disease is fatal
        population_cap: Census at which reproduction stops (None = unbounded)
    """

    species: Species
    color: str
    max_food_level: float = 0.0
    diet: Mapping[Species, int] = field(default_factory=dict)
    flee_probability: float = 0.0
    disease_duration_limit: int = 0
    population_cap: Optional[int] = None

    @property
    def is_herbivore(self) -> bool:
        return Species.PLANT in self.diet

    def food_value(self, prey: Species) -> int:
        return self.diet.get(prey, 0)

    def eats(self, species: Species) -> bool:
        return species in self.diet


# Food values
HERBIVORE_PLANT_FOOD_VALUE = 3
SQUIRREL_FOOD_VALUE = 8
CAPYBARA_FOOD_VALUE = 12
DEER_FOOD_VALUE = 15

PREDATOR_DIET: Dict[Species, int] = {
    Species.SQUIRREL: SQUIRREL_FOOD_VALUE,
    Species.CAPYBARA: CAPYBARA_FOOD_VALUE,
    Species.DEER: DEER_FOOD_VALUE,
}
HERBIVORE_DIET: Dict[Species, int] = {Species.PLANT: HERBIVORE_PLANT_FOOD_VALUE}

_POLICIES: Dict[Species, SpeciesPolicy] = {
    Species.PLANT: SpeciesPolicy(
        species=Species.PLANT,
        color=PLANT_COLOR,
        population_cap=MAX_PLANT_COUNT,
    ),
    Species.CAPYBARA: SpeciesPolicy(
        species=Species.CAPYBARA,
        color="#8b4513",
        max_food_level=15,
        diet=MappingProxyType(HERBIVORE_DIET),
        flee_probability=0.8,
        disease_duration_limit=30,
    ),
    Species.DEER: SpeciesPolicy(
        species=Species.DEER,
        color="#cd853f",
        max_food_level=20,
        diet=MappingProxyType(HERBIVORE_DIET),
        flee_probability=0.6,
        disease_duration_limit=20,
    ),
    Species.SQUIRREL: SpeciesPolicy(
        species=Species.SQUIRREL,
        color="#696969",
        max_food_level=12,
        diet=MappingProxyType(HERBIVORE_DIET),
        flee_probability=0.6,
        disease_duration_limit=10,
    ),
    Species.JAGUAR: SpeciesPolicy(
        species=Species.JAGUAR,
        color="#ffd700",
        max_food_level=30,
        diet=MappingProxyType(PREDATOR_DIET),
        disease_duration_limit=40,
    ),
    Species.CROCODILE: SpeciesPolicy(
        species=Species.CROCODILE,
        color="#006400",
        max_food_level=35,
        diet=MappingProxyType(PREDATOR_DIET),
        disease_duration_limit=40,
    ),
}

SPECIES_POLICIES: Mapping[Species, SpeciesPolicy] = MappingProxyType(_POLICIES)

ANIMAL_SPECIES: Tuple[Species, ...] = (
    Species.CAPYBARA,
    Species.DEER,
    Species.SQUIRREL,
    Species.JAGUAR,
    Species.CROCODILE,
)


def get_policy(species: Species) -> SpeciesPolicy:
    return SPECIES_POLICIES[species]
