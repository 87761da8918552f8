"""Pytest configuration and fixtures for Pantanal tests."""

import itertools
import random

import pytest

from pantanal.config.species import Sex, Species, get_policy
from pantanal.entities import Animal, Plant, StepContext
from pantanal.field import Field
from pantanal.location import Location

# Gene layout: breeding age | max age | breeding % | litter | disease % | metabolism %
# Never breeds before 90, lives to 120, never falls ill, burns 0.25 food per step.
HEALTHY_GENE = "90" "120" "00" "01" "00" "025"
# Breeds from age 1 with 50% chance, litters of up to 4, never falls ill.
BREEDER_GENE = "01" "120" "50" "04" "00" "010"
# A second breeder with different digits in both halves.
OTHER_BREEDER_GENE = "02" "110" "45" "03" "00" "020"
# Healthy, but catches the disease on a roll of 0.5 or less.
SUSCEPTIBLE_GENE = "90" "120" "00" "01" "50" "025"


class ScriptedRandom(random.Random):
    """Random whose ``random()`` cycles through fixed values.

    Integer draws (shuffle, randint, choice) still come from the seeded
    Mersenne Twister, so neighbor order stays realistic while every
    probability roll is forced.
    """

    def __init__(self, *values: float, seed: int = 0) -> None:
        super().__init__(seed)
        self._values = itertools.cycle(values)

    def random(self) -> float:
        return next(self._values)

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def make_field():
    def _make(depth: int, width: int, rng: random.Random = None) -> Field:
        return Field(depth, width, rng if rng is not None else random.Random(42))

    return _make


@pytest.fixture
def place_animal():
    def _place(
        field: Field,
        species: Species,
        row: int,
        col: int,
        *,
        gene: str = HEALTHY_GENE,
        sex: Sex = Sex.FEMALE,
        age: int = 5,
    ) -> Animal:
        return Animal(get_policy(species), field, Location(row, col), gene, sex, age=age)

    return _place


@pytest.fixture
def place_plant():
    def _place(field: Field, row: int, col: int) -> Plant:
        return Plant(field, Location(row, col))

    return _place


@pytest.fixture
def context():
    return StepContext(step=1)
