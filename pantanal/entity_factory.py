"""Initial population seeding."""

import logging
import random
from typing import List

from pantanal.config.plants import PLANT_COLOR
from pantanal.config.simulation_config import SeedingConfig
from pantanal.config.species import Species, get_policy
from pantanal.entities import Animal, Organism, Plant
from pantanal.field import Field
from pantanal.location import Location
from pantanal.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def create_organism(
    species: Species, field: Field, location: Location, rng: random.Random
) -> Organism:
    """Create a founder of ``species`` at ``location``."""
    if species is Species.PLANT:
        return Plant(field, location, color=PLANT_COLOR)
    return Animal.founder(get_policy(species), field, location, rng)


def choose_species(seeding: SeedingConfig, rng: random.Random) -> Species:
    """Pick the founder species for one cell.

    Each listed species gets its own independent draw, in priority order, and
    the first hit wins; a cell that misses every draw becomes a Plant.
    """
    for species, probability in seeding.creation_probabilities:
        if rng.random() <= probability:
            return species
    return Species.PLANT


def create_initial_population(
    field: Field, rng: random.Random, seeding: SeedingConfig
) -> List[Organism]:
    """Fill every cell of a cleared field with a founder, row by row."""
    rng = require_rng_param(rng, "create_initial_population")
    population: List[Organism] = []
    for location in field.locations():
        species = choose_species(seeding, rng)
        population.append(create_organism(species, field, location, rng))
    logger.debug(f"Seeded {len(population)} organisms on {field!r}")
    return population
