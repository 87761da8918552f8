"""Configuration package for the Pantanal simulation.

Species numbers live in ``species.py``, plant numbers in ``plants.py`` and
run-level settings (field size, seeding policy) in ``simulation_config.py``.
"""

from pantanal.config.simulation_config import FieldConfig, SeedingConfig, SimulationConfig
from pantanal.config.species import (
    ANIMAL_SPECIES,
    SPECIES_POLICIES,
    Sex,
    Species,
    SpeciesPolicy,
    get_policy,
)

__all__ = [
    "ANIMAL_SPECIES",
    "FieldConfig",
    "SPECIES_POLICIES",
    "SeedingConfig",
    "Sex",
    "SimulationConfig",
    "Species",
    "SpeciesPolicy",
    "get_policy",
]
