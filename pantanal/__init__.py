"""Pantanal: a deterministic grid ecosystem of plants, grazers and predators.

Organisms share a bounded field, live through an age/hunger/disease/breeding
lifecycle, and pass 14-digit genes to their offspring through crossover and
mutation.

Typical use:
    engine = SimulationEngine(SimulationConfig.deterministic(seed=7))
    engine.simulate(100)
    snapshot = engine.field_snapshot()
"""

from pantanal.config import SimulationConfig, Species
from pantanal.field import Field, Occupancy
from pantanal.location import Location
from pantanal.simulation import FieldSnapshot, SimulationEngine

__version__ = "0.1.0"

__all__ = [
    "Field",
    "FieldSnapshot",
    "Location",
    "Occupancy",
    "SimulationConfig",
    "SimulationEngine",
    "Species",
]
