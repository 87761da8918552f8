"""Simulation engine, statistics and read-only snapshots."""

from pantanal.simulation.engine import SimulationEngine
from pantanal.simulation.snapshot import CellSnapshot, FieldSnapshot
from pantanal.simulation.stats import Counter, LifecycleStats, PopulationStats

__all__ = [
    "CellSnapshot",
    "Counter",
    "FieldSnapshot",
    "LifecycleStats",
    "PopulationStats",
    "SimulationEngine",
]
