"""Organisms that live on the field."""

from pantanal.entities.animal import Animal, random_sex
from pantanal.entities.base import DeathCause, Organism, StepContext
from pantanal.entities.plant import Plant

__all__ = [
    "Animal",
    "DeathCause",
    "Organism",
    "Plant",
    "StepContext",
    "random_sex",
]
