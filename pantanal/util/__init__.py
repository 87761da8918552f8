"""Utilities for the simulation."""

from pantanal.util.rng import MissingRNGError, create_rng, require_rng, require_rng_param

__all__ = [
    "MissingRNGError",
    "create_rng",
    "require_rng",
    "require_rng_param",
]
