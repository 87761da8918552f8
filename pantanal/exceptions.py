"""Pantanal exception hierarchy.

Centralised base classes so callers can catch narrowly and programming
errors (bad coordinates, malformed genes, misuse of a torn-down engine)
fail fast with a clear type.
"""


class PantanalError(Exception):
    """Root of all Pantanal domain exceptions."""


class SimulationError(PantanalError):
    """Errors during simulation execution (engine misuse, torn-down engine)."""


class FieldError(SimulationError):
    """An invalid location was passed to a field operation."""


class LifecycleError(SimulationError):
    """An organism was driven through an invalid lifecycle transition."""


class GeneticsError(SimulationError):
    """Gene encoding, decoding, or mutation failure."""


class ConfigurationError(PantanalError):
    """Invalid or missing configuration."""
