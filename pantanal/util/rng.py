"""RNG utilities for deterministic simulation.

Every random draw in a run comes from a single ``random.Random`` owned by the
engine and shared through the field. These helpers fail loudly when that
generator is missing instead of silently creating an unseeded fallback, and
turn the configured seeding policy into a generator.
"""

import logging
import random
from typing import TYPE_CHECKING, Any, Optional

from pantanal.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pantanal.config.simulation_config import SimulationConfig

logger = logging.getLogger(__name__)


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in the simulation setup: every organism reaches the
    engine's RNG through the field it lives in.
    """


def require_rng(environment: Any, context: str = "unknown") -> random.Random:
    """Get the RNG from an environment (usually a Field), failing loudly if unavailable.

    Args:
        environment: Object expected to expose an ``rng`` attribute
        context: Description of the caller (for error messages)

    Returns:
        The environment's RNG

    Raises:
        MissingRNGError: If environment is None or has no RNG

    Example:
        rng = require_rng(self.field, "Animal.act")
        litter = rng.randint(1, self.traits.max_litter_size)
    """
    if environment is None:
        raise MissingRNGError(
            f"Cannot get RNG: environment is None (context: {context}). "
            "The organism may already be dead or was never placed in a field."
        )

    rng = getattr(environment, "rng", None)
    if rng is None:
        raise MissingRNGError(
            f"Cannot get RNG: environment has no 'rng' attribute (context: {context})."
        )

    return rng


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not."""
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the engine RNG explicitly.")
    return rng


def create_rng(config: "SimulationConfig") -> random.Random:
    """Build the run's generator from the configured seeding policy.

    A fixed ``seed`` gives a reproducible run. Without one, the config must opt
    in to non-deterministic seeding explicitly.

    Raises:
        ConfigurationError: If neither a seed nor the opt-in is configured
    """
    if config.seed is not None:
        return random.Random(config.seed)
    if not config.allow_nondeterministic:
        raise ConfigurationError(
            "No seed configured. Set a seed or opt in with allow_nondeterministic=True."
        )
    logger.info("Using non-deterministic RNG seeding")
    return random.Random()
