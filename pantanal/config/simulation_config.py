"""Run-level simulation configuration."""

import dataclasses
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from pantanal.config.species import Species
from pantanal.exceptions import ConfigurationError

# Default field dimensions (rows x columns)
DEFAULT_FIELD_DEPTH = 80
DEFAULT_FIELD_WIDTH = 100

# Fixed seed used unless a run opts in to non-deterministic seeding
DEFAULT_SEED = 1111

# Per-cell creation probabilities, in the order they are evaluated when the
# field is populated. Each is an independent draw and the first hit wins, so
# earlier species are favoured. These are intentionally not normalized.
DEFAULT_CREATION_PROBABILITIES: Tuple[Tuple[Species, float], ...] = (
    (Species.CROCODILE, 0.015),
    (Species.JAGUAR, 0.020),
    (Species.CAPYBARA, 0.10),
    (Species.DEER, 0.15),
    (Species.SQUIRREL, 0.05),
)


@dataclass
class FieldConfig:
    """Field dimensions."""

    depth: int = DEFAULT_FIELD_DEPTH
    width: int = DEFAULT_FIELD_WIDTH


@dataclass
class SeedingConfig:
    """Initial population settings.

    Attributes:
        creation_probabilities: (species, probability) pairs in priority order;
            cells that match none of them get a Plant
    """

    creation_probabilities: Tuple[Tuple[Species, float], ...] = DEFAULT_CREATION_PROBABILITIES


@dataclass
class SimulationConfig:
    """Configuration for a simulation run.

    Attributes:
        field: Field dimensions
        seeding: Initial population settings
        seed: Seed for the run's generator; None requires allow_nondeterministic
        allow_nondeterministic: Explicit opt-in to an unseeded generator
    """

    field: FieldConfig = dataclasses.field(default_factory=FieldConfig)
    seeding: SeedingConfig = dataclasses.field(default_factory=SeedingConfig)
    seed: Optional[int] = DEFAULT_SEED
    allow_nondeterministic: bool = False

    @classmethod
    def deterministic(cls, seed: int = DEFAULT_SEED, **overrides: Any) -> "SimulationConfig":
        """Config whose every draw comes from a generator seeded with ``seed``."""
        return cls(seed=seed, allow_nondeterministic=False, **overrides)

    @classmethod
    def nondeterministic(cls, **overrides: Any) -> "SimulationConfig":
        """Config that opts in to an unseeded generator."""
        return cls(seed=None, allow_nondeterministic=True, **overrides)

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with the given top-level fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "depth": self.field.depth,
            "width": self.field.width,
            "seed": self.seed,
            "allow_nondeterministic": self.allow_nondeterministic,
            "creation_probabilities": [
                [species.label, probability]
                for species, probability in self.seeding.creation_probabilities
            ],
        }

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ConfigurationError: If any parameter is invalid
        """
        if self.field.depth < 1 or self.field.width < 1:
            raise ConfigurationError(
                f"Field dimensions must be positive, got {self.field.depth}x{self.field.width}"
            )

        if self.seed is None and not self.allow_nondeterministic:
            raise ConfigurationError(
                "Seeding policy missing: set a seed or allow_nondeterministic=True"
            )

        seen = set()
        for species, probability in self.seeding.creation_probabilities:
            if species is Species.PLANT:
                raise ConfigurationError("Plants fill the remaining cells; do not list them")
            if species in seen:
                raise ConfigurationError(f"{species.label} listed twice in creation probabilities")
            seen.add(species)
            if not 0.0 <= probability <= 1.0:
                raise ConfigurationError(
                    f"Creation probability for {species.label} must be in [0, 1], got {probability}"
                )
