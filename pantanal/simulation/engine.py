"""Simulation engine: owns the field and the organism collection.

One step:
    1. Every organism alive at its turn acts, in collection order. Field
       changes made by earlier organisms (a vacated cell, a killed prey) are
       visible to later ones in the same sweep.
    2. Organisms found dead after the sweep are removed from the collection.
    3. Newborns from the sweep are appended, so they first act next step.
    4. The per-species census used by population ceilings is refreshed.

The engine is single threaded. Presentation layers read ``field_snapshot()``
between steps and must not overlap their reads with ``step()``/``reset()``.
"""

import itertools
import logging
import random
from typing import Any, Dict, List, Optional

from pantanal.config.simulation_config import SimulationConfig
from pantanal.config.species import Species
from pantanal.entities.base import Organism, StepContext
from pantanal.entity_factory import create_initial_population
from pantanal.exceptions import LifecycleError, SimulationError
from pantanal.field import Field
from pantanal.simulation.snapshot import FieldSnapshot
from pantanal.simulation.stats import LifecycleStats, PopulationStats
from pantanal.util.rng import create_rng

logger = logging.getLogger(__name__)


class SimulationEngine:
    """A headless multi-species grid simulation.

    Attributes:
        config: Simulation configuration
        rng: The single generator every draw in the run comes from
        field: The grid organisms live on
        organisms: Living organisms in acting order
        step_count: Steps simulated since the last reset
        population_stats: On-demand per-species field counts
        lifecycle_stats: Births and deaths since the last reset
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        populate: bool = True,
    ) -> None:
        """Initialize the simulation engine.

        Args:
            config: Simulation configuration (defaults to a fixed-seed run)
            rng: Generator to use instead of one built from the config's seeding policy
            populate: Seed the initial population; pass False to start with an
                empty field and add organisms by hand
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        self._owns_rng = rng is None
        self.rng: random.Random = rng if rng is not None else create_rng(self.config)

        self.field = Field(self.config.field.depth, self.config.field.width, self.rng)
        self.organisms: List[Organism] = []
        self.step_count: int = 0
        self.population_stats = PopulationStats()
        self.lifecycle_stats = LifecycleStats()
        self._census: Dict[Species, int] = {}
        self._ids = itertools.count(1)
        self._closed = False

        logger.info(
            f"SimulationEngine initialized: field={self.field.depth}x{self.field.width}, "
            f"seed={self.config.seed}, injected_rng={not self._owns_rng}"
        )

        if populate:
            self.reset()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _require_open(self, operation: str) -> None:
        if self._closed:
            raise SimulationError(f"Cannot {operation}: the engine has been closed")

    def close(self) -> None:
        """Tear the engine down. Further steps, resets and snapshots raise."""
        self.organisms.clear()
        self.field.clear()
        self._census = {}
        self._closed = True
        logger.info("SimulationEngine closed")

    @property
    def closed(self) -> bool:
        return self._closed

    def reset(self) -> None:
        """Clear the field and seed a fresh population; the step counter restarts at 0.

        An engine that built its own generator from a fixed seed re-seeds it,
        so every reset reproduces the same initial population.
        """
        self._require_open("reset")
        if self._owns_rng and self.config.seed is not None:
            self.rng.seed(self.config.seed)

        self.step_count = 0
        self.organisms = []
        self.lifecycle_stats.reset()
        self._ids = itertools.count(1)
        self.field.clear()

        for organism in create_initial_population(self.field, self.rng, self.config.seeding):
            self.add_organism(organism)
        self._refresh_census()

        logger.info(f"Simulation reset: {self.population_stats.population_details(self.field)}")

    def add_organism(self, organism: Organism) -> Organism:
        """Register an organism already placed on this engine's field."""
        self._require_open("add organisms")
        if organism.field is not self.field:
            raise LifecycleError(f"{organism!r} does not live on this engine's field")
        if organism.organism_id is None:
            organism.organism_id = next(self._ids)
        self.organisms.append(organism)
        self._census[organism.species] = self._census.get(organism.species, 0) + 1
        return organism

    # =========================================================================
    # Stepping
    # =========================================================================

    def step(self) -> None:
        """Advance the simulation by one step."""
        self._require_open("step")
        self.step_count += 1
        context = StepContext(step=self.step_count, census=dict(self._census))

        for organism in self.organisms:
            if organism.is_alive():
                organism.act(context)

        survivors: List[Organism] = []
        for organism in self.organisms:
            if organism.is_alive():
                survivors.append(organism)
            else:
                self.lifecycle_stats.record_death(organism)

        # A newborn killed later in its own sweep counts as a birth and a death.
        for newborn in context.newborns:
            newborn.organism_id = next(self._ids)
            self.lifecycle_stats.record_birth(newborn)
            if newborn.is_alive():
                survivors.append(newborn)
            else:
                self.lifecycle_stats.record_death(newborn)

        self.organisms = survivors
        self._refresh_census()

    def _refresh_census(self) -> None:
        self._census = self.population_stats.generate_counts(self.field)

    def simulate(self, num_steps: int) -> int:
        """Run up to ``num_steps`` steps, stopping early once nothing is alive.

        Returns:
            Number of steps actually run
        """
        for completed in range(num_steps):
            if not self.is_viable():
                logger.info(f"Simulation no longer viable at step {self.step_count}")
                return completed
            self.step()
        return num_steps

    def run_headless(self, max_steps: int = 1000, stats_interval: int = 100) -> Dict[str, Any]:
        """Run without visualization, logging population summaries as it goes."""
        logger.info(f"Running headless for up to {max_steps} steps")
        for _ in range(max_steps):
            if not self.is_viable():
                logger.info(f"Simulation no longer viable at step {self.step_count}")
                break
            self.step()
            if stats_interval > 0 and self.step_count % stats_interval == 0:
                logger.info(
                    f"Step {self.step_count}: "
                    f"{self.population_stats.population_details(self.field)}"
                )
        stats = self.get_stats()
        logger.info(f"Finished at step {self.step_count}: {stats['population']}")
        return stats

    # =========================================================================
    # Queries for presentation layers
    # =========================================================================

    def get_step_count(self) -> int:
        return self.step_count

    def is_viable(self) -> bool:
        """True while at least one species has a living member on the field."""
        self._require_open("check viability")
        return self.population_stats.is_viable(self.field)

    def field_snapshot(self) -> FieldSnapshot:
        self._require_open("take a snapshot")
        return FieldSnapshot.from_field(self.field, self.step_count)

    def population_counts(self) -> Dict[Species, int]:
        return dict(self._census)

    def get_stats(self) -> Dict[str, Any]:
        """Current population and lifecycle statistics as plain data."""
        return {
            "step": self.step_count,
            "organisms": len(self.organisms),
            "population": {species.label: count for species, count in self._census.items()},
            **self.lifecycle_stats.to_dict(),
        }
