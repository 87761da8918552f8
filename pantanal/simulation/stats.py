"""Population and lifecycle statistics.

PopulationStats answers "who is on the field right now" by scanning it on
demand. LifecycleStats accumulates births and deaths (by cause) over a run.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, DefaultDict, Dict

from pantanal.config.species import Species
from pantanal.entities.base import DeathCause, Organism
from pantanal.field import Field


@dataclass
class Counter:
    """Live count for one species."""

    name: str
    count: int = 0

    def increment(self) -> None:
        self.count += 1

    def reset(self) -> None:
        self.count = 0


class PopulationStats:
    """Per-species counts of living organisms on a field.

    Counters are only created for species that have been seen, so a species
    that never existed in a run does not appear in the details string.
    """

    def __init__(self) -> None:
        self._counters: Dict[Species, Counter] = {}
        self._counts_valid = False

    def reset(self) -> None:
        self._counts_valid = False
        for counter in self._counters.values():
            counter.reset()

    def increment_count(self, species: Species) -> None:
        counter = self._counters.get(species)
        if counter is None:
            counter = Counter(species.label)
            self._counters[species] = counter
        counter.increment()

    def count_finished(self) -> None:
        self._counts_valid = True

    def generate_counts(self, field: Field) -> Dict[Species, int]:
        """Rescan ``field`` and return the fresh per-species counts."""
        self.reset()
        for location in field.locations():
            occupant = field.occupant_at(location)
            if occupant is not None and occupant.is_alive():
                self.increment_count(occupant.species)
        self.count_finished()
        return self.counts()

    def counts(self) -> Dict[Species, int]:
        return {species: counter.count for species, counter in self._counters.items()}

    def population_details(self, field: Field) -> str:
        """Human-readable counts, e.g. ``"Capybara: 12 Plant: 310"``."""
        if not self._counts_valid:
            self.generate_counts(field)
        return " ".join(
            f"{counter.name}: {counter.count}" for counter in self._counters.values()
        )

    def is_viable(self, field: Field) -> bool:
        """True while at least one species has a living member on ``field``."""
        return any(count > 0 for count in self.generate_counts(field).values())


@dataclass
class LifecycleStats:
    """Births and deaths recorded over a run.

    Attributes:
        births: Organisms born during a step, per species, including those
            that died before the step ended
        deaths: Deaths per species and cause
    """

    births: DefaultDict[Species, int] = field(default_factory=lambda: defaultdict(int))
    deaths: DefaultDict[Species, DefaultDict[DeathCause, int]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(int))
    )

    def record_birth(self, organism: Organism) -> None:
        self.births[organism.species] += 1

    def record_death(self, organism: Organism) -> None:
        cause = organism.death_cause
        if cause is None:
            raise ValueError(f"{organism!r} has no death cause; is it still alive?")
        self.deaths[organism.species][cause] += 1

    @property
    def total_births(self) -> int:
        return sum(self.births.values())

    @property
    def total_deaths(self) -> int:
        return sum(sum(causes.values()) for causes in self.deaths.values())

    def deaths_by_cause(self) -> Dict[DeathCause, int]:
        totals: DefaultDict[DeathCause, int] = defaultdict(int)
        for causes in self.deaths.values():
            for cause, count in causes.items():
                totals[cause] += count
        return dict(totals)

    def reset(self) -> None:
        self.births.clear()
        self.deaths.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "births": {species.label: count for species, count in self.births.items()},
            "deaths": {
                species.label: {cause.value: count for cause, count in causes.items()}
                for species, causes in self.deaths.items()
            },
            "total_births": self.total_births,
            "total_deaths": self.total_deaths,
        }
