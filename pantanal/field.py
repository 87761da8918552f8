"""Bounded rectangular grid holding at most one organism per cell.

The field owns placement only; organism lifetime belongs to the engine's
collection. Neighborhood queries come back shuffled with the field's RNG,
and several behaviours (foraging, mate search, movement) rely on that order
for tie-breaking.
"""

import random
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional

from pantanal.config.species import Species
from pantanal.exceptions import FieldError
from pantanal.location import Location

if TYPE_CHECKING:
    from pantanal.entities.animal import Animal
    from pantanal.entities.base import Organism


class Occupancy(Enum):
    """What a cell currently holds."""

    EMPTY = "empty"
    PLANT = "plant"
    ANIMAL = "animal"

    @property
    def is_free(self) -> bool:
        """Whether an animal may move or be born into the cell (plants are displaceable)."""
        return self is not Occupancy.ANIMAL


class Field:
    """A depth x width grid of cells.

    Attributes:
        rng: Generator shared with the organisms living on this field
    """

    def __init__(self, depth: int, width: int, rng: random.Random) -> None:
        if depth < 1 or width < 1:
            raise FieldError(f"Field dimensions must be positive, got {depth}x{width}")
        self._depth = depth
        self._width = width
        self.rng = rng
        self._cells: List[List[Optional["Organism"]]] = [
            [None] * width for _ in range(depth)
        ]

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self._depth and 0 <= location.col < self._width

    def _check(self, location: Optional[Location]) -> Location:
        if location is None:
            raise FieldError("Null location passed to field operation")
        if not self.in_bounds(location):
            raise FieldError(
                f"Location {location} outside field of size {self._depth}x{self._width}"
            )
        return location

    def clear(self, location: Optional[Location] = None) -> None:
        """Empty one cell, or the whole field when no location is given."""
        if location is None:
            for row in self._cells:
                for col in range(self._width):
                    row[col] = None
            return
        self._check(location)
        self._cells[location.row][location.col] = None

    def place(self, organism: "Organism", location: Location) -> None:
        """Put an organism at a location, overwriting any occupant."""
        self._check(location)
        self._cells[location.row][location.col] = organism

    def occupant_at(self, location: Location) -> Optional["Organism"]:
        self._check(location)
        return self._cells[location.row][location.col]

    def occupancy(self, location: Location) -> Occupancy:
        occupant = self.occupant_at(location)
        if occupant is None:
            return Occupancy.EMPTY
        if occupant.species is Species.PLANT:
            return Occupancy.PLANT
        return Occupancy.ANIMAL

    def locations(self) -> Iterator[Location]:
        """Every location in row-major order."""
        for row in range(self._depth):
            for col in range(self._width):
                yield Location(row, col)

    def neighbors(self, location: Location) -> List[Location]:
        """In-bounds cells adjacent to ``location`` (excluding it), shuffled."""
        self._check(location)
        adjacent: List[Location] = []
        for row_offset in (-1, 0, 1):
            row = location.row + row_offset
            if not 0 <= row < self._depth:
                continue
            for col_offset in (-1, 0, 1):
                col = location.col + col_offset
                if 0 <= col < self._width and (row_offset or col_offset):
                    adjacent.append(Location(row, col))
        self.rng.shuffle(adjacent)
        return adjacent

    def living_animal_neighbors(self, location: Location) -> List["Animal"]:
        """Living animals in cells adjacent to ``location``, shuffled."""
        animals = []
        for where in self.neighbors(location):
            occupant = self._cells[where.row][where.col]
            if (
                occupant is not None
                and occupant.species is not Species.PLANT
                and occupant.is_alive()
            ):
                animals.append(occupant)
        self.rng.shuffle(animals)
        return animals

    def free_adjacent(self, location: Location) -> List[Location]:
        """Adjacent cells that are empty or hold a Plant."""
        return [where for where in self.neighbors(location) if self.occupancy(where).is_free]

    def first_free_adjacent(self, location: Location) -> Optional[Location]:
        free = self.free_adjacent(location)
        return free[0] if free else None

    def count_plants(self) -> int:
        return sum(
            1
            for row in self._cells
            for occupant in row
            if occupant is not None and occupant.species is Species.PLANT
        )

    def __repr__(self) -> str:
        return f"Field(depth={self._depth}, width={self._width})"
