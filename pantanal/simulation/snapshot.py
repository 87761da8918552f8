"""Read-only field snapshots for presentation layers.

A snapshot is an immutable copy taken between steps. Renderers and stats
panels read it instead of the live field, so they never observe a half
finished sweep.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import orjson

from pantanal.config.species import Species
from pantanal.exceptions import FieldError
from pantanal.field import Field
from pantanal.location import Location


@dataclass(frozen=True)
class CellSnapshot:
    """What a renderer needs to know about one occupied cell."""

    species: Species
    alive: bool
    color: str
    organism_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "species": self.species.label,
            "alive": self.alive,
            "color": self.color,
            "id": self.organism_id,
        }


@dataclass(frozen=True)
class FieldSnapshot:
    """Immutable copy of the field at the end of a step."""

    depth: int
    width: int
    step: int
    cells: Tuple[Tuple[Optional[CellSnapshot], ...], ...]

    @classmethod
    def from_field(cls, field: Field, step: int) -> "FieldSnapshot":
        rows = []
        for row in range(field.depth):
            cells = []
            for col in range(field.width):
                occupant = field.occupant_at(Location(row, col))
                if occupant is None:
                    cells.append(None)
                else:
                    cells.append(
                        CellSnapshot(
                            species=occupant.species,
                            alive=occupant.is_alive(),
                            color=occupant.color,
                            organism_id=occupant.organism_id,
                        )
                    )
            rows.append(tuple(cells))
        return cls(depth=field.depth, width=field.width, step=step, cells=tuple(rows))

    def cell(self, row: int, col: int) -> Optional[CellSnapshot]:
        if not (0 <= row < self.depth and 0 <= col < self.width):
            raise FieldError(f"Cell {row},{col} outside snapshot of size {self.depth}x{self.width}")
        return self.cells[row][col]

    def population_counts(self) -> Dict[Species, int]:
        tally = Counter(
            cell.species for row in self.cells for cell in row if cell is not None and cell.alive
        )
        return dict(tally)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "depth": self.depth,
            "width": self.width,
            "population": {
                species.label: count for species, count in self.population_counts().items()
            },
            "cells": [
                [cell.to_dict() if cell is not None else None for cell in row]
                for row in self.cells
            ],
        }

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict()).decode("utf-8")
