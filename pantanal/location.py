"""Grid coordinates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """An immutable (row, col) position in a field.

    Locations compare and hash by value, so they can be used freely as dict
    keys and set members and copied without ownership concerns.
    """

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
