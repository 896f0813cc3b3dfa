"""Stems: the unit of flower inventory.

A stem is identified by its species (a lowercase letter) and its size
(small or large). Stems are immutable values: equal stems are
interchangeable, hash alike, and sort Small before Large, then by species.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum

from .errors import FormatError

SPECIES = "abcdefghijklmnopqrstuvwxyz"


class Size(Enum):
    SMALL = "S"
    LARGE = "L"

    @property
    def rank(self) -> int:
        return 0 if self is Size.SMALL else 1

    @classmethod
    def parse(cls, code: str) -> Size:
        try:
            return cls(code)
        except ValueError:
            raise FormatError(
                "size_range", f"Size not one of S, L: {code!r}"
            ) from None


@functools.total_ordering
@dataclass(frozen=True)
class Stem:
    """One stem type, e.g. ``aS`` (species ``a``, size small)."""

    species: str
    size: Size

    def __post_init__(self) -> None:
        if len(self.species) != 1 or self.species not in SPECIES:
            raise FormatError(
                "species_range", f"Species not in range a-z: {self.species!r}"
            )
        if not isinstance(self.size, Size):
            raise FormatError("size_range", f"Size not one of S, L: {self.size!r}")

    @classmethod
    def parse(cls, text: str) -> Stem:
        """Build a stem from its two-character record form."""
        if len(text) != 2:
            raise FormatError(
                "stem_grammar",
                f"Stem record takes a 2-character string, got {len(text)}",
            )
        species, size = text
        return cls(species, Size.parse(size))

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.size.rank, self.species)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stem):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.species}{self.size.value}"
