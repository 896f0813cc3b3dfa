"""Bouquets: a design code plus the stems actually taken for it."""

from __future__ import annotations

from dataclasses import dataclass

from .stems import Stem


@dataclass(frozen=True)
class StemCount:
    """A quantity of one stem, e.g. three ``aS`` (printed ``3a``)."""

    stem: Stem
    count: int

    def __str__(self) -> str:
        return f"{self.count}{self.stem.species}"


@dataclass(frozen=True)
class Bouquet:
    code: str
    arrangement: tuple[StemCount, ...]

    @property
    def size(self) -> int:
        return sum(s.count for s in self.arrangement)

    def __str__(self) -> str:
        return self.code + "".join(str(s) for s in self.arrangement)
