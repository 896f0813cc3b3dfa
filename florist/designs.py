"""Bouquet designs.

A design D = (code, R, T) consists of:
  code: a one-letter name plus the size shared by all of its stems
  R:    an ordered, duplicate-free tuple of stem requirements (stem, cap)
  T:    the exact number of stems in a finished bouquet

Every requirement must contribute at least one stem, so with k requirements
no single one may take more than T - k + 1. Declared counts are clamped to
that bound when the design is built; a count that clamps below 1 means the
design can never be filled and is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .errors import RangeError
from .stems import Size, Stem

logger = logging.getLogger(__name__)


class RequirementOrder(Enum):
    """Order in which a design stores (and later fills) its requirements."""

    RECORD = "record"
    SORTED = "sorted"


@dataclass(frozen=True)
class StemRequirement:
    """A stem a design may use, and at most how many of it."""

    stem: Stem
    max_count: int

    def __str__(self) -> str:
        return f"{self.max_count}{self.stem.species}"


@dataclass(frozen=True)
class Design:
    """A bouquet template.

    Example:
        Design("L", Size.SMALL, (
            StemRequirement(Stem("a", Size.SMALL), 3),
            StemRequirement(Stem("b", Size.SMALL), 3),
        ), total=4)
    """

    name: str
    size: Size
    requirements: tuple[StemRequirement, ...]
    total: int

    def __post_init__(self) -> None:
        if not self.requirements:
            raise RangeError("requirement_clamp", f"Design {self.code} has no requirements")
        stems = self.stems
        if len(set(stems)) != len(stems):
            raise RangeError(
                "requirement_clamp", f"Design {self.code} repeats a required stem"
            )
        any_stem_max = self.total - len(stems) + 1
        for req in self.requirements:
            if not 1 <= req.max_count <= any_stem_max:
                raise RangeError(
                    "requirement_clamp",
                    f"Design {self.code}: cap {req} outside 1..{any_stem_max} "
                    f"with total {self.total} and {len(stems)} requirements",
                )

    @property
    def code(self) -> str:
        return f"{self.name}{self.size.value}"

    @property
    def stems(self) -> tuple[Stem, ...]:
        return tuple(r.stem for r in self.requirements)

    @classmethod
    def build(
        cls,
        name: str,
        size: Size,
        declared: Iterable[tuple[str, int]],
        total: int,
        order: RequirementOrder = RequirementOrder.RECORD,
    ) -> Design:
        """Build a design from declared (species, count) pairs.

        Repeated species keep their first declared count. Raises RangeError
        when any clamped cap is below 1.
        """
        raw: dict[Stem, int] = {}
        for species, count in declared:
            stem = Stem(species, size)
            if stem in raw:
                logger.warning(
                    "Design %s%s declares species %r more than once; keeping %d",
                    name, size.value, species, raw[stem],
                )
                continue
            raw[stem] = count

        stems = sorted(raw) if order is RequirementOrder.SORTED else list(raw)
        any_stem_max = total - len(stems) + 1
        requirements: list[StemRequirement] = []
        for stem in stems:
            cap = min(raw[stem], any_stem_max)
            if cap < 1:
                raise RangeError(
                    "requirement_clamp",
                    f"Design {name}{size.value}: requirement {raw[stem]}{stem.species} "
                    f"clamps to {cap} with total {total} and {len(stems)} requirements",
                )
            requirements.append(StemRequirement(stem, cap))

        return cls(name=name, size=size, requirements=tuple(requirements), total=total)

    def __str__(self) -> str:
        options = "".join(str(r) for r in self.requirements)
        return f"Design {self.code} with stem options {options} and total {self.total}"
