"""Design catalog, indexed by the stems each design requires.

An arriving stem can only complete a design that requires it, so the
catalog answers "which designs might this stem finish?" by looking up the
stem itself rather than scanning every design.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .designs import Design
from .stems import Stem

logger = logging.getLogger(__name__)


@dataclass
class DesignCatalog:
    """All known designs, in registration order, plus a per-stem index."""

    _designs: list[Design] = field(default_factory=list)
    _by_stem: dict[Stem, list[Design]] = field(default_factory=dict)
    _codes: set[str] = field(default_factory=set)

    @classmethod
    def from_designs(cls, designs: Iterable[Design]) -> DesignCatalog:
        catalog = cls()
        for design in designs:
            catalog.register(design)
        return catalog

    def register(self, design: Design) -> None:
        if design.code in self._codes:
            logger.warning(
                "Design code %s registered more than once; earlier entry wins ties",
                design.code,
            )
        self._codes.add(design.code)
        self._designs.append(design)
        for stem in design.stems:
            self._by_stem.setdefault(stem, []).append(design)

    def candidates(self, stem: Stem) -> tuple[Design, ...]:
        """Designs requiring ``stem``, earliest registered first."""
        return tuple(self._by_stem.get(stem, ()))

    @property
    def stems(self) -> frozenset[Stem]:
        return frozenset(self._by_stem)

    def __len__(self) -> int:
        return len(self._designs)

    def __iter__(self) -> Iterator[Design]:
        return iter(self._designs)
