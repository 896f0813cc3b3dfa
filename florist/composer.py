"""Online bouquet composition.

Each arriving stem is added to supply, then the designs that require it are
tried in registration order. The first design that can be filled exactly
from current supply wins: its stems are taken out of supply and a bouquet is
returned. Nothing is reserved ahead of an arrival and nothing is given back
once a bouquet is out.

Filling a design walks its requirements in stored order. Each requirement
takes as many stems as it can while leaving at least one stem's worth of
room for every requirement still to come:

    take = min(available, cap, remaining - (requirements_left - 1))

A requirement with nothing on hand vetoes the design, and the walk only
succeeds if it ends with exactly ``total`` stems taken.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .bouquet import Bouquet, StemCount
from .catalog import DesignCatalog
from .designs import Design
from .ledger import SupplyLedger
from .stems import Stem

logger = logging.getLogger(__name__)


def try_extract(ledger: SupplyLedger, design: Design) -> tuple[StemCount, ...] | None:
    """Work out the arrangement ``design`` would take from ``ledger``.

    Reads the ledger without changing it. Returns None when the design cannot
    be filled exactly right now.
    """
    remaining = design.total
    requirements_left = len(design.requirements)
    arrangement: list[StemCount] = []

    for req in design.requirements:
        available = ledger.available(req.stem)
        if not available:
            logger.debug("%s vetoed: no %s on hand", design.code, req.stem)
            return None
        requirements_left -= 1
        take = min(available, req.max_count, remaining - requirements_left)
        arrangement.append(StemCount(req.stem, take))
        remaining -= take

    if remaining != 0:
        logger.debug("%s short by %d stems", design.code, remaining)
        return None
    return tuple(arrangement)


@dataclass
class BouquetComposer:
    """Owns the design catalog and the supply ledger for one run."""

    catalog: DesignCatalog
    ledger: SupplyLedger = field(default_factory=SupplyLedger)
    received: Counter[Stem] = field(default_factory=Counter)
    committed: Counter[Stem] = field(default_factory=Counter)
    emitted: int = 0

    def compose(self, stem: Stem) -> Bouquet | None:
        """Add ``stem`` to supply and return the bouquet it completes, if any."""
        self.ledger.add(stem)
        self.received[stem] += 1
        logger.debug("Received %s (%d on hand)", stem, self.ledger.available(stem))

        for design in self.catalog.candidates(stem):
            arrangement = try_extract(self.ledger, design)
            if arrangement is None:
                continue
            self.ledger.commit(arrangement)
            for taken in arrangement:
                self.committed[taken.stem] += taken.count
            self.emitted += 1
            bouquet = Bouquet(design.code, arrangement)
            logger.info(
                "Composed %s (%d stems) on arrival of %s", bouquet, bouquet.size, stem
            )
            return bouquet

        return None

    def compose_stream(self, stems: Iterable[Stem]) -> Iterator[Bouquet]:
        """Compose each stem in arrival order, yielding bouquets as they complete."""
        for stem in stems:
            bouquet = self.compose(stem)
            if bouquet is not None:
                yield bouquet

    @property
    def arrivals(self) -> int:
        return sum(self.received.values())
