"""Supply ledger: how many of each stem are on hand."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .bouquet import StemCount
from .stems import Stem


@dataclass
class SupplyLedger:
    _counts: dict[Stem, int] = field(default_factory=dict)

    def add(self, stem: Stem, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Cannot add a negative count of {stem}: {count}")
        self._counts[stem] = self._counts.get(stem, 0) + count

    def available(self, stem: Stem) -> int:
        return self._counts.get(stem, 0)

    def commit(self, arrangement: Iterable[StemCount]) -> None:
        """Take every counted stem out of supply, all or nothing.

        Raises ValueError, with the ledger unchanged, if any stem is short.
        """
        applied: list[StemCount] = []
        for taken in arrangement:
            on_hand = self.available(taken.stem)
            if taken.count > on_hand:
                self.release(applied)
                raise ValueError(
                    f"Cannot take {taken.count} of {taken.stem}: only {on_hand} on hand"
                )
            self._counts[taken.stem] = on_hand - taken.count
            applied.append(taken)

    def release(self, arrangement: Iterable[StemCount]) -> None:
        for taken in arrangement:
            self.add(taken.stem, taken.count)

    def snapshot(self) -> Mapping[Stem, int]:
        """Non-zero counts, in stem order."""
        return {stem: n for stem, n in sorted(self._counts.items()) if n}

    def total(self) -> int:
        return sum(self._counts.values())
