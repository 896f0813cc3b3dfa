"""Composition scenarios and the properties every run must keep."""

import random
from collections import Counter

import pytest

from florist import (
    Bouquet,
    BouquetComposer,
    Design,
    DesignCatalog,
    Ok,
    Size,
    Stem,
    SupplyLedger,
    parse_design,
    try_extract,
)


def design(text: str) -> Design:
    match parse_design(text):
        case Ok(d):
            return d
        case err:
            pytest.fail(f"Expected a valid design, got {err}")


def composer_for(*records: str) -> BouquetComposer:
    return BouquetComposer(DesignCatalog.from_designs(design(r) for r in records))


def run(composer: BouquetComposer, arrivals: str) -> list[str | None]:
    """Compose each space-separated stem; record the bouquet line or None."""
    out: list[str | None] = []
    for text in arrivals.split():
        bouquet = composer.compose(Stem.parse(text))
        out.append(str(bouquet) if bouquet else None)
    return out


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_single_species_design() -> None:
    assert run(composer_for("AS2a2"), "aS aS") == [None, "AS2a"]


def test_two_species_design_consumes_its_stems() -> None:
    c = composer_for("BS1a1b2")
    assert run(c, "aS bS aS") == [None, "BS1a1b", None]
    assert c.ledger.available(Stem.parse("aS")) == 1
    assert c.ledger.available(Stem.parse("bS")) == 0


def test_total_is_met_exactly() -> None:
    assert run(composer_for("CS5a3"), "aS aS aS") == [None, None, "CS3a"]


def test_earlier_design_wins() -> None:
    c = composer_for("DS1a1", "ES1a1")
    assert run(c, "aS aS") == ["DS1a", "DS1a"]


def test_later_design_used_when_earlier_cannot_be_filled() -> None:
    c = composer_for("DS1a1b2", "ES1a1")
    assert run(c, "aS bS") == ["ES1a", None]


def test_caps_leave_room_for_later_requirements() -> None:
    # Total 4 over a and b: a may take at most 3, b fills the rest.
    c = composer_for("AL9a9b4")
    assert run(c, "aL aL aL aL aL bL") == [None] * 5 + ["AL3a1b"]
    assert c.ledger.available(Stem.parse("aL")) == 2


def test_no_look_ahead_across_sizes() -> None:
    c = composer_for("AS1a1")
    assert run(c, "aL aL") == [None, None]
    assert c.emitted == 0


def test_arrival_of_unrelated_stem_never_completes_a_design() -> None:
    c = composer_for("AS2a1b3")
    # aS, aS and cS are on hand; only the bS arrival can finish AS.
    assert run(c, "aS aS cS bS") == [None, None, None, "AS2a1b"]


def test_compose_stream_yields_in_arrival_order() -> None:
    c = composer_for("AS1a1", "BS1b1")
    stems = [Stem.parse(t) for t in ("bS", "aS", "cS", "bS")]
    assert [str(b) for b in c.compose_stream(stems)] == ["BS1b", "AS1a", "BS1b"]
    assert c.arrivals == 4
    assert c.emitted == 3


# ---------------------------------------------------------------------------
# try_extract
# ---------------------------------------------------------------------------


def test_try_extract_does_not_touch_the_ledger() -> None:
    ledger = SupplyLedger()
    ledger.add(Stem.parse("aS"), 5)
    arrangement = try_extract(ledger, design("AS5a1b3"))
    assert arrangement is None
    assert ledger.snapshot() == {Stem.parse("aS"): 5}


def test_try_extract_vetoes_on_missing_requirement() -> None:
    ledger = SupplyLedger()
    ledger.add(Stem.parse("bS"), 4)
    assert try_extract(ledger, design("AS1a9b3")) is None


def test_try_extract_short_of_total() -> None:
    ledger = SupplyLedger()
    ledger.add(Stem.parse("aS"), 1)
    ledger.add(Stem.parse("bS"), 1)
    assert try_extract(ledger, design("AS5a5b4")) is None


# ---------------------------------------------------------------------------
# Properties over a random stream
# ---------------------------------------------------------------------------

CATALOG = ("AS3a2b4", "BS1b1c1d3", "CL5a5c6", "DL2b1", "ES9e9a2")


def random_arrivals(seed: int, n: int = 400) -> list[Stem]:
    rng = random.Random(seed)
    return [Stem.parse(rng.choice("abcde") + rng.choice("SL")) for _ in range(n)]


def replay(seed: int) -> tuple[BouquetComposer, list[Bouquet], list[Stem]]:
    c = composer_for(*CATALOG)
    arrivals = random_arrivals(seed)
    return c, list(c.compose_stream(arrivals)), arrivals


@pytest.mark.parametrize("seed", [0, 1, 7])
def test_properties_hold_on_random_stream(seed: int) -> None:
    c, bouquets, arrivals = replay(seed)
    designs = {d.code: d for d in c.catalog}
    assert bouquets

    # Exactness and coverage
    for b in bouquets:
        d = designs[b.code]
        assert b.size == d.total
        assert [s.stem for s in b.arrangement] == list(d.stems)
        assert all(s.count >= 1 for s in b.arrangement)
        for taken, req in zip(b.arrangement, d.requirements, strict=True):
            assert taken.count <= req.max_count

    # Conservation
    used: Counter[Stem] = Counter()
    for b in bouquets:
        for s in b.arrangement:
            used[s.stem] += s.count
    assert used == c.committed
    assert c.received == Counter(arrivals)
    for stem, n in c.received.items():
        assert c.ledger.available(stem) + c.committed[stem] == n

    # Determinism
    _, again, _ = replay(seed)
    assert [str(b) for b in again] == [str(b) for b in bouquets]


def test_every_bouquet_includes_the_stem_that_triggered_it() -> None:
    c = composer_for(*CATALOG)
    for stem in random_arrivals(3):
        bouquet = c.compose(stem)
        if bouquet is not None:
            assert stem in [s.stem for s in bouquet.arrangement]


def test_bouquet_size_matches_design_total() -> None:
    c = composer_for("AL9a9b4")
    bouquets = list(c.compose_stream(Stem.parse(t) for t in "aL aL aL bL".split()))
    assert [b.size for b in bouquets] == [4]
