"""Design and stem records, and the two-section input they arrive in.

Input is two newline-delimited sections, each ended by a blank line or by
end of input:

    AS2a2            <- designs: <Name><Size>(<count><species>)+<total>
    BL1a1b2
                     <- blank line ends the design section
    aS               <- stems: <species><size>, one per arrival
    aS

Reading is two explicit phases. ``load_catalog`` consumes the whole design
section up front; ``iter_stems`` then parses stems lazily so each one can be
composed before the next line is read. Both stop at the first malformed
record.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .catalog import DesignCatalog
from .designs import Design, RequirementOrder
from .errors import FormatError, RangeError
from .result import Err, Ok, RecordResult, from_record
from .stems import Size, Stem

_DESIGN_RE = re.compile(r"([A-Z])([SL])((?:[0-9]+[a-z])+)([0-9]+)")
_REQUIREMENT_RE = re.compile(r"([0-9]+)([a-z])")


def read_section(lines: Iterator[tuple[int, str]]) -> Iterator[tuple[int, str]]:
    """Yield numbered, stripped lines up to the first blank line.

    ``lines`` is a shared iterator of (line number, raw text), normally
    ``enumerate(source, start=1)``. It is consumed in place, so once this
    generator is exhausted the iterator sits at the start of the next
    section.
    """
    for number, raw in lines:
        text = raw.strip()
        if not text:
            return
        yield number, text


def _count(digits: str) -> int:
    try:
        return int(digits)
    except ValueError:
        raise RangeError(
            "requirement_clamp", f"Count of {len(digits)} digits is too large"
        ) from None


def _build_design(text: str, order: RequirementOrder) -> Design:
    m = _DESIGN_RE.fullmatch(text)
    if m is None:
        raise FormatError(
            "design_grammar",
            "Not a valid design, expected <Name><Size>(<count><species>)+<total>",
        )
    name, size, requirements, total = m.groups()
    declared = [
        (species, _count(count)) for count, species in _REQUIREMENT_RE.findall(requirements)
    ]
    return Design.build(name, Size(size), declared, _count(total), order=order)


def parse_design(
    text: str,
    line: int | None = None,
    order: RequirementOrder = RequirementOrder.RECORD,
) -> RecordResult[Design]:
    return from_record(lambda: _build_design(text, order), text, line)


def parse_stem(text: str, line: int | None = None) -> RecordResult[Stem]:
    return from_record(lambda: Stem.parse(text), text, line)


def load_catalog(
    section: Iterable[tuple[int, str]],
    order: RequirementOrder = RequirementOrder.RECORD,
) -> RecordResult[DesignCatalog]:
    """Build the catalog from a design section, failing on the first bad record."""
    catalog = DesignCatalog()
    for line, text in section:
        match parse_design(text, line, order=order):
            case Ok(design):
                catalog.register(design)
            case Err(e):
                return Err(e)
    return Ok(catalog)


def iter_stems(section: Iterable[tuple[int, str]]) -> Iterator[RecordResult[Stem]]:
    """Parse a stem section lazily. Stops after yielding the first error."""
    for line, text in section:
        result = parse_stem(text, line)
        yield result
        if isinstance(result, Err):
            return
