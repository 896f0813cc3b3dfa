"""Errors raised while reading design and stem records.

Every error names the rule it violates so the CLI can report which record
failed and why:

- ``stem_grammar``: a stem record is not exactly two characters
- ``species_range``: species is not a lowercase letter a-z
- ``size_range``: size is not ``S`` or ``L``
- ``design_grammar``: a design record does not match ``<Name><Size><reqs><total>``
- ``requirement_clamp``: a requirement's cap clamps below 1
"""

from __future__ import annotations


class RecordError(ValueError):
    """Base class for rejected input records."""

    def __init__(
        self,
        rule: str,
        message: str,
        record: str | None = None,
        line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.rule = rule
        self.message = message
        self.record = record
        self.line = line

    def at(self, record: str, line: int | None) -> RecordError:
        """Attach the offending record text and its line number."""
        self.record = record
        self.line = line
        return self

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        what = f"record {self.record!r}: " if self.record is not None else ""
        return f"{where}{what}[{self.rule}] {self.message}"


class FormatError(RecordError):
    """A record or one of its characters is outside the accepted grammar."""


class RangeError(RecordError):
    """A design is structurally unsatisfiable at its declared total."""
