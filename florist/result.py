"""Result type for record parsing and configuration loading.

``Ok`` carries the parsed value, ``Err`` carries the exception that explains
why the input was rejected. Callers ``match`` on the two cases.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from .errors import RecordError

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]

RecordResult: TypeAlias = Result[T, RecordError]


def from_record(build: Callable[[], T], text: str, line: int | None) -> RecordResult[T]:
    """Run ``build`` and wrap its value, or the RecordError it raised for ``text``."""
    try:
        return Ok(build())
    except RecordError as e:
        return Err(e.at(text, line))
