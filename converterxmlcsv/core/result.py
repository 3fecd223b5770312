"""Result type for explicit error handling.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising for
expected failures (unsupported file, malformed XML, unwritable output).
The CLI layer decides how each error is presented.

Usage:
    match parse_document(path, kind):
        case Ok(document):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[E]
