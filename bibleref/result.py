"""
bibleref - Result Values

Every core operation reports failure as a value rather than raising.
A call returns either ``Ok(value)`` or ``Err(message, kind)``; callers
branch on ``is_ok`` or call ``unwrap()`` to convert a failure into the
matching exception from ``bibleref.errors``.

Usage:
    from bibleref import from_string

    result = from_string("Gen 1:1")
    if result.is_ok:
        print(result.value.start_book_name)
    else:
        print(result.error)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Which layer rejected the input."""
    SYNTAX = "syntax"    # tokenizer could not read the text
    SHAPE = "shape"      # tokens do not form a known reference shape
    ORDER = "order"      # end precedes start
    BOUNDS = "bounds"    # chapter or verse outside the book's counts
    CODEC = "codec"      # integer pair does not decode


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result carrying a user-facing message."""

    error: str
    kind: ErrorKind = ErrorKind.SHAPE
    position: Optional[int] = None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def unwrap(self) -> NoReturn:
        from .errors import error_for

        raise error_for(self)

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
