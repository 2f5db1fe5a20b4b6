"""Failure kinds reported by fallible ziplist operations."""

from __future__ import annotations

from enum import Enum
from typing import Literal

Boundary = Literal["start", "end"]


class ErrorKind(str, Enum):
    """Leaf conditions a fallible operation can report."""

    EMPTY_INPUT = "empty_input"
    NO_MATCH = "no_match"
    AT_BOUNDARY = "at_boundary"
    LAST_ELEMENT = "last_element"
    EMPTY_RESULT = "empty_result"


class ZipListError(RuntimeError):
    """Base class for every failure carried by an ``Outcome``."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZipListError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class EmptyInputError(ZipListError):
    """Raised when a zip list is built from an empty sequence."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(
        self, message: str = "cannot build a zip list from an empty sequence"
    ) -> None:
        super().__init__(message)


class NoMatchError(ZipListError):
    """Raised when no element satisfies the predicate."""

    kind = ErrorKind.NO_MATCH

    def __init__(self, message: str = "no element satisfies the predicate") -> None:
        super().__init__(message)


class AtBoundaryError(ZipListError):
    """Raised when a single step has no element to move onto."""

    kind = ErrorKind.AT_BOUNDARY

    def __init__(self, boundary: Boundary) -> None:
        super().__init__(f"cursor is already at the {boundary}")
        self.boundary = boundary


class LastElementError(ZipListError):
    """Raised when removing the only remaining element."""

    kind = ErrorKind.LAST_ELEMENT

    def __init__(self, message: str = "cannot remove the only element") -> None:
        super().__init__(message)


class EmptyResultError(ZipListError):
    """Raised when filtering discards every element."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, message: str = "filter removed every element") -> None:
        super().__init__(message)


__all__ = [
    "Boundary",
    "ErrorKind",
    "ZipListError",
    "EmptyInputError",
    "NoMatchError",
    "AtBoundaryError",
    "LastElementError",
    "EmptyResultError",
]
