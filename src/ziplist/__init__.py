"""Immutable cursor-bearing list (list zipper)."""

from .errors import (
    AtBoundaryError,
    EmptyInputError,
    EmptyResultError,
    ErrorKind,
    LastElementError,
    NoMatchError,
    ZipListError,
)
from .outcome import Outcome
from .ziplist import ZipList

__all__ = [
    "ZipList",
    "Outcome",
    "ErrorKind",
    "ZipListError",
    "EmptyInputError",
    "NoMatchError",
    "AtBoundaryError",
    "LastElementError",
    "EmptyResultError",
    "runtime",
]

__version__ = "0.1.0"
