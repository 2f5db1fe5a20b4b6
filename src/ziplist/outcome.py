"""Success-or-failure value returned by fallible operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, cast

from .errors import ZipListError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Either a value or the ``ZipListError`` explaining its absence.

    Callers branch on ``ok`` (or ``error.kind``) to handle a failure in
    place, or call ``unwrap()`` to raise it.
    """

    value: Optional[T] = None
    error: Optional[ZipListError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("Outcome cannot carry both a value and an error")

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ZipListError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)

    def unwrap_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return cast(T, self.value)

    def map(self, fn: Callable[[T], U]) -> "Outcome[U]":
        if self.error is not None:
            return Outcome(error=self.error)
        return Outcome(value=fn(cast(T, self.value)))

    def and_then(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        if self.error is not None:
            return Outcome(error=self.error)
        return fn(cast(T, self.value))


__all__ = ["Outcome"]
