"""Immutable list with a distinguished current element.

A ``ZipList`` is split into ``before`` (natural order, nearest element
last), ``current`` and ``after`` (natural order, nearest element first).
Every operation returns a new value; fallible ones return an ``Outcome``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from ziplist.runtime.telemetry import record_event, span

from .errors import (
    AtBoundaryError,
    EmptyInputError,
    EmptyResultError,
    LastElementError,
    NoMatchError,
    ZipListError,
)
from .outcome import Outcome

T = TypeVar("T")
U = TypeVar("U")


def _failure(operation: str, error: ZipListError) -> Outcome[Any]:
    record_event(
        f"ziplist::{error.kind.value}",
        level="debug",
        data={"operation": operation},
    )
    return Outcome.failure(error)


@dataclass(frozen=True, slots=True)
class ZipList(Generic[T]):
    """Non-empty sequence with a cursor on ``current``."""

    before: tuple[T, ...]
    current: T
    after: tuple[T, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "before", tuple(self.before))
        object.__setattr__(self, "after", tuple(self.after))

    # -- construction -----------------------------------------------------

    @classmethod
    def new(cls, before: Iterable[T], current: T, after: Iterable[T]) -> ZipList[T]:
        return cls(tuple(before), current, tuple(after))

    @classmethod
    def singleton(cls, value: T) -> ZipList[T]:
        return cls((), value, ())

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> Outcome[ZipList[T]]:
        """Cursor on the head of ``items``; fails on an empty input."""

        values = tuple(items)
        if not values:
            return _failure("from_sequence", EmptyInputError())
        return Outcome.success(cls((), values[0], values[1:]))

    @classmethod
    def from_sequence_by(
        cls, items: Iterable[T], predicate: Callable[[T], bool]
    ) -> Outcome[ZipList[T]]:
        """Cursor on the first element of ``items`` satisfying ``predicate``."""

        values = tuple(items)
        for position, value in enumerate(values):
            if predicate(value):
                return Outcome.success(
                    cls(values[:position], value, values[position + 1 :])
                )
        return _failure("from_sequence_by", NoMatchError())

    # -- accessors --------------------------------------------------------

    @property
    def index(self) -> int:
        """Zero-based position of ``current`` in the flat sequence."""

        return len(self.before)

    @property
    def length(self) -> int:
        return len(self.before) + 1 + len(self.after)

    @property
    def is_first(self) -> bool:
        return not self.before

    @property
    def is_last(self) -> bool:
        return not self.after

    @property
    def has_previous(self) -> bool:
        return bool(self.before)

    @property
    def has_next(self) -> bool:
        return bool(self.after)

    def peek_previous(self) -> Optional[T]:
        return self.before[-1] if self.before else None

    def peek_next(self) -> Optional[T]:
        return self.after[0] if self.after else None

    def to_tuple(self) -> tuple[T, ...]:
        return self.before + (self.current,) + self.after

    def to_list(self) -> list[T]:
        return list(self.to_tuple())

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        yield from self.before
        yield self.current
        yield from self.after

    # -- navigation -------------------------------------------------------

    def _split_at(self, position: int) -> ZipList[T]:
        values = self.to_tuple()
        return type(self)(values[:position], values[position], values[position + 1 :])

    def try_step_forward(self) -> Outcome[ZipList[T]]:
        if not self.after:
            return _failure("try_step_forward", AtBoundaryError("end"))
        return Outcome.success(
            type(self)(self.before + (self.current,), self.after[0], self.after[1:])
        )

    def try_step_backward(self) -> Outcome[ZipList[T]]:
        if not self.before:
            return _failure("try_step_backward", AtBoundaryError("start"))
        return Outcome.success(
            type(self)(self.before[:-1], self.before[-1], (self.current,) + self.after)
        )

    def step_forward(self) -> ZipList[T]:
        if not self.after:
            return self
        return type(self)(self.before + (self.current,), self.after[0], self.after[1:])

    def step_backward(self) -> ZipList[T]:
        if not self.before:
            return self
        following = (self.current,) + self.after
        return type(self)(self.before[:-1], self.before[-1], following)

    def step_forward_wrap(self) -> ZipList[T]:
        return self.step_forward() if self.after else self.to_first()

    def step_backward_wrap(self) -> ZipList[T]:
        return self.step_backward() if self.before else self.to_last()

    def advance(self, steps: int) -> ZipList[T]:
        """Step forward ``steps`` times, stopping quietly at the end.

        A negative count never runs out, so it walks all the way to the end.
        """

        if steps == 0 or not self.after:
            return self
        moved = len(self.after) if steps < 0 else min(steps, len(self.after))
        return self._split_at(self.index + moved)

    def retreat(self, steps: int) -> ZipList[T]:
        """Step backward ``steps`` times, stopping quietly at the start.

        A negative count walks all the way to the start.
        """

        if steps == 0 or not self.before:
            return self
        moved = len(self.before) if steps < 0 else min(steps, len(self.before))
        return self._split_at(self.index - moved)

    def to_first(self) -> ZipList[T]:
        if not self.before:
            return self
        rest = self.before[1:] + (self.current,) + self.after
        return type(self)((), self.before[0], rest)

    def to_last(self) -> ZipList[T]:
        if not self.after:
            return self
        rest = self.before + (self.current,) + self.after[:-1]
        return type(self)(rest, self.after[-1], ())

    def jump_to(self, position: int) -> ZipList[T]:
        """Move to ``position`` in the flat sequence, clamped to its bounds."""

        with span(
            "ziplist::jump_to",
            component="ziplist",
            metadata={"position": position, "length": self.length},
        ) as handle:
            target = max(0, min(position, self.length - 1))
            if target != position:
                handle.add_metadata("clamped_to", target)
            if target == self.index:
                return self
            return self._split_at(target)

    def seek(self, predicate: Callable[[T], bool]) -> Outcome[ZipList[T]]:
        """Move to the first element of the flat sequence matching ``predicate``."""

        return type(self).from_sequence_by(self.to_tuple(), predicate)

    # -- boundary mutation ------------------------------------------------

    def append_after(self, items: Iterable[T]) -> ZipList[T]:
        return type(self)(self.before, self.current, self.after + tuple(items))

    def prepend_after(self, items: Iterable[T]) -> ZipList[T]:
        return type(self)(self.before, self.current, tuple(items) + self.after)

    def append_before(self, items: Iterable[T]) -> ZipList[T]:
        return type(self)(self.before + tuple(items), self.current, self.after)

    def prepend_before(self, items: Iterable[T]) -> ZipList[T]:
        return type(self)(tuple(items) + self.before, self.current, self.after)

    # -- cursor mutation --------------------------------------------------

    def replace(self, value: T) -> ZipList[T]:
        return type(self)(self.before, value, self.after)

    def update(self, fn: Callable[[T], T]) -> ZipList[T]:
        return type(self)(self.before, fn(self.current), self.after)

    def try_remove(self) -> Outcome[ZipList[T]]:
        """Drop ``current``, promoting the next element, else the previous one."""

        if self.after:
            promoted = type(self)(self.before, self.after[0], self.after[1:])
            return Outcome.success(promoted)
        if self.before:
            return Outcome.success(type(self)(self.before[:-1], self.before[-1], ()))
        return _failure("try_remove", LastElementError())

    def remove(self) -> ZipList[T]:
        return self.try_remove().unwrap_or(self)

    def remove_retreating(self) -> ZipList[T]:
        """``try_remove`` followed by one ``step_backward``."""

        return self.try_remove().map(ZipList.step_backward).unwrap_or(self)

    # -- transformation ---------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> ZipList[U]:
        with span(
            "ziplist::map", component="ziplist", metadata={"length": self.length}
        ):
            return type(self)(
                tuple(fn(value) for value in self.before),
                fn(self.current),
                tuple(fn(value) for value in self.after),
            )

    def cursor_map(self, fn: Callable[[T, bool], U]) -> ZipList[U]:
        """Map with a flag that is ``True`` only for ``current``."""

        with span(
            "ziplist::cursor_map", component="ziplist", metadata={"length": self.length}
        ):
            return type(self)(
                tuple(fn(value, False) for value in self.before),
                fn(self.current, True),
                tuple(fn(value, False) for value in self.after),
            )

    def index_map(self, fn: Callable[[T, int], U]) -> ZipList[U]:
        """Map with each element's position in the flat sequence."""

        with span(
            "ziplist::index_map", component="ziplist", metadata={"length": self.length}
        ):
            offset = self.index + 1
            return type(self)(
                tuple(
                    fn(value, position) for position, value in enumerate(self.before)
                ),
                fn(self.current, self.index),
                tuple(
                    fn(value, offset + position)
                    for position, value in enumerate(self.after)
                ),
            )

    def filter(self, predicate: Callable[[T], bool]) -> Outcome[ZipList[T]]:
        """Keep elements satisfying ``predicate``.

        A rejected ``current`` is replaced by the first surviving element
        after it, else the nearest surviving element before it.
        """

        with span(
            "ziplist::filter", component="ziplist", metadata={"length": self.length}
        ) as handle:
            before = tuple(value for value in self.before if predicate(value))
            keep_current = predicate(self.current)
            after = tuple(value for value in self.after if predicate(value))

            if keep_current:
                return Outcome.success(type(self)(before, self.current, after))
            if after:
                handle.add_metadata("relocated", "after")
                return Outcome.success(type(self)(before, after[0], after[1:]))
            if before:
                handle.add_metadata("relocated", "before")
                return Outcome.success(type(self)(before[:-1], before[-1], ()))
            return _failure("filter", EmptyResultError())


__all__ = ["ZipList"]
