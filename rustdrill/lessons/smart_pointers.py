"""Worked solutions for the cons list and clone-on-write lessons."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single zero."""
    return Cons(0, Nil())


class Cow:
    """A sequence that is borrowed until it first needs changing, then copied."""

    def __init__(self, data: Sequence[int], *, owned: bool = False) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap data that must not be changed in place."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[int]) -> Cow:
        """Wrap a list that may be changed in place."""
        return cls(data, owned=True)

    @property
    def is_owned(self) -> bool:
        """True once the data is held as a private list."""
        return self._owned

    @property
    def is_borrowed(self) -> bool:
        """True while the data is still the caller's."""
        return not self._owned

    def to_mut(self) -> list[int]:
        """A mutable list, copying borrowed data the first time."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying only if something changes."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow