"""Worked solutions for the From, FromStr and TryFrom conversion lessons."""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_USIZE_MAX = (1 << 64) - 1


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer strictly: no spaces, no sign other than '+'."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int


def default_person() -> Person:
    """The fallback person: John, aged 30."""
    return Person(name="John", age=30)


def person_from(text: str) -> Person:
    """Build a person from "name,age", falling back to the default on any problem."""
    if not text:
        return default_person()
    parts = text.split(",")
    if len(parts) < 2:
        return default_person()
    name = parts[0]
    if not name:
        return default_person()
    try:
        age = _parse_usize(parts[1])
    except ValueError:
        return default_person()
    return Person(name=name, age=age)


class PersonErrorKind(enum.Enum):
    """Why a person could not be parsed."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Text could not be parsed into a person."""

    def __init__(self, kind: PersonErrorKind, cause: Exception | None = None) -> None:
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if not text:
        raise ParsePersonError(PersonErrorKind.EMPTY)
    parts = text.split(",")
    if len(parts) != 2:
        raise ParsePersonError(PersonErrorKind.BAD_LEN)
    name, age_text = parts
    if not name:
        raise ParsePersonError(PersonErrorKind.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as err:
        raise ParsePersonError(PersonErrorKind.PARSE_INT, err) from err
    return Person(name=name, age=age)


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int


class ColorErrorKind(enum.Enum):
    """Why a colour could not be built."""

    BAD_LEN = "incorrect number of components"
    INT_CONVERSION = "component out of range"


class IntoColorError(ValueError):
    """Values could not be turned into a colour."""

    def __init__(self, kind: ColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def color_from_tuple(values: tuple[int, int, int]) -> Color:
    """Build a colour from three components; each must lie in 0..=255."""
    if len(values) != 3:
        raise TypeError("a colour tuple needs exactly three components")
    if any(not 0 <= value <= 255 for value in values):
        raise IntoColorError(ColorErrorKind.INT_CONVERSION)
    red, green, blue = values
    return Color(red=red, green=green, blue=blue)


def color_from_sequence(values: Sequence[int]) -> Color:
    """Build a colour from a sequence, which must hold exactly three components."""
    if len(values) != 3:
        raise IntoColorError(ColorErrorKind.BAD_LEN)
    return color_from_tuple(tuple(values))