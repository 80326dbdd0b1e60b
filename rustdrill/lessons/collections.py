"""Worked solutions for the vector, ownership and hash map lessons."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace from the string."""


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string ``times`` times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and collect the results in order."""
    output: list[str] = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


def vec_loop(values: Iterable[int]) -> list[int]:
    """Every value doubled."""
    return [value * 2 for value in values]


def vec_map(values: Iterable[int]) -> list[int]:
    """Every value doubled, leaving the input untouched."""
    return list(map(lambda value: value * 2, values))


def fill_vec(values: Iterable[int]) -> list[int]:
    """A new list holding the values followed by 88."""
    return [*values, 88]


class Fruit(enum.Enum):
    """Kinds of fruit that can go into the basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add two of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def build_scores_table(results: str) -> dict[str, Team]:
    """Tally goals from lines of the form "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        first, second = fields[0], fields[1]
        first_goals, second_goals = int(fields[2]), int(fields[3])
        for name, scored, conceded in (
            (first, first_goals, second_goals),
            (second, second_goals, first_goals),
        ):
            team = scores.setdefault(name, Team())
            team.goals_scored += scored
            team.goals_conceded += conceded
    return scores