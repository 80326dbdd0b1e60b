"""Worked solutions for the string, iterator and as-ref lessons."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """True for "green", "blue" or "red"."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def capitalize_first(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them without a separator."""
    return "".join(capitalize_words_vector(words))


def byte_counter(text: str) -> int:
    """The number of UTF-8 bytes in ``text``."""
    return len(text.encode("utf-8"))


def char_counter(text: str) -> int:
    """The number of characters in ``text``."""
    return len(text)


def num_sq(value: int) -> int:
    """The square of ``value``."""
    return value * value