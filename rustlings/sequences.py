"""List and string helpers."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(v: list[int]) -> list[int]:
    """Double every element of ``v`` in place and return it."""
    v[:] = [element * 2 for element in v]
    return v


def vec_map(v: Iterable[int]) -> list[int]:
    """A new list with every element doubled."""
    return [element * 2 for element in v]


def fill_vec(vec: Iterable[int] = (22, 44, 66)) -> list[int]:
    """A copy of ``vec`` with 88 appended; the input is left unchanged."""
    return [*vec, 88]


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")