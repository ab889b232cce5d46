"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(qty: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return qty * 2 if qty <= 40 else qty


@dataclass(frozen=True)
class Uppercase:
    """Turn the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends."""


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(inputs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in inputs:
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


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetic."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """Render the report card as one line."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"