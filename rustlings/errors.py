"""Optional values and error handling: ice cream, name tags, token costs, positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed integer strictly: an optional sign followed by ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a 24-hour time, or None for an invalid hour."""
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0


def generate_nametag_text(name: str) -> str:
    """The text of a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a processing fee of one; raise ValueError on bad input."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = qty * cost_per_item + processing_fee
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationError(ValueError):
    """Raised when a value cannot become a positive nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash((CreationError, self.description))


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed into a positive nonzero integer.

    ``cause`` is the CreationError or the integer parsing error behind it.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def is_creation(self) -> bool:
        """Whether the text parsed but the number was not positive."""
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_int(s, _I64_MIN, _I64_MAX)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err