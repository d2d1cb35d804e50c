"""Error handling: raising, propagating and wrapping errors."""

from __future__ import annotations

import string
from dataclasses import dataclass

_DIGITS = frozenset(string.digits)


def _bounds(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: an optional sign followed by ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or any(c not in _DIGITS for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = _bounds(bits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of buying the typed-in number of items."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    low, high = _bounds(32)
    if not low <= cost <= high:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(item_quantity: str, tokens: int) -> str:
    """Try to buy items with the given tokens and describe the outcome."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    tokens -= cost
    return f"You now have {tokens} tokens."


class CreationError(ValueError):
    """A value cannot become a PositiveNonzeroInteger."""

    description = "invalid number"

    def __init__(self) -> None:
        super().__init__(self.description)


class NegativeNumberError(CreationError):
    description = "number is negative"


class ZeroNumberError(CreationError):
    description = "number is zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeNumberError()
        if self.value == 0:
            raise ZeroNumberError()

    def __repr__(self) -> str:
        return f"PositiveNonzeroInteger({self.value})"


def describe(user_input: str) -> str:
    """Parse the input into a PositiveNonzeroInteger and describe it."""
    number = PositiveNonzeroInteger(_parse_int(user_input, 64))
    return f"output={number!r}"


class ParsePosNonzeroError(ValueError):
    """Wraps either a parse error or a CreationError in `error`."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def is_creation(self) -> bool:
        return isinstance(self.error, CreationError)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    try:
        x = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(x)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err