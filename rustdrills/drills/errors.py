"""Error handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32 = 32
_I64 = 64


def _parse_signed(text: str, bits: int) -> int:
    """Parse a signed integer strictly, with the messages of a standard parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


class EmptyNameError(ValueError):
    """A name tag was requested for an empty name."""


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise EmptyNameError for an empty name."""
    if not name:
        raise EmptyNameError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a processing fee of one.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_signed(item_quantity, _I32)
    cost = quantity * cost_per_item + processing_fee
    if not -(2 ** (_I32 - 1)) <= cost <= 2 ** (_I32 - 1) - 1:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot become a positive nonzero integer."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


class ParsePosNonzeroError(ValueError):
    """Parsing failed; the underlying error is kept in ``error``."""

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap value; raise NegativeError or ZeroError when it is not positive."""
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        return cls(value)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and wrap it; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_signed(text, _I64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error