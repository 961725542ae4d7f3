"""Cons lists and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Nil()))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every element non-negative, copying only when needed.

    A mutable list is treated as owned and updated in place; any other
    sequence is borrowed and copied into a new list on the first change.
    Unchanged borrowed input is returned as is.
    """
    result = values
    for index, value in enumerate(values):
        if value < 0:
            if not isinstance(result, MutableSequence):
                result = list(result)
            result[index] = -value
    return result