"""Optional values: how much ice cream is left."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Five before 22h, none left from 22h to 24h, None for later hours."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None