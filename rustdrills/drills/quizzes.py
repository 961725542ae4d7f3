"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one each when more than 40 are bought."""
    apple_price = 1 if quantity > 40 else 2
    return apple_price * quantity


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" a number of times."""

    times: int


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command {command!r}")


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A report card whose grade is numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def report(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )