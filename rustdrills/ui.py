"""Coloured status lines shown to the learner."""

import os

from termcolor import colored


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, emoji: str, message: str, color: str) -> str:
    prefix = symbol if no_emoji() else emoji
    line = f"{colored(prefix, color)} {colored(message, color)}"
    print(line)
    return line


def warn(message: str) -> str:
    """Print a red warning line and return it."""
    return _emit("!", "⚠️ ", message, "red")


def success(message: str) -> str:
    """Print a green success line and return it."""
    return _emit("✓", "✅", message, "green")