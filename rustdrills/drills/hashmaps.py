"""Dictionary drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 255


class Fruit(enum.Enum):
    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 4, "orange": 4}


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit, leaving existing kinds untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 100)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    name: str
    goals_scored: int
    goals_conceded: int


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _add_goals(total: int, goals: int) -> int:
    result = total + goals
    if result > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return result


def _record(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.get(name)
    if team is None:
        scores[name] = Team(name, scored, conceded)
    else:
        team.goals_scored = _add_goals(team.goals_scored, scored)
        team.goals_conceded = _add_goals(team.goals_conceded, conceded)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1 = _parse_goals(fields[2])
        score_2 = _parse_goals(fields[3])
        _record(scores, team_1, score_1, score_2)
        _record(scores, team_2, score_2, score_1)
    return scores