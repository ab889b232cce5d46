"""Fruit baskets and a football scores table built on dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Fruit(Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def new_fruit_basket() -> dict[str, int]:
    """A basket of several kinds of fruit, counted by name."""
    return {
        "banana": 2,
        "orange": 3,
        "apple": 3,
        "haidilao": 3,
        "peer": 3,
    }


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind that is not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Total goals per team from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _goals(fields[2]), _goals(fields[3])

        first = scores.setdefault(team_1, Team())
        first.goals_scored += goals_1
        first.goals_conceded += goals_2

        second = scores.setdefault(team_2, Team())
        second.goals_scored += goals_2
        second.goals_conceded += goals_1
    return scores