"""Hash maps: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every kind of fruit that is missing, leaving present ones untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def _record(self, scored: int, conceded: int) -> None:
        new_scored = self.goals_scored + scored
        new_conceded = self.goals_conceded + conceded
        if new_scored > _U8_MAX or new_conceded > _U8_MAX:
            raise ValueError(f"goal tally of {self.name} overflows")
        self.goals_scored = new_scored
        self.goals_conceded = new_conceded


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded per team.

    Each line has the form team_1,team_2,team_1_goals,team_2_goals.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])
        for name, scored, conceded in (
            (team_1, goals_1, goals_2),
            (team_2, goals_2, goals_1),
        ):
            scores.setdefault(name, Team(name))._record(scored, conceded)
    return scores