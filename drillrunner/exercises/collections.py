"""Collections: dictionaries as baskets and score tables, lists built and doubled."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

_DIGITS = frozenset(string.digits)
_U8_MAX = 255


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def default_fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and at least five fruits."""
    return {
        "banana": 2,
        "apple": 10,
        "pear": 10,
        "pineapple": 10,
        "kiwi": 10,
    }


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add 300 of every fruit kind missing from the basket, leaving others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 300)


@dataclass
class Team:
    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add one match's goals, keeping both totals within 0..=255."""
        new_scored = self.goals_scored + scored
        new_conceded = self.goals_conceded + conceded
        if new_scored > _U8_MAX or new_conceded > _U8_MAX:
            raise OverflowError(f"goal total for {self.name} does not fit in 0..=255")
        self.goals_scored = new_scored
        self.goals_conceded = new_conceded


def _parse_u8(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or any(c not in _DIGITS for c in digits):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from lines of
    "team_1,team_2,team_1_goals,team_2_goals"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.record(team_1_score, team_2_score)
        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.record(team_2_score, team_1_score)
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(v: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    for i, value in enumerate(v):
        v[i] = value * 2
    return v


def vec_map(v: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [num * 2 for num in v]