"""
Deterministic league schedule for a 4-team round.

Every unordered pair of teams meets exactly once (6 matches). Match numbers
follow input order lexicographically: (1,2), (1,3), (1,4), (2,3), (2,4), (3,4).
Each pairing also gets a round number from the circle method, so no team
plays twice in the same round. Same team list ordering yields the same
schedule.
"""
from __future__ import annotations

import logging
from itertools import combinations
from typing import Sequence

from football_tcg.models import Team
from football_tcg.simulation.schemas import Pairing

logger = logging.getLogger(__name__)

LEAGUE_SIZE = 4
MATCHES_PER_LEAGUE = LEAGUE_SIZE * (LEAGUE_SIZE - 1) // 2


class InvalidLeagueSize(ValueError):
    """League was given a team count other than LEAGUE_SIZE."""

    def __init__(self, actual: int, required: int = LEAGUE_SIZE) -> None:
        super().__init__(f"League must have exactly {required} teams (got {actual})")
        self.required = required
        self.actual = actual


def round_robin_rounds(n: int) -> dict[frozenset[int], int]:
    """
    Circle method over team indexes 0..n-1 (n even): fix slot 0, rotate the
    rest each round. Returns {pair of indexes: round number (1-based)}.
    """
    if n % 2 == 1:
        raise ValueError(f"Circle method needs an even team count (got {n})")
    rounds: dict[frozenset[int], int] = {}
    order = list(range(n))
    for rnd in range(n - 1):
        for i in range(n // 2):
            rounds[frozenset((order[i], order[n - 1 - i]))] = rnd + 1
        # Rotate: keep 0, then order[n-1], order[1], ..., order[n-2]
        order = [order[0]] + [order[n - 1]] + order[1 : n - 1]
    return rounds


def generate_league_matches(teams: Sequence[Team]) -> list[Pairing]:
    """Six pairings, match numbers 1..6 in input order; raises InvalidLeagueSize."""
    if len(teams) != LEAGUE_SIZE:
        logger.info("Rejected league schedule: %d teams supplied", len(teams))
        raise InvalidLeagueSize(len(teams))
    rounds = round_robin_rounds(LEAGUE_SIZE)
    return [
        Pairing(
            match_number=number,
            round_number=rounds[frozenset((i, j))],
            home_team=teams[i],
            away_team=teams[j],
        )
        for number, (i, j) in enumerate(combinations(range(LEAGUE_SIZE), 2), start=1)
    ]
