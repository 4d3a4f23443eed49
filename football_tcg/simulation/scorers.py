"""
Goal scorer selection. The simulation loop only talks to the ScorerSelector
protocol, so the weighting policy can be swapped per match.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from football_tcg.models import Player

from .rng import SeededRNG


class ScorerSelector(Protocol):
    def select(self, players: Sequence[Player], rng: SeededRNG) -> Player | None:
        ...


class UniformScorer:
    """Every fielded player is equally likely to score."""

    def select(self, players: Sequence[Player], rng: SeededRNG) -> Player | None:
        if not players:
            return None
        return rng.choice(players)


class PointsWeightedScorer:
    """Scoring probability proportional to the player's points rating."""

    def select(self, players: Sequence[Player], rng: SeededRNG) -> Player | None:
        if not players:
            return None
        weights = [max(0, p.points) for p in players]
        if sum(weights) <= 0:
            return rng.choice(players)
        return rng.choices(players, weights=weights, k=1)[0]


DEFAULT_SCORER = PointsWeightedScorer()
