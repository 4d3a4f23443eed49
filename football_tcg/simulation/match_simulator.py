"""
Match Simulator: realizes one match as a fixed number of independent scoring
trials per team. Successful trials become goal events with a minute and a
scorer; misses are optionally kept as non-scoring chance events.
"""
from __future__ import annotations

import logging

from football_tcg.models import Player, Team

from .probability_engine import ProbabilityEngine
from .rng import SeededRNG, random_seed
from .schemas import EventType, MatchEvent, MatchSimulation, WinChances
from .scorers import DEFAULT_SCORER, ScorerSelector
from .strength import calculate_team_strength

logger = logging.getLogger(__name__)

TOTAL_CHANCES_PER_TEAM = 100
MATCH_MINUTES = 90


def realized_percentage(goals: int, trials: int) -> float:
    if trials <= 0:
        return 0.0
    return goals / trials * 100


class MatchSimulator:
    """
    Runs the trial loop for both teams. Holds the RNG, so one instance
    simulates one match (or a sequence of matches on one thread).
    """

    def __init__(
        self,
        rng: SeededRNG | None = None,
        prob_engine: ProbabilityEngine | None = None,
        scorer: ScorerSelector | None = None,
        chances_per_team: int = TOTAL_CHANCES_PER_TEAM,
        record_misses: bool = False,
    ) -> None:
        if chances_per_team <= 0:
            raise ValueError(f"chances_per_team must be positive (got {chances_per_team})")
        self.rng = rng or SeededRNG(random_seed())
        self.prob_engine = prob_engine or ProbabilityEngine()
        self.scorer = scorer or DEFAULT_SCORER
        self.chances_per_team = chances_per_team
        self.record_misses = record_misses

    def _run_trials(self, team: int, chance: float, players: list[Player]) -> tuple[list[MatchEvent], int]:
        """Returns (events in trial order, goal count)."""
        events: list[MatchEvent] = []
        goals = 0
        for _ in range(self.chances_per_team):
            scored = self.rng.bernoulli(chance)
            if scored:
                goals += 1
                minute = self.rng.randint(1, MATCH_MINUTES)
                scorer = self.scorer.select(players, self.rng)
                events.append(
                    MatchEvent(
                        minute=minute,
                        type=EventType.GOAL,
                        team=team,
                        player_id=scorer.id if scorer is not None else None,
                    )
                )
            elif self.record_misses:
                events.append(
                    MatchEvent(minute=self.rng.randint(1, MATCH_MINUTES), type=EventType.CHANCE, team=team)
                )
        return events, goals

    def run(self, home: Team, away: Team, chances: WinChances | None = None) -> MatchSimulation:
        """
        Simulate home (team 1) vs away (team 2). Chances are computed from
        current rosters unless supplied.
        """
        if chances is None:
            chances = self.prob_engine.compute(
                calculate_team_strength(home), calculate_team_strength(away)
            )
        home_events, home_goals = self._run_trials(1, chances.chance_a, home.fielded_players)
        away_events, away_goals = self._run_trials(2, chances.chance_b, away.fielded_players)
        # Stable sort: same-minute events keep insertion order (home trials first)
        events = sorted(home_events + away_events, key=lambda e: e.minute)
        logger.debug(
            "Simulated %s vs %s: %d-%d (chances %.4f / %.4f, seed=%s)",
            home.id, away.id, home_goals, away_goals,
            chances.chance_a, chances.chance_b, self.rng.seed,
        )
        return MatchSimulation(
            events=events,
            team1_chances=self.chances_per_team,
            team2_chances=self.chances_per_team,
            team1_percentage=realized_percentage(home_goals, self.chances_per_team),
            team2_percentage=realized_percentage(away_goals, self.chances_per_team),
            team1_win_chance=chances.chance_a,
            team2_win_chance=chances.chance_b,
            seed=self.rng.seed,
        )


def simulate_match(
    team_a: Team,
    team_b: Team,
    rng: SeededRNG | None = None,
    scorer: ScorerSelector | None = None,
    record_misses: bool = False,
) -> MatchSimulation:
    """Simulate one match with a fresh simulator; pass a seeded rng for reproducibility."""
    return MatchSimulator(rng=rng, scorer=scorer, record_misses=record_misses).run(team_a, team_b)
