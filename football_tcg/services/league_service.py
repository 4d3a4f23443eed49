"""
League round execution: schedule the 4-team round, then run every pairing
through strength -> win chances -> simulation -> result.
Pure: no persistence; callers store the returned records.
"""
from __future__ import annotations

import logging
from typing import Sequence

from football_tcg.models import Team
from football_tcg.services.scheduling import generate_league_matches
from football_tcg.simulation.match_simulator import MatchSimulator
from football_tcg.simulation.probability_engine import ProbabilityEngine
from football_tcg.simulation.result import calculate_match_result
from football_tcg.simulation.rng import SeededRNG, random_seed
from football_tcg.simulation.schemas import CompleteMatch, LeagueMatchRecord
from football_tcg.simulation.scorers import ScorerSelector
from football_tcg.simulation.strength import calculate_team_strength

logger = logging.getLogger(__name__)


def simulate_complete_match(
    home: Team,
    away: Team,
    rng: SeededRNG | None = None,
    prob_engine: ProbabilityEngine | None = None,
    scorer: ScorerSelector | None = None,
    record_misses: bool = False,
) -> CompleteMatch:
    """
    Simulate one match and derive its result. Returned strengths carry the
    win chances used for the simulation.
    """
    engine = prob_engine or ProbabilityEngine()
    home_strength = calculate_team_strength(home)
    away_strength = calculate_team_strength(away)
    chances = engine.compute(home_strength, away_strength)

    simulator = MatchSimulator(
        rng=rng, prob_engine=engine, scorer=scorer, record_misses=record_misses
    )
    simulation = simulator.run(home, away, chances=chances)
    result = calculate_match_result(home, away, simulation)
    return CompleteMatch(
        simulation=simulation,
        result=result,
        home_strength=home_strength.with_win_chance(chances.chance_a),
        away_strength=away_strength.with_win_chance(chances.chance_b),
    )


def simulate_league(
    teams: Sequence[Team],
    seed: int | None = None,
    prob_engine: ProbabilityEngine | None = None,
    scorer: ScorerSelector | None = None,
    record_misses: bool = False,
) -> list[LeagueMatchRecord]:
    """
    Run all six league matches in match-number order. Match n uses its own
    SeededRNG(seed_base + n), so the round is reproducible from seed_base and
    matches can be replayed individually.
    """
    pairings = generate_league_matches(teams)
    seed_base = seed if seed is not None else random_seed()
    logger.info(
        "Simulating league round for teams %s (seed_base=%d)",
        [t.id for t in teams], seed_base,
    )

    records: list[LeagueMatchRecord] = []
    for pairing in pairings:
        match = simulate_complete_match(
            pairing.home_team,
            pairing.away_team,
            rng=SeededRNG(seed_base + pairing.match_number),
            prob_engine=prob_engine,
            scorer=scorer,
            record_misses=record_misses,
        )
        logger.debug(
            "Match %d (round %d): %s %d-%d %s",
            pairing.match_number, pairing.round_number,
            pairing.home_team.id, match.result.home_score,
            match.result.away_score, pairing.away_team.id,
        )
        records.append(
            LeagueMatchRecord(
                match_number=pairing.match_number,
                round_number=pairing.round_number,
                home_team=pairing.home_team,
                away_team=pairing.away_team,
                simulation=match.simulation,
                result=match.result,
                home_strength=match.home_strength,
                away_strength=match.away_strength,
            )
        )
    return records
