"""
Service layer: league scheduling and league round execution.
No persistence; callers store what these return.
"""
from .scheduling import (
    generate_league_matches,
    round_robin_rounds,
    InvalidLeagueSize,
    LEAGUE_SIZE,
    MATCHES_PER_LEAGUE,
)
from .league_service import simulate_complete_match, simulate_league

__all__ = [
    "generate_league_matches",
    "round_robin_rounds",
    "InvalidLeagueSize",
    "LEAGUE_SIZE",
    "MATCHES_PER_LEAGUE",
    "simulate_complete_match",
    "simulate_league",
]
