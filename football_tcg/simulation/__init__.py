"""
Match Simulation Engine: team strength, win chances, seeded trial-based
match simulation and league points.
"""
from .schemas import (
    EventType,
    TeamStrength,
    WinChances,
    MatchEvent,
    MatchSimulation,
    MatchResult,
    CompleteMatch,
    Pairing,
    LeagueMatchRecord,
)
from .rng import SeededRNG, random_seed
from .strength import calculate_team_strength
from .probability_engine import (
    ProbabilityEngine,
    calculate_win_chances,
    BASE_CHANCE_PERCENTAGE,
    MODIFIER_ABOVE_AVERAGE,
    MODIFIER_BELOW_AVERAGE,
    MIN_CHANCE,
    MAX_CHANCE,
)
from .scorers import ScorerSelector, PointsWeightedScorer, UniformScorer, DEFAULT_SCORER
from .match_simulator import MatchSimulator, simulate_match, TOTAL_CHANCES_PER_TEAM, MATCH_MINUTES
from .result import calculate_match_result, league_points, LEAGUE_POINTS, WIN_POINTS, DRAW_POINTS, LOSS_POINTS

__all__ = [
    "EventType",
    "TeamStrength",
    "WinChances",
    "MatchEvent",
    "MatchSimulation",
    "MatchResult",
    "CompleteMatch",
    "Pairing",
    "LeagueMatchRecord",
    "SeededRNG",
    "random_seed",
    "calculate_team_strength",
    "ProbabilityEngine",
    "calculate_win_chances",
    "BASE_CHANCE_PERCENTAGE",
    "MODIFIER_ABOVE_AVERAGE",
    "MODIFIER_BELOW_AVERAGE",
    "MIN_CHANCE",
    "MAX_CHANCE",
    "ScorerSelector",
    "PointsWeightedScorer",
    "UniformScorer",
    "DEFAULT_SCORER",
    "MatchSimulator",
    "simulate_match",
    "TOTAL_CHANCES_PER_TEAM",
    "MATCH_MINUTES",
    "calculate_match_result",
    "league_points",
    "LEAGUE_POINTS",
    "WIN_POINTS",
    "DRAW_POINTS",
    "LOSS_POINTS",
]
