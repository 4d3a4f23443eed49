"""
League points for a simulated match.
"""
from __future__ import annotations

from football_tcg.models import Team

from .schemas import MatchResult, MatchSimulation

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

LEAGUE_POINTS = {"WIN": WIN_POINTS, "DRAW": DRAW_POINTS, "LOSS": LOSS_POINTS}


def league_points(home_score: int, away_score: int) -> tuple[int, int]:
    """(home_points, away_points) for a score line."""
    if home_score > away_score:
        return WIN_POINTS, LOSS_POINTS
    if away_score > home_score:
        return LOSS_POINTS, WIN_POINTS
    return DRAW_POINTS, DRAW_POINTS


def calculate_match_result(team_a: Team, team_b: Team, simulation: MatchSimulation) -> MatchResult:
    home_score = len(simulation.goals(1))
    away_score = len(simulation.goals(2))
    home_points, away_points = league_points(home_score, away_score)
    return MatchResult(
        home_team=team_a,
        away_team=team_b,
        home_score=home_score,
        away_score=away_score,
        home_points=home_points,
        away_points=away_points,
    )
