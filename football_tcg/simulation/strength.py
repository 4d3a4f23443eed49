"""
Team strength: raw player ratings plus lenient chemistry bonus.
The strict color rule gates team validity elsewhere; a live match still
credits partial chemistry.
"""
from __future__ import annotations

from football_tcg.chemistry import chemistry_points
from football_tcg.models import Team

from .schemas import TeamStrength


def calculate_team_strength(team: Team) -> TeamStrength:
    players = team.fielded_players
    player_points = sum(p.points for p in players)
    chem = chemistry_points(players)
    return TeamStrength(
        team_id=team.id,
        player_points=player_points,
        chemistry_points=chem,
        total_strength=player_points + chem,
        win_chance=0.0,
    )
