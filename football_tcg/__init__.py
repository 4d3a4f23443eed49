"""
Football trading-card game: team chemistry and match resolution engine.
Converts rosters into strengths, strengths into scoring chances, and runs
seeded trial-based simulations for 4-team league rounds.
"""
from .models import Player, PlayerColor, PlayerPosition, Team, TeamSlot
from .chemistry import (
    ChemistryBonus,
    ChemistryRuleViolation,
    ChemistryValidation,
    calculate_team_chemistry,
    get_chemistry_breakdown,
    validate_team_chemistry,
)
from .positions import validate_team_positions
from .simulation import (
    SeededRNG,
    calculate_team_strength,
    calculate_win_chances,
    simulate_match,
    calculate_match_result,
)
from .services import (
    InvalidLeagueSize,
    generate_league_matches,
    simulate_complete_match,
    simulate_league,
)

__all__ = [
    "Player",
    "PlayerColor",
    "PlayerPosition",
    "Team",
    "TeamSlot",
    "ChemistryBonus",
    "ChemistryRuleViolation",
    "ChemistryValidation",
    "calculate_team_chemistry",
    "get_chemistry_breakdown",
    "validate_team_chemistry",
    "validate_team_positions",
    "SeededRNG",
    "calculate_team_strength",
    "calculate_win_chances",
    "simulate_match",
    "calculate_match_result",
    "InvalidLeagueSize",
    "generate_league_matches",
    "simulate_complete_match",
    "simulate_league",
]
