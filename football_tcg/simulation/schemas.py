"""
Value objects produced by the match engine: strengths, win chances,
match events, simulations, results and league records.
All are created fresh per call; persisting them is the caller's job.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from football_tcg.models import Team


class EventType(str, Enum):
    GOAL = "goal"
    CHANCE = "chance"  # non-scoring trial, presentation only


@dataclass(frozen=True)
class TeamStrength:
    """Comparable strength of one team for one match."""
    team_id: str
    player_points: int
    chemistry_points: int
    total_strength: int
    win_chance: float = 0.0  # set by the probability engine

    def with_win_chance(self, chance: float) -> TeamStrength:
        return replace(self, win_chance=chance)

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_id": self.team_id,
            "player_points": self.player_points,
            "chemistry_points": self.chemistry_points,
            "total_strength": self.total_strength,
            "win_chance": self.win_chance,
        }


@dataclass(frozen=True)
class WinChances:
    """Per-trial scoring probability for each side."""
    chance_a: float
    chance_b: float

    def to_dict(self) -> dict[str, float]:
        return {"chance_a": self.chance_a, "chance_b": self.chance_b}


@dataclass(frozen=True)
class MatchEvent:
    minute: int  # 1..90
    type: EventType
    team: int  # 1 = home, 2 = away
    player_id: str | None = None

    def __post_init__(self) -> None:
        if self.team not in (1, 2):
            raise ValueError(f"team must be 1 or 2 (got {self.team})")

    @property
    def is_goal(self) -> bool:
        return self.type == EventType.GOAL

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"minute": self.minute, "type": self.type.value, "team": self.team}
        if self.player_id is not None:
            d["player_id"] = self.player_id
        return d


@dataclass
class MatchSimulation:
    """
    One simulated match. team*_chances is always the per-team trial count;
    team*_percentage is the realized scoring rate of this run (0..100).
    """
    events: list[MatchEvent]
    team1_chances: int
    team2_chances: int
    team1_percentage: float
    team2_percentage: float
    team1_win_chance: float = 0.0
    team2_win_chance: float = 0.0
    seed: int | None = None

    def goals(self, team: int) -> list[MatchEvent]:
        return [e for e in self.events if e.is_goal and e.team == team]

    def to_dict(self) -> dict[str, Any]:
        return {
            "events": [e.to_dict() for e in self.events],
            "team1_chances": self.team1_chances,
            "team2_chances": self.team2_chances,
            "team1_percentage": self.team1_percentage,
            "team2_percentage": self.team2_percentage,
            "team1_win_chance": self.team1_win_chance,
            "team2_win_chance": self.team2_win_chance,
            "seed": self.seed,
        }


@dataclass
class MatchResult:
    """Score line and league points for one match."""
    home_team: Team
    away_team: Team
    home_score: int
    away_score: int
    home_points: int
    away_points: int

    @property
    def winner_team_id(self) -> str | None:
        if self.home_score > self.away_score:
            return self.home_team.id
        if self.away_score > self.home_score:
            return self.away_team.id
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "home_team_id": self.home_team.id,
            "away_team_id": self.away_team.id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "home_points": self.home_points,
            "away_points": self.away_points,
            "winner_team_id": self.winner_team_id,
        }


@dataclass
class CompleteMatch:
    """Simulation plus everything derived from it."""
    simulation: MatchSimulation
    result: MatchResult
    home_strength: TeamStrength
    away_strength: TeamStrength

    def to_dict(self) -> dict[str, Any]:
        return {
            "simulation": self.simulation.to_dict(),
            "result": self.result.to_dict(),
            "home_strength": self.home_strength.to_dict(),
            "away_strength": self.away_strength.to_dict(),
        }


@dataclass(frozen=True)
class Pairing:
    """One scheduled league fixture."""
    match_number: int
    round_number: int
    home_team: Team
    away_team: Team

    def to_dict(self) -> dict[str, Any]:
        return {
            "match_number": self.match_number,
            "round_number": self.round_number,
            "home_team_id": self.home_team.id,
            "away_team_id": self.away_team.id,
        }


@dataclass
class LeagueMatchRecord:
    """A played league fixture with all intermediate artifacts."""
    match_number: int
    round_number: int
    home_team: Team
    away_team: Team
    simulation: MatchSimulation
    result: MatchResult
    home_strength: TeamStrength
    away_strength: TeamStrength

    def to_dict(self) -> dict[str, Any]:
        return {
            "match_number": self.match_number,
            "round_number": self.round_number,
            "home_team_id": self.home_team.id,
            "away_team_id": self.away_team.id,
            "simulation": self.simulation.to_dict(),
            "result": self.result.to_dict(),
            "home_strength": self.home_strength.to_dict(),
            "away_strength": self.away_strength.to_dict(),
        }
