"""
REST API for the football card game match engine.
Stateless wrappers: callers send full team payloads, nothing is stored.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from football_tcg import config
from football_tcg.chemistry import (
    ChemistryRuleViolation,
    calculate_team_chemistry,
    get_chemistry_breakdown,
    validate_team_chemistry,
)
from football_tcg.logging_config import setup_logging
from football_tcg.models import Player, PlayerColor, PlayerPosition, Team, TeamSlot
from football_tcg.positions import validate_team_positions
from football_tcg.services.league_service import simulate_complete_match, simulate_league
from football_tcg.services.scheduling import InvalidLeagueSize, generate_league_matches
from football_tcg.simulation.rng import SeededRNG
from football_tcg.simulation.scorers import PointsWeightedScorer, ScorerSelector, UniformScorer
from football_tcg.simulation.strength import calculate_team_strength

logger = logging.getLogger(__name__)

SCORERS: dict[str, ScorerSelector] = {
    "points": PointsWeightedScorer(),
    "uniform": UniformScorer(),
}


# ---------- Lifespan ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    yield


# ---------- FastAPI app ----------
app = FastAPI(
    title="Football TCG Match Engine API",
    description="Team chemistry, strength and league match simulation",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Request models ----------


class PlayerIn(BaseModel):
    id: str
    name: str = ""
    points: int = Field(..., gt=0)
    position: PlayerPosition
    color: PlayerColor
    image_url: str = ""
    market_price: int = 0
    theme: str = "basic"
    percentage: float = 0.0

    def to_domain(self) -> Player:
        return Player(
            id=self.id,
            name=self.name or self.id,
            points=self.points,
            position=self.position,
            color=self.color,
            image_url=self.image_url,
            market_price=self.market_price,
            theme=self.theme,
            percentage=self.percentage,
        )


class TeamSlotIn(BaseModel):
    position_id: str
    player: PlayerIn | None = Field(None, description="Empty slot when omitted")


class TeamIn(BaseModel):
    id: str
    name: str = ""
    user_id: str = ""
    formation_id: str = ""
    players: list[TeamSlotIn] = Field(default_factory=list)

    def to_domain(self) -> Team:
        return Team(
            id=self.id,
            name=self.name or self.id,
            user_id=self.user_id,
            formation_id=self.formation_id,
            slots=[
                TeamSlot(position_id=s.position_id, player=s.player.to_domain() if s.player else None)
                for s in self.players
            ],
        )


class ColorEntry(BaseModel):
    color: PlayerColor


class ChemistryRequest(BaseModel):
    players: list[ColorEntry]


class PositionEntry(BaseModel):
    position: PlayerPosition | None = None
    name: str | None = None


class PositionValidationRequest(BaseModel):
    players: list[PositionEntry]
    formation_positions: list[PlayerPosition]


class TeamStrengthRequest(BaseModel):
    team: TeamIn


class SimulateMatchRequest(BaseModel):
    home_team: TeamIn
    away_team: TeamIn
    seed: int | None = Field(default=None, description="RNG seed for reproducibility")
    scorer: Literal["points", "uniform"] = "points"
    record_misses: bool = False


class LeagueScheduleRequest(BaseModel):
    teams: list[TeamIn]


class SimulateLeagueRequest(BaseModel):
    teams: list[TeamIn]
    seed: int | None = Field(default=None, description="Seed base; match n uses seed + n")
    scorer: Literal["points", "uniform"] = "points"
    record_misses: bool = False


# ---------- Routes ----------


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/chemistry/calculate")
def chemistry_calculate(req: ChemistryRequest) -> dict[str, Any]:
    """Strict chemistry: 400 when the roster breaks the color rule."""
    try:
        points = calculate_team_chemistry(None, req.players)
    except ChemistryRuleViolation as e:
        raise HTTPException(status_code=400, detail={"rule": e.rule, "color": e.color, "message": str(e)})
    return {"chemistry_points": points}


@app.post("/chemistry/validate")
def chemistry_validate(req: ChemistryRequest) -> dict[str, Any]:
    return validate_team_chemistry(req.players).to_dict()


@app.post("/chemistry/breakdown")
def chemistry_breakdown(req: ChemistryRequest) -> dict[str, Any]:
    breakdown = get_chemistry_breakdown(req.players)
    return {
        "chemistry_points": sum(b.bonus for b in breakdown),
        "breakdown": [b.to_dict() for b in breakdown],
    }


@app.post("/teams/positions/validate")
def positions_validate(req: PositionValidationRequest) -> dict[str, Any]:
    return validate_team_positions(req.players, req.formation_positions).to_dict()


@app.post("/teams/strength")
def team_strength(req: TeamStrengthRequest) -> dict[str, Any]:
    team = req.team.to_domain()
    players = team.fielded_players
    return {
        "strength": calculate_team_strength(team).to_dict(),
        "breakdown": [b.to_dict() for b in get_chemistry_breakdown(players)],
        "validation": validate_team_chemistry(players).to_dict(),
    }


@app.post("/simulate/match")
def simulate_match_route(req: SimulateMatchRequest) -> dict[str, Any]:
    home = req.home_team.to_domain()
    away = req.away_team.to_domain()
    rng = SeededRNG(req.seed) if req.seed is not None else None
    match = simulate_complete_match(
        home, away, rng=rng, scorer=SCORERS[req.scorer], record_misses=req.record_misses
    )
    return match.to_dict()


@app.post("/leagues/schedule")
def league_schedule(req: LeagueScheduleRequest) -> dict[str, Any]:
    try:
        pairings = generate_league_matches([t.to_domain() for t in req.teams])
    except InvalidLeagueSize as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"matches": [p.to_dict() for p in pairings]}


@app.post("/leagues/simulate")
def league_simulate(req: SimulateLeagueRequest) -> dict[str, Any]:
    try:
        records = simulate_league(
            [t.to_domain() for t in req.teams],
            seed=req.seed,
            scorer=SCORERS[req.scorer],
            record_misses=req.record_misses,
        )
    except InvalidLeagueSize as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"matches": [r.to_dict() for r in records]}


# ---------- Run with: uvicorn football_tcg.api:app --reload ----------
