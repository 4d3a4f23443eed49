"""
Data models for the football card game engine.
Domain objects only: no persistence or API logic.

Players are collected cards; teams field players in formation slots.
Chemistry and strength are derived from the roster on every call and are
never stored on the team.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------- Positions ----------
class PlayerPosition(str, Enum):
    """The 15 fixed field positions."""
    GK = "GK"
    CB = "CB"
    LB = "LB"
    RB = "RB"
    CDM = "CDM"
    CM = "CM"
    CAM = "CAM"
    LM = "LM"
    RM = "RM"
    LW = "LW"
    RW = "RW"
    ST = "ST"
    CF = "CF"
    LF = "LF"
    RF = "RF"

    @property
    def label(self) -> str:
        return POSITION_LABELS[self]


POSITION_LABELS: dict[PlayerPosition, str] = {
    PlayerPosition.GK: "Goalkeeper",
    PlayerPosition.CB: "Center Back",
    PlayerPosition.LB: "Left Back",
    PlayerPosition.RB: "Right Back",
    PlayerPosition.CDM: "Central Defensive Midfielder",
    PlayerPosition.CM: "Central Midfielder",
    PlayerPosition.CAM: "Central Attacking Midfielder",
    PlayerPosition.LM: "Left Midfielder",
    PlayerPosition.RM: "Right Midfielder",
    PlayerPosition.LW: "Left Winger",
    PlayerPosition.RW: "Right Winger",
    PlayerPosition.ST: "Striker",
    PlayerPosition.CF: "Center Forward",
    PlayerPosition.LF: "Left Forward",
    PlayerPosition.RF: "Right Forward",
}


# ---------- Colors (chemistry palette) ----------
class PlayerColor(str, Enum):
    RED = "RED"
    BLUE = "BLUE"
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    PURPLE = "PURPLE"
    ORANGE = "ORANGE"
    PINK = "PINK"
    CYAN = "CYAN"

    @property
    def hex(self) -> str:
        return COLOR_HEX[self]


COLOR_HEX: dict[PlayerColor, str] = {
    PlayerColor.RED: "#DC2626",
    PlayerColor.BLUE: "#1E40AF",
    PlayerColor.GREEN: "#16A34A",
    PlayerColor.YELLOW: "#FACC15",
    PlayerColor.PURPLE: "#7C3AED",
    PlayerColor.ORANGE: "#EA580C",
    PlayerColor.PINK: "#DB2777",
    PlayerColor.CYAN: "#0891B2",
}


# ---------- Player ----------
@dataclass(frozen=True)
class Player:
    """
    A collectible player card.
    Only points, position and color matter to the engine; the rest is
    presentation metadata carried through untouched.
    """
    id: str
    name: str
    points: int
    position: PlayerPosition
    color: PlayerColor
    image_url: str = ""
    market_price: int = 0
    theme: str = "basic"
    percentage: float = 0.0

    def __post_init__(self) -> None:
        if self.points <= 0:
            raise ValueError(f"Player {self.id} must have positive points (got {self.points})")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "points": self.points,
            "position": self.position.value,
            "color": self.color.value,
            "image_url": self.image_url,
            "market_price": self.market_price,
            "theme": self.theme,
            "percentage": self.percentage,
        }


# ---------- Team ----------
@dataclass(frozen=True)
class TeamSlot:
    """One formation slot; player is None when the slot is empty."""
    position_id: str
    player: Player | None = None

    @property
    def player_id(self) -> str | None:
        return self.player.id if self.player is not None else None


@dataclass
class Team:
    """
    A user's team for one match: formation slots in order, some possibly empty.
    """
    id: str
    name: str
    user_id: str
    formation_id: str
    slots: list[TeamSlot] = field(default_factory=list)

    @property
    def fielded_players(self) -> list[Player]:
        """Players in non-empty slots, in slot order."""
        return [s.player for s in self.slots if s.player is not None]

    @classmethod
    def from_players(
        cls,
        id: str,
        players: list[Player],
        name: str = "",
        user_id: str = "",
        formation_id: str = "",
    ) -> Team:
        """Build a team with one slot per player, slot id taken from the player's position."""
        slots = [TeamSlot(position_id=p.position.value, player=p) for p in players]
        return cls(id=id, name=name or id, user_id=user_id, formation_id=formation_id, slots=slots)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "user_id": self.user_id,
            "formation_id": self.formation_id,
            "players": [
                {"position_id": s.position_id, "player_id": s.player_id}
                for s in self.slots
            ],
        }
