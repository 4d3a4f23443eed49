"""
Position validation: players may only be placed in formation slots that
match their position. Matching is strict for now; POSITION_COMPATIBILITY is
the single place to loosen it.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .models import PlayerPosition

POSITION_COMPATIBILITY: dict[PlayerPosition, tuple[PlayerPosition, ...]] = {
    pos: (pos,) for pos in PlayerPosition
}


@dataclass(frozen=True)
class InvalidPlacement:
    player_position: PlayerPosition
    formation_position: PlayerPosition
    formation_index: int
    player_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_position": self.player_position.value,
            "formation_position": self.formation_position.value,
            "formation_index": self.formation_index,
            "player_name": self.player_name,
        }


@dataclass
class PositionValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    invalid_placements: list[InvalidPlacement] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "invalid_placements": [p.to_dict() for p in self.invalid_placements],
        }


def _as_position(value: PlayerPosition | str | None) -> PlayerPosition | None:
    if value is None or value == "":
        return None
    return PlayerPosition(value)


def validate_player_position(
    player_position: PlayerPosition | str | None,
    formation_position: PlayerPosition | str | None,
) -> bool:
    player_pos = _as_position(player_position)
    slot_pos = _as_position(formation_position)
    if player_pos is None or slot_pos is None:
        return False
    return slot_pos in POSITION_COMPATIBILITY.get(player_pos, ())


def _field(entry: Any, name: str) -> Any:
    if entry is None:
        return None
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def validate_team_positions(
    players: Sequence[Any],
    formation_positions: Sequence[PlayerPosition | str],
) -> PositionValidation:
    """
    players[i] is placed in formation_positions[i]. Entries without a position
    (empty slots) and indexes past the end of the formation are skipped.
    """
    errors: list[str] = []
    invalid: list[InvalidPlacement] = []
    for index, entry in enumerate(players):
        player_pos = _as_position(_field(entry, "position"))
        if player_pos is None or index >= len(formation_positions):
            continue
        slot_pos = _as_position(formation_positions[index])
        if slot_pos is None or validate_player_position(player_pos, slot_pos):
            continue
        name = _field(entry, "name")
        display = name or f"Player {index + 1}"
        errors.append(f"{display} ({player_pos.value}) cannot be placed in {slot_pos.value} position")
        invalid.append(
            InvalidPlacement(
                player_position=player_pos,
                formation_position=slot_pos,
                formation_index=index,
                player_name=name,
            )
        )
    return PositionValidation(is_valid=not errors, errors=errors, invalid_placements=invalid)


def get_valid_positions_for_player(
    player_position: PlayerPosition | str | None,
    formation_positions: Sequence[PlayerPosition | str] | None,
) -> list[int]:
    """Formation indexes this player may occupy."""
    if player_position is None or not formation_positions:
        return []
    return [
        i for i, slot in enumerate(formation_positions)
        if validate_player_position(player_position, slot)
    ]
