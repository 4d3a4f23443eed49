"""
Team chemistry: bonus strength from clustering players by shared color.

Strict mode enforces the team-validity rule (exactly 3 colors, at least 2
players each); lenient mode only computes the bonus and is what live
matches use.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import Team

logger = logging.getLogger(__name__)

# ---------- Team-validity rule ----------
EXACT_CHEMISTRY_COLORS = 3
MIN_PLAYERS_PER_COLOR = 2

# ---------- Bonus ----------
MIN_BONUS_GROUP = 2
MAX_BONUS_GROUP = 7  # groups above this earn nothing
CHEMISTRY_POINTS: dict[int, int] = {n: n * n for n in range(MIN_BONUS_GROUP, MAX_BONUS_GROUP + 1)}


class ChemistryRuleViolation(ValueError):
    """Roster breaks the color rule (wrong color count or an under-populated color)."""

    def __init__(self, message: str, rule: str, color: str | None = None) -> None:
        super().__init__(message)
        self.rule = rule
        self.color = color


@dataclass(frozen=True)
class ChemistryBonus:
    """Bonus earned by one color group."""
    color: str
    player_count: int
    bonus: int

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color, "player_count": self.player_count, "bonus": self.bonus}


@dataclass
class ChemistryValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"is_valid": self.is_valid, "errors": list(self.errors)}


def _color_of(entry: Any) -> str:
    if isinstance(entry, Mapping):
        color = entry["color"]
    else:
        color = entry.color
    return getattr(color, "value", color)


def count_colors(players: Iterable[Any]) -> dict[str, int]:
    """Players per color, in order of first appearance."""
    counts: dict[str, int] = {}
    for p in players:
        color = _color_of(p)
        counts[color] = counts.get(color, 0) + 1
    return counts


def group_bonus(count: int) -> int:
    """count² for groups of 2..7, else 0."""
    return CHEMISTRY_POINTS.get(count, 0)


def _color_count_error() -> str:
    return f"Team must have exactly {EXACT_CHEMISTRY_COLORS} different colors"


def _min_per_color_error(color: str) -> str:
    return f"Color {color} must have at least {MIN_PLAYERS_PER_COLOR} players"


def calculate_team_chemistry(team: Team | None, players: Iterable[Any]) -> int:
    """
    Strict chemistry: raises ChemistryRuleViolation on the first broken rule
    (color count first, then the first under-populated color).
    """
    counts = count_colors(players)
    team_id = team.id if team is not None else None

    if len(counts) != EXACT_CHEMISTRY_COLORS:
        logger.info("Chemistry rejected for team %s: %d colors", team_id, len(counts))
        raise ChemistryRuleViolation(_color_count_error(), rule="color_count")

    for color, count in counts.items():
        if count < MIN_PLAYERS_PER_COLOR:
            logger.info("Chemistry rejected for team %s: color %s has %d players", team_id, color, count)
            raise ChemistryRuleViolation(_min_per_color_error(color), rule="min_per_color", color=color)

    return sum(group_bonus(c) for c in counts.values())


def validate_team_chemistry(players: Iterable[Any]) -> ChemistryValidation:
    """Collects every violated rule instead of raising."""
    counts = count_colors(players)
    errors: list[str] = []
    if len(counts) != EXACT_CHEMISTRY_COLORS:
        errors.append(_color_count_error())
    for color, count in counts.items():
        if count < MIN_PLAYERS_PER_COLOR:
            errors.append(_min_per_color_error(color))
    return ChemistryValidation(is_valid=not errors, errors=errors)


def get_chemistry_breakdown(players: Iterable[Any]) -> list[ChemistryBonus]:
    """
    Lenient chemistry: one entry per color group of 2..7 players, highest
    bonus first. No color-count rule is applied.
    """
    breakdown = [
        ChemistryBonus(color=color, player_count=count, bonus=group_bonus(count))
        for color, count in count_colors(players).items()
        if MIN_BONUS_GROUP <= count <= MAX_BONUS_GROUP
    ]
    # sorted() is stable, so equal bonuses keep first-appearance order
    return sorted(breakdown, key=lambda b: b.bonus, reverse=True)


def chemistry_points(players: Iterable[Any]) -> int:
    """Lenient bonus total."""
    return sum(b.bonus for b in get_chemistry_breakdown(players))
