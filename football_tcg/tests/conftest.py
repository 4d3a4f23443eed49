"""Shared fixtures: player/team factories and a ready-made 4-team league."""
from __future__ import annotations

import pytest

from football_tcg.models import Player, PlayerColor, PlayerPosition, Team, TeamSlot


def make_player(
    id: str,
    points: int = 10,
    color: PlayerColor | str = PlayerColor.RED,
    position: PlayerPosition = PlayerPosition.CM,
) -> Player:
    return Player(id=id, name=f"Player {id}", points=points, position=position, color=PlayerColor(color))


def make_team(id: str, players: list[Player], empty_slots: int = 0) -> Team:
    slots = [TeamSlot(position_id=p.position.value, player=p) for p in players]
    slots += [TeamSlot(position_id=f"empty-{i}") for i in range(empty_slots)]
    return Team(id=id, name=f"Team {id}", user_id=f"user-{id}", formation_id="formation-1", slots=slots)


def colored(*groups: tuple[str, int]) -> list[dict[str, str]]:
    """colored(("RED", 2), ("BLUE", 3)) -> [{"color": "RED"}, {"color": "RED"}, {"color": "BLUE"}, ...]"""
    return [{"color": color} for color, n in groups for _ in range(n)]


def balanced_team(id: str, points: int) -> Team:
    """Six players over three colors (chemistry 12), all rated `points`."""
    colors = [PlayerColor.RED, PlayerColor.RED, PlayerColor.BLUE, PlayerColor.BLUE, PlayerColor.GREEN, PlayerColor.GREEN]
    return make_team(id, [make_player(f"{id}-p{i}", points=points, color=c) for i, c in enumerate(colors)])


@pytest.fixture
def four_teams() -> list[Team]:
    return [balanced_team(f"t{i}", points=10 * (i + 1)) for i in range(4)]
