"""
Simulate a league round between four generated demo teams and print every
match: score line, league points and goal scorers in minute order.

Run from project root: python -m football_tcg.run_league --seed 42
"""
from __future__ import annotations

import argparse
import logging

from football_tcg.logging_config import setup_logging
from football_tcg.models import Player, PlayerColor, PlayerPosition, Team
from football_tcg.services.league_service import simulate_league
from football_tcg.simulation.rng import SeededRNG
from football_tcg.simulation.schemas import LeagueMatchRecord

logger = logging.getLogger(__name__)

FORMATION_442 = (
    PlayerPosition.GK,
    PlayerPosition.LB,
    PlayerPosition.CB,
    PlayerPosition.CB,
    PlayerPosition.RB,
    PlayerPosition.LM,
    PlayerPosition.CM,
    PlayerPosition.CM,
    PlayerPosition.RM,
    PlayerPosition.ST,
    PlayerPosition.ST,
)

DEMO_TEAM_NAMES = ("Red Lions", "Blue Harbour", "Green Valley", "Golden Coast")


def demo_team(team_id: str, name: str, rng: SeededRNG) -> Team:
    """11 players in a 4-4-2, spread over three distinct random colors."""
    colors = rng.sample(list(PlayerColor), k=3)
    players = [
        Player(
            id=f"{team_id}-p{i + 1}",
            name=f"{name} #{i + 1}",
            points=rng.randint(60, 95),
            position=pos,
            color=colors[i % len(colors)],
        )
        for i, pos in enumerate(FORMATION_442)
    ]
    return Team.from_players(team_id, players, name=name, user_id=f"user-{team_id}", formation_id="4-4-2")


def demo_league(seed: int | None = None) -> list[Team]:
    rng = SeededRNG(seed)
    return [demo_team(f"team-{i + 1}", name, rng) for i, name in enumerate(DEMO_TEAM_NAMES)]


def _print_record(record: LeagueMatchRecord, names: dict[str, str], show_events: bool) -> None:
    r = record.result
    print(
        f"Match {record.match_number} (round {record.round_number}): "
        f"{record.home_team.name} {r.home_score} - {r.away_score} {record.away_team.name}   "
        f"[{r.home_points} / {r.away_points} pts]"
    )
    print(
        f"  Strength {record.home_strength.total_strength} vs {record.away_strength.total_strength}   "
        f"chance/trial {record.home_strength.win_chance:.2%} vs {record.away_strength.win_chance:.2%}"
    )
    if show_events:
        for e in record.simulation.events:
            scorer = names.get(e.player_id or "", "unknown")
            print(f"    {e.minute:>2}'  {e.type.value:<6} team {e.team}  {scorer}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate a 4-team league round with demo teams")
    parser.add_argument("--seed", type=int, default=None, help="Seed for teams and matches")
    parser.add_argument("--log-level", default=None, help="Logging level (default from FOOTBALL_TCG_LOG_LEVEL)")
    parser.add_argument("--events", action="store_true", help="Print goal events for every match")
    args = parser.parse_args()

    setup_logging(args.log_level)
    teams = demo_league(args.seed)
    names = {p.id: p.name for t in teams for p in t.fielded_players}
    records = simulate_league(teams, seed=args.seed)
    for record in records:
        _print_record(record, names, args.events)
    logger.info("League round complete: %d matches", len(records))


if __name__ == "__main__":
    main()
