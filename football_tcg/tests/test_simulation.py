"""
Tests for the match engine: RNG, strength, win chances, scorer selection,
trial loop and result derivation.
"""
from __future__ import annotations

import pytest

from football_tcg.models import PlayerColor
from football_tcg.simulation import (
    EventType,
    MatchEvent,
    MatchSimulation,
    MatchSimulator,
    PointsWeightedScorer,
    ProbabilityEngine,
    SeededRNG,
    TeamStrength,
    UniformScorer,
    WinChances,
    calculate_match_result,
    calculate_team_strength,
    calculate_win_chances,
    simulate_match,
)
from football_tcg.simulation.match_simulator import MATCH_MINUTES, TOTAL_CHANCES_PER_TEAM
from football_tcg.simulation.probability_engine import MIN_CHANCE
from football_tcg.simulation.result import league_points

from conftest import balanced_team, make_player, make_team


def strength(total: int, team_id: str = "t") -> TeamStrength:
    return TeamStrength(team_id=team_id, player_points=total, chemistry_points=0, total_strength=total)


class TestSeededRNG:
    def test_same_seed_same_sequence(self):
        a, b = SeededRNG(7), SeededRNG(7)
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_seed_property(self):
        assert SeededRNG(99).seed == 99
        assert SeededRNG().seed is None

    def test_bernoulli_extremes(self):
        rng = SeededRNG(3)
        assert all(rng.bernoulli(1.0) for _ in range(100))
        assert not any(rng.bernoulli(0.0) for _ in range(100))

    def test_state_roundtrip(self):
        rng = SeededRNG(11)
        state = rng.getstate()
        first = [rng.randint(1, 90) for _ in range(5)]
        rng.setstate(state)
        assert [rng.randint(1, 90) for _ in range(5)] == first


class TestStrength:
    def test_points_plus_chemistry(self):
        team = balanced_team("a", points=10)
        s = calculate_team_strength(team)
        assert s.team_id == "a"
        assert s.player_points == 60
        assert s.chemistry_points == 12
        assert s.total_strength == 72
        assert s.win_chance == 0.0

    def test_empty_slots_ignored(self):
        players = [make_player("x", points=30, color=PlayerColor.RED), make_player("y", points=20, color=PlayerColor.RED)]
        s = calculate_team_strength(make_team("a", players, empty_slots=3))
        assert s.player_points == 50
        assert s.chemistry_points == 4
        assert s.total_strength == 54

    def test_invalid_chemistry_still_credited(self):
        # Two colors only: strictly invalid, but strength keeps the partial bonus
        players = [make_player(f"p{i}", points=5, color=c) for i, c in enumerate(["RED"] * 3 + ["BLUE"] * 2)]
        s = calculate_team_strength(make_team("a", players))
        assert s.chemistry_points == 9 + 4
        assert s.total_strength == 25 + 13

    def test_empty_team(self):
        s = calculate_team_strength(make_team("a", [], empty_slots=11))
        assert s.total_strength == 0

    def test_with_win_chance_copies(self):
        s = strength(40)
        updated = s.with_win_chance(0.02)
        assert updated.win_chance == 0.02
        assert s.win_chance == 0.0


class TestProbabilityEngine:
    def test_stronger_and_weaker(self):
        chances = calculate_win_chances(strength(120), strength(20))
        assert chances.chance_a == pytest.approx(0.035)
        assert chances.chance_b == pytest.approx(0.005)

    def test_equal_strengths_get_base_rate(self):
        chances = calculate_win_chances(strength(75), strength(75))
        assert chances.chance_a == pytest.approx(0.01)
        assert chances.chance_b == pytest.approx(0.01)

    def test_extremes_clamped(self):
        chances = calculate_win_chances(strength(10000), strength(0))
        assert chances.chance_a == 1.0
        assert chances.chance_b == MIN_CHANCE

    def test_both_zero_is_even(self):
        chances = calculate_win_chances(strength(0), strength(0))
        assert chances == WinChances(chance_a=0.5, chance_b=0.5)

    def test_stronger_side_always_higher(self):
        for s_a, s_b in [(21, 20), (300, 10), (1000, 999), (50, 0)]:
            chances = calculate_win_chances(strength(s_a), strength(s_b))
            assert chances.chance_a > chances.chance_b
            assert MIN_CHANCE <= chances.chance_b <= chances.chance_a <= 1.0

    def test_symmetric(self):
        ab = calculate_win_chances(strength(90), strength(40))
        ba = calculate_win_chances(strength(40), strength(90))
        assert ab.chance_a == pytest.approx(ba.chance_b)
        assert ab.chance_b == pytest.approx(ba.chance_a)

    def test_custom_modifiers(self):
        engine = ProbabilityEngine(base_percentage=2.0, modifier_above=0.1, modifier_below=0.1)
        chances = engine.compute(strength(30), strength(10))
        assert chances.chance_a == pytest.approx(0.03)
        assert chances.chance_b == pytest.approx(0.01)

    def test_invalid_bounds(self):
        with pytest.raises(ValueError):
            ProbabilityEngine(min_chance=0.5, max_chance=0.1)


class TestScorers:
    def test_empty_roster(self):
        rng = SeededRNG(1)
        assert UniformScorer().select([], rng) is None
        assert PointsWeightedScorer().select([], rng) is None

    def test_points_weighted_prefers_high_rating(self):
        rng = SeededRNG(1)
        low, high = make_player("low", points=1), make_player("high", points=999)
        picks = [PointsWeightedScorer().select([low, high], rng).id for _ in range(200)]
        assert picks.count("high") >= 180

    def test_uniform_reaches_everyone(self):
        rng = SeededRNG(5)
        players = [make_player(f"p{i}", points=1 + 50 * i) for i in range(3)]
        picks = {UniformScorer().select(players, rng).id for _ in range(300)}
        assert picks == {"p0", "p1", "p2"}


class TestMatchSimulator:
    @pytest.fixture
    def teams(self):
        return balanced_team("home", points=20), balanced_team("away", points=10)

    def test_events_belong_to_rosters(self, teams):
        home, away = teams
        sim = MatchSimulator(rng=SeededRNG(42)).run(home, away, chances=WinChances(0.3, 0.2))
        home_ids = {p.id for p in home.fielded_players}
        away_ids = {p.id for p in away.fielded_players}
        assert sim.events
        for e in sim.events:
            assert e.type == EventType.GOAL
            assert 1 <= e.minute <= MATCH_MINUTES
            assert e.player_id in (home_ids if e.team == 1 else away_ids)

    def test_events_sorted_by_minute(self, teams):
        sim = MatchSimulator(rng=SeededRNG(42)).run(*teams, chances=WinChances(0.3, 0.2))
        minutes = [e.minute for e in sim.events]
        assert minutes == sorted(minutes)

    def test_same_minute_home_before_away(self, teams):
        sim = MatchSimulator(rng=SeededRNG(8)).run(*teams, chances=WinChances(1.0, 1.0))
        by_minute: dict[int, list[int]] = {}
        for e in sim.events:
            by_minute.setdefault(e.minute, []).append(e.team)
        assert any(len(set(t)) == 2 for t in by_minute.values())
        for team_order in by_minute.values():
            assert team_order == sorted(team_order)

    def test_trial_counts_and_percentages(self, teams):
        sim = MatchSimulator(rng=SeededRNG(42)).run(*teams, chances=WinChances(0.3, 0.2))
        assert sim.team1_chances == TOTAL_CHANCES_PER_TEAM
        assert sim.team2_chances == TOTAL_CHANCES_PER_TEAM
        assert sim.team1_percentage == pytest.approx(len(sim.goals(1)))
        assert sim.team2_percentage == pytest.approx(len(sim.goals(2)))
        assert sim.team1_win_chance == 0.3
        assert sim.team2_win_chance == 0.2
        assert sim.seed == 42

    def test_same_seed_same_match(self, teams):
        a = MatchSimulator(rng=SeededRNG(123)).run(*teams)
        b = MatchSimulator(rng=SeededRNG(123)).run(*teams)
        assert a.to_dict() == b.to_dict()

    def test_certain_chance_scores_every_trial(self, teams):
        sim = MatchSimulator(rng=SeededRNG(1)).run(*teams, chances=WinChances(1.0, MIN_CHANCE))
        assert len(sim.goals(1)) == TOTAL_CHANCES_PER_TEAM
        assert sim.team1_percentage == pytest.approx(100.0)

    def test_record_misses_keeps_every_trial(self, teams):
        sim = MatchSimulator(rng=SeededRNG(42), record_misses=True).run(*teams, chances=WinChances(0.3, 0.2))
        assert len(sim.events) == 2 * TOTAL_CHANCES_PER_TEAM
        misses = [e for e in sim.events if e.type == EventType.CHANCE]
        assert all(e.player_id is None for e in misses)
        assert len(misses) == 200 - len(sim.goals(1)) - len(sim.goals(2))

    def test_misses_do_not_change_score(self, teams):
        plain = MatchSimulator(rng=SeededRNG(42)).run(*teams, chances=WinChances(0.3, 0.2))
        assert len(plain.events) == len(plain.goals(1)) + len(plain.goals(2))

    def test_empty_roster_goal_has_no_scorer(self):
        home = make_team("home", [], empty_slots=11)
        away = balanced_team("away", points=10)
        sim = MatchSimulator(rng=SeededRNG(4)).run(home, away, chances=WinChances(1.0, MIN_CHANCE))
        home_goals = sim.goals(1)
        assert len(home_goals) == TOTAL_CHANCES_PER_TEAM
        assert all(e.player_id is None for e in home_goals)

    def test_custom_trial_count(self, teams):
        sim = MatchSimulator(rng=SeededRNG(2), chances_per_team=10).run(*teams, chances=WinChances(1.0, 1.0))
        assert sim.team1_chances == 10
        assert len(sim.events) == 20

    def test_invalid_trial_count(self):
        with pytest.raises(ValueError):
            MatchSimulator(chances_per_team=0)

    def test_simulate_match_wrapper(self, teams):
        a = simulate_match(*teams, rng=SeededRNG(77))
        b = simulate_match(*teams, rng=SeededRNG(77))
        assert a.to_dict() == b.to_dict()


class TestMatchEvent:
    def test_team_must_be_one_or_two(self):
        with pytest.raises(ValueError):
            MatchEvent(minute=10, type=EventType.GOAL, team=3)

    def test_to_dict_omits_missing_scorer(self):
        assert MatchEvent(minute=5, type=EventType.GOAL, team=1).to_dict() == {"minute": 5, "type": "goal", "team": 1}
        d = MatchEvent(minute=5, type=EventType.GOAL, team=2, player_id="p1").to_dict()
        assert d["player_id"] == "p1"


class TestResult:
    def test_league_points(self):
        assert league_points(2, 1) == (3, 0)
        assert league_points(0, 3) == (0, 3)
        assert league_points(1, 1) == (1, 1)
        assert league_points(0, 0) == (1, 1)

    def test_result_from_events(self):
        home, away = balanced_team("h", 10), balanced_team("a", 10)
        events = [
            MatchEvent(minute=3, type=EventType.GOAL, team=1, player_id="h-p0"),
            MatchEvent(minute=20, type=EventType.CHANCE, team=2),
            MatchEvent(minute=44, type=EventType.GOAL, team=2, player_id="a-p1"),
            MatchEvent(minute=80, type=EventType.GOAL, team=1, player_id="h-p3"),
        ]
        sim = MatchSimulation(events=events, team1_chances=100, team2_chances=100, team1_percentage=2.0, team2_percentage=1.0)
        result = calculate_match_result(home, away, sim)
        assert (result.home_score, result.away_score) == (2, 1)
        assert (result.home_points, result.away_points) == (3, 0)
        assert result.winner_team_id == "h"

    def test_draw_has_no_winner(self):
        home, away = balanced_team("h", 10), balanced_team("a", 10)
        sim = MatchSimulation(events=[], team1_chances=100, team2_chances=100, team1_percentage=0.0, team2_percentage=0.0)
        result = calculate_match_result(home, away, sim)
        assert result.home_points == result.away_points == 1
        assert result.winner_team_id is None
        assert result.to_dict()["winner_team_id"] is None
