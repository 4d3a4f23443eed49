"""
Probability Engine: converts two team strengths into per-trial scoring chances.

Each side's chance starts from a base rate and moves with its distance from the
match-average strength. Teams above average gain faster (MODIFIER_ABOVE_AVERAGE)
than teams below average lose (MODIFIER_BELOW_AVERAGE).
"""
from __future__ import annotations

from .schemas import TeamStrength, WinChances

# All three in percentage points; modifiers are per strength point.
BASE_CHANCE_PERCENTAGE = 1.0
MODIFIER_ABOVE_AVERAGE = 0.05
MODIFIER_BELOW_AVERAGE = 0.01

# Bounds applied to every computed chance.
MIN_CHANCE = 0.001
MAX_CHANCE = 1.0

EVEN_CHANCES = WinChances(chance_a=0.5, chance_b=0.5)


class ProbabilityEngine:
    """Linear above/below-average model with clamping."""

    def __init__(
        self,
        base_percentage: float = BASE_CHANCE_PERCENTAGE,
        modifier_above: float = MODIFIER_ABOVE_AVERAGE,
        modifier_below: float = MODIFIER_BELOW_AVERAGE,
        min_chance: float = MIN_CHANCE,
        max_chance: float = MAX_CHANCE,
    ) -> None:
        if not 0.0 <= min_chance <= max_chance <= 1.0:
            raise ValueError(f"Invalid chance bounds: [{min_chance}, {max_chance}]")
        self.base_percentage = base_percentage
        self.modifier_above = modifier_above
        self.modifier_below = modifier_below
        self.min_chance = min_chance
        self.max_chance = max_chance

    def chance_for(self, strength: float, average: float) -> float:
        """Chance of one side given the match-average strength."""
        diff = strength - average
        if diff >= 0:
            pct = self.base_percentage + diff * self.modifier_above
        else:
            pct = self.base_percentage - abs(diff) * self.modifier_below
        return max(self.min_chance, min(self.max_chance, pct / 100))

    def compute(self, strength_a: TeamStrength, strength_b: TeamStrength) -> WinChances:
        s_a = strength_a.total_strength
        s_b = strength_b.total_strength
        # The linear model is degenerate with no strength on either side
        if s_a + s_b == 0:
            return EVEN_CHANCES
        average = (s_a + s_b) / 2
        return WinChances(
            chance_a=self.chance_for(s_a, average),
            chance_b=self.chance_for(s_b, average),
        )


_DEFAULT_ENGINE = ProbabilityEngine()


def calculate_win_chances(strength_a: TeamStrength, strength_b: TeamStrength) -> WinChances:
    return _DEFAULT_ENGINE.compute(strength_a, strength_b)
