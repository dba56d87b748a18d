"""Shelf-life estimation from food identity and freshness."""

import math
from dataclasses import dataclass

from food_freshness.domain.expiry import ExpiryEstimate, Urgency
from food_freshness.domain.foods import FoodInfo
from food_freshness.domain.rules import RuleBook

# Lower bound of each band, most urgent last.
_BANDS: tuple[tuple[float, Urgency], ...] = (
    (0.8, Urgency.LONG),
    (0.6, Urgency.MODERATE),
    (0.4, Urgency.SOON),
    (0.2, Urgency.IMMEDIATE),
)


@dataclass
class ExpiryEstimator:
    """Maps a food and its freshness score to a shelf-life estimate."""

    rules: RuleBook

    def estimate(self, food: FoodInfo, freshness: float) -> ExpiryEstimate:
        """Estimate remaining shelf life for a food."""
        baseline = self.baseline_days(food)
        days = _round_half_up(baseline * shelf_life_ratio(freshness))
        urgency = urgency_for(freshness)
        if urgency is Urgency.SPOILED:
            return ExpiryEstimate(urgency=urgency)
        return ExpiryEstimate(urgency=urgency, days=days)

    def baseline_days(self, food: FoodInfo) -> int:
        """Return shelf life at full freshness for a food."""
        name = food.name.lower()
        for entry in self.rules.food_expiry_days:
            if entry.food in name:
                return entry.days
        return self.rules.category_expiry_days.get(
            food.category, self.rules.default_expiry_days
        )


def shelf_life_ratio(freshness: float) -> float:
    """Fraction of baseline shelf life left; drops steeply at low freshness."""
    if freshness < 0.3:
        return freshness * 0.5
    if freshness < 0.6:
        return 0.15 + (freshness - 0.3) * 0.8
    return 0.39 + (freshness - 0.6) * 1.01


def urgency_for(freshness: float) -> Urgency:
    for lower_bound, urgency in _BANDS:
        if freshness >= lower_bound:
            return urgency
    return Urgency.SPOILED


def _round_half_up(value: float) -> int:
    return max(0, math.floor(value + 0.5))
