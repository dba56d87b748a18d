"""Food identification from vision labels."""

from collections.abc import Sequence
from dataclasses import dataclass

from food_freshness.domain.foods import UNKNOWN_FOOD, FoodCategory, FoodInfo
from food_freshness.domain.observations import ColorSample, Label
from food_freshness.domain.rules import RuleBook


@dataclass
class FoodIdentifier:
    """Matches a label set against the food taxonomy.

    Labels are expected highest confidence first. Each pass sweeps the whole
    label set before the next one starts, so an exact taxonomy hit anywhere
    beats a substring hit on an earlier label.
    """

    rules: RuleBook

    def identify(
        self, labels: Sequence[Label], colors: Sequence[ColorSample] = ()
    ) -> FoodInfo:
        """Return the best-guess food for the labels."""
        return (
            self._exact_match(labels)
            or self._substring_match(labels)
            or self._generic_match(labels)
            or _fallback(labels)
        )

    def _exact_match(self, labels: Sequence[Label]) -> FoodInfo | None:
        for label in labels:
            if not label.score > self.rules.exact_match_min_score:
                continue
            description = label.description.lower()
            for category, foods in self.rules.taxonomy.items():
                if description in foods:
                    return FoodInfo(
                        name=label.description,
                        confidence=label.score,
                        category=category,
                    )
        return None

    def _substring_match(self, labels: Sequence[Label]) -> FoodInfo | None:
        for label in labels:
            if not label.score > self.rules.substring_match_min_score:
                continue
            description = label.description.lower()
            for category, foods in self.rules.taxonomy.items():
                for food in foods:
                    if food in description:
                        return FoodInfo(
                            name=food[:1].upper() + food[1:],
                            confidence=label.score,
                            category=category,
                        )
        return None

    def _generic_match(self, labels: Sequence[Label]) -> FoodInfo | None:
        for label in labels:
            if not label.score > self.rules.generic_match_min_score:
                continue
            description = label.description.lower()
            if any(term in description for term in self.rules.generic_food_terms):
                return FoodInfo(
                    name=label.description,
                    confidence=label.score,
                    category=FoodCategory.OTHER,
                )
        return None


def _fallback(labels: Sequence[Label]) -> FoodInfo:
    if not labels:
        return UNKNOWN_FOOD
    first = labels[0]
    return FoodInfo(
        name=first.description or UNKNOWN_FOOD.name,
        confidence=first.score,
        category=FoodCategory.UNKNOWN,
    )
