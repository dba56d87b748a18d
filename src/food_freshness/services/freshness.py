"""Freshness scoring from labels and colors."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from food_freshness.domain.foods import FoodInfo
from food_freshness.domain.observations import ColorSample, Label
from food_freshness.domain.rules import RuleBook
from food_freshness.services.colors import ColorAnalyzer

_logger = logging.getLogger(__name__)


@dataclass
class FreshnessScorer:
    """Combines text, color and food-specific signals into one score.

    Starts from a neutral prior and applies, in order: weighted indicator
    terms, a color fallback for produce without textual indicators, per-food
    label rules, and a second spoilage sweep that caps the score. The result
    is clamped to the rule book's score range.
    """

    rules: RuleBook
    color_analyzer: ColorAnalyzer
    debug: bool = False

    def score(
        self,
        food: FoodInfo,
        labels: Sequence[Label],
        colors: Sequence[ColorSample] = (),
    ) -> float:
        """Return a freshness score for the identified food."""
        food_name = food.name.lower()
        score, spoilage_found, freshness_found = self._apply_indicators(
            self.rules.neutral_score, labels
        )

        if not spoilage_found and not freshness_found:
            if food.category in self.rules.color_categories:
                analysis = self.color_analyzer.analyze(food_name, colors)
                score += analysis.adjustment
                if analysis.bad_color_detected:
                    score = min(score, self.rules.bad_color_ceiling)

        score = self._apply_food_rules(score, food_name, labels)

        adjustment, spoiled = self._spoilage_sweep(labels)
        score += adjustment
        if spoiled:
            score = min(score, self.rules.spoilage_ceiling)

        clamped = max(self.rules.min_score, min(self.rules.max_score, score))
        if self.debug:
            _logger.info(
                "Freshness scored: food=%s raw=%.3f clamped=%.3f "
                "spoilage_terms=%s freshness_terms=%s spoilage_sweep=%s",
                food.name,
                score,
                clamped,
                spoilage_found,
                freshness_found,
                spoiled,
            )
        return clamped

    def _apply_indicators(
        self, score: float, labels: Sequence[Label]
    ) -> tuple[float, bool, bool]:
        """Add weighted spoilage and freshness terms found in the labels."""
        spoilage_found = False
        freshness_found = False
        for label in labels:
            description = label.description.lower()
            for indicator in self.rules.spoilage_terms:
                if indicator.term in description:
                    score += indicator.weight * label.score
                    spoilage_found = True
            for indicator in self.rules.freshness_terms:
                if indicator.term in description:
                    score += indicator.weight * label.score
                    freshness_found = True
        return score, spoilage_found, freshness_found

    def _apply_food_rules(
        self, score: float, food_name: str, labels: Sequence[Label]
    ) -> float:
        rule = self.rules.food_rule_for(food_name)
        if rule is None:
            return score
        for label in labels:
            description = label.description.lower()
            for check in rule.label_checks:
                if check.applies_to(description, label.score):
                    score += check.weight
        return score

    def _spoilage_sweep(self, labels: Sequence[Label]) -> tuple[float, bool]:
        """Return the summed spoilage adjustment and whether any term hit."""
        weight = self.rules.spoilage_vocabulary_weight
        adjustment = 0.0
        spoiled = False
        for label in labels:
            description = label.description.lower()
            for term in self.rules.spoilage_vocabulary:
                if term in description:
                    adjustment += weight * label.score
                    spoiled = True
        return adjustment, spoiled
