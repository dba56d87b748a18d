"""Color heuristics for produce freshness."""

from collections.abc import Sequence
from dataclasses import dataclass

from food_freshness.domain.observations import ColorSample
from food_freshness.domain.rules import RuleBook


@dataclass(frozen=True)
class ColorAnalysis:
    """Freshness adjustment derived from dominant colors."""

    adjustment: float = 0.0
    bad_color_detected: bool = False


@dataclass
class ColorAnalyzer:
    """Checks dominant colors against food-specific color expectations."""

    rules: RuleBook

    def analyze(self, food_name: str, colors: Sequence[ColorSample]) -> ColorAnalysis:
        """Inspect the dominant colors for a food; foods without rules score 0."""
        rule = self.rules.food_rule_for(food_name.lower())
        if rule is None or not rule.color_checks:
            return ColorAnalysis()

        adjustment = 0.0
        bad_color = False
        fractions = [0.0] * len(rule.color_checks)
        for sample in colors[: self.rules.dominant_color_count]:
            for index, check in enumerate(rule.color_checks):
                if not check.matches(sample):
                    continue
                if check.basis == "pixel_fraction":
                    fractions[index] += sample.pixel_fraction
                    continue
                adjustment += check.weight * sample.prominence
                bad_color = bad_color or check.marks_bad

        for check, fraction in zip(rule.color_checks, fractions, strict=True):
            if check.basis == "pixel_fraction" and fraction > check.threshold:
                adjustment += check.weight
                bad_color = bad_color or check.marks_bad

        return ColorAnalysis(adjustment=adjustment, bad_color_detected=bad_color)
