"""Declarative rule book models for identification, scoring and expiry."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from food_freshness.domain.foods import FoodCategory
from food_freshness.domain.observations import ColorSample


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class WeightedTerm(_FrozenModel):
    """Term matched as a substring of a label, with its signed weight."""

    term: str
    weight: float


class ChannelRange(_FrozenModel):
    """Open interval on a single color channel; missing bounds are unbounded."""

    above: float | None = None
    below: float | None = None

    def contains(self, value: float) -> bool:
        if self.above is not None and not value > self.above:
            return False
        return self.below is None or value < self.below


class ColorMatch(_FrozenModel):
    """Box in RGB space described by one range per channel."""

    red: ChannelRange = ChannelRange()
    green: ChannelRange = ChannelRange()
    blue: ChannelRange = ChannelRange()

    def matches(self, sample: ColorSample) -> bool:
        return (
            self.red.contains(sample.red)
            and self.green.contains(sample.green)
            and self.blue.contains(sample.blue)
        )


class ColorCheck(_FrozenModel):
    """Color test applied to each dominant color of a food.

    With ``prominence`` basis every matching color adds ``weight`` scaled by
    its prominence. With ``pixel_fraction`` basis matching colors accumulate
    their pixel fraction and ``weight`` is added once if the total exceeds
    ``threshold``.
    """

    any_of: tuple[ColorMatch, ...]
    weight: float
    basis: Literal["prominence", "pixel_fraction"] = "prominence"
    threshold: float = 0.0
    marks_bad: bool = False

    def matches(self, sample: ColorSample) -> bool:
        return any(match.matches(sample) for match in self.any_of)


class LabelCheck(_FrozenModel):
    """Flat adjustment for a label mentioning any of ``terms``."""

    terms: tuple[str, ...]
    weight: float
    min_score: float

    def applies_to(self, description: str, score: float) -> bool:
        if not score > self.min_score:
            return False
        return any(term in description for term in self.terms)


class FoodRule(_FrozenModel):
    """Color and label checks for foods whose name contains ``food``."""

    food: str
    color_checks: tuple[ColorCheck, ...] = ()
    label_checks: tuple[LabelCheck, ...] = ()


class FoodExpiry(_FrozenModel):
    """Shelf life in days for foods whose name contains ``food``."""

    food: str
    days: int = Field(ge=0)


class RuleBook(_FrozenModel):
    """All static tables used by the inference pipeline."""

    taxonomy: Mapping[FoodCategory, tuple[str, ...]]
    generic_food_terms: tuple[str, ...]
    exact_match_min_score: float = 0.7
    substring_match_min_score: float = 0.65
    generic_match_min_score: float = 0.6

    neutral_score: float = 0.5
    min_score: float = 0.1
    max_score: float = 1.0
    spoilage_terms: tuple[WeightedTerm, ...]
    freshness_terms: tuple[WeightedTerm, ...]
    color_categories: tuple[FoodCategory, ...] = (
        FoodCategory.FRUITS,
        FoodCategory.VEGETABLES,
    )
    dominant_color_count: int = Field(default=3, ge=0)
    bad_color_ceiling: float = 0.3
    food_rules: tuple[FoodRule, ...] = ()
    spoilage_vocabulary: tuple[str, ...]
    spoilage_vocabulary_weight: float = -0.3
    spoilage_ceiling: float = 0.3

    category_expiry_days: Mapping[FoodCategory, int]
    default_expiry_days: int = Field(default=4, ge=0)
    food_expiry_days: tuple[FoodExpiry, ...] = ()

    @field_validator("taxonomy", "category_expiry_days")
    @classmethod
    def _read_only(
        cls, value: Mapping[FoodCategory, object]
    ) -> Mapping[FoodCategory, object]:
        return MappingProxyType(dict(value))

    def food_rule_for(self, food_name: str) -> FoodRule | None:
        """Return the first food rule matching a lower-cased food name."""
        for rule in self.food_rules:
            if rule.food in food_name:
                return rule
        return None
