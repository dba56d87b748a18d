"""Inference result models."""

from dataclasses import dataclass

from food_freshness.domain.expiry import ExpiryEstimate
from food_freshness.domain.foods import FoodInfo
from food_freshness.domain.observations import ColorSample, Label

SUMMARY_LABEL_COUNT = 5


@dataclass(frozen=True)
class DebugView:
    """Projection of the input kept for troubleshooting."""

    top_labels: tuple[Label, ...]
    dominant_colors: tuple[ColorSample, ...]
    text_found: str | None = None


@dataclass(frozen=True)
class InferenceResult:
    """Identity, freshness and expiry for one set of observations."""

    food: FoodInfo
    freshness: float
    expiry: ExpiryEstimate
    debug: DebugView

    def summary(self) -> dict[str, object]:
        """Return a plain, rounded view suitable for callers to serialize."""
        return {
            "food_name": self.food.name,
            "category": self.food.category.value,
            "confidence": round(self.food.confidence, 2),
            "freshness_score": round(self.freshness, 2),
            "urgency": self.expiry.urgency.value,
            "days": self.expiry.days,
            "estimated_expiry": self.expiry.describe(),
            "top_labels": [
                {"description": label.description, "score": round(label.score, 2)}
                for label in self.debug.top_labels[:SUMMARY_LABEL_COUNT]
            ],
        }
