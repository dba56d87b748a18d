"""Inference pipeline tying identification, scoring and expiry together."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from food_freshness.domain.inference import DebugView, InferenceResult
from food_freshness.domain.observations import (
    ColorSample,
    InvalidInputError,
    Label,
    Observations,
)
from food_freshness.services.expiry import ExpiryEstimator
from food_freshness.services.freshness import FreshnessScorer
from food_freshness.services.identifier import FoodIdentifier

_LABELS = TypeAdapter(tuple[Label, ...])
_COLORS = TypeAdapter(tuple[ColorSample, ...])

_logger = logging.getLogger(__name__)


@dataclass
class InferenceService:
    """Runs the identify, score and estimate stages for one observation set."""

    identifier: FoodIdentifier
    scorer: FreshnessScorer
    estimator: ExpiryEstimator
    debug_label_limit: int = 10
    dominant_color_count: int = 3
    debug: bool = False

    def analyze(
        self,
        labels: Sequence[Label],
        colors: Sequence[ColorSample] = (),
        text: str | None = None,
    ) -> InferenceResult:
        """Infer food identity, freshness and expiry from observations."""
        food = self.identifier.identify(labels, colors)
        freshness = self.scorer.score(food, labels, colors)
        expiry = self.estimator.estimate(food, freshness)
        if self.debug:
            _logger.info(
                "Inference: labels=%s colors=%s food=%s category=%s "
                "confidence=%.2f freshness=%.2f expiry=%s",
                len(labels),
                len(colors),
                food.name,
                food.category.value,
                food.confidence,
                freshness,
                expiry.describe(),
            )
        debug_view = DebugView(
            top_labels=tuple(labels[: self.debug_label_limit]),
            dominant_colors=tuple(colors[: self.dominant_color_count]),
            text_found=text,
        )
        return InferenceResult(
            food=food, freshness=freshness, expiry=expiry, debug=debug_view
        )

    def analyze_observations(self, observations: Observations) -> InferenceResult:
        """Infer from a validated observation set."""
        return self.analyze(
            observations.labels, observations.colors, observations.text
        )

    def analyze_payload(
        self,
        labels: Iterable[Mapping[str, object]],
        colors: Iterable[Mapping[str, object]] = (),
        text: str | None = None,
    ) -> InferenceResult:
        """Validate raw label and color mappings, then infer."""
        return self.analyze_observations(parse_observations(labels, colors, text))


def parse_observations(
    labels: Iterable[Mapping[str, object]],
    colors: Iterable[Mapping[str, object]] = (),
    text: str | None = None,
) -> Observations:
    """Validate raw mappings into observations.

    Raises:
        InvalidInputError: if any label or color is malformed or out of range.
    """
    try:
        parsed_labels = _LABELS.validate_python(tuple(labels))
        parsed_colors = _COLORS.validate_python(tuple(colors))
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid observations: {exc}") from exc
    return Observations(labels=parsed_labels, colors=parsed_colors, text=text)
