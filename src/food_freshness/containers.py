"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from food_freshness.app_logging import configure_logging
from food_freshness.config import Settings
from food_freshness.domain.rules import RuleBook
from food_freshness.services.colors import ColorAnalyzer
from food_freshness.services.expiry import ExpiryEstimator
from food_freshness.services.freshness import FreshnessScorer
from food_freshness.services.identifier import FoodIdentifier
from food_freshness.services.inference import InferenceService
from food_freshness.services.rules import load_rule_book
from food_freshness.services.vision import VisionAnnotationService


@dataclass
class AppContainer:
    """Holds process-wide, read-only engine dependencies."""

    settings: Settings
    rules: RuleBook
    food_identifier: FoodIdentifier
    color_analyzer: ColorAnalyzer
    freshness_scorer: FreshnessScorer
    expiry_estimator: ExpiryEstimator
    inference_service: InferenceService
    vision_service: VisionAnnotationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    rules = load_rule_book(resolved_settings.rules_path)
    food_identifier = FoodIdentifier(rules)
    color_analyzer = ColorAnalyzer(rules)
    freshness_scorer = FreshnessScorer(
        rules=rules,
        color_analyzer=color_analyzer,
        debug=resolved_settings.debug,
    )
    expiry_estimator = ExpiryEstimator(rules)
    inference_service = InferenceService(
        identifier=food_identifier,
        scorer=freshness_scorer,
        estimator=expiry_estimator,
        debug_label_limit=resolved_settings.debug_label_limit,
        dominant_color_count=rules.dominant_color_count,
        debug=resolved_settings.debug,
    )
    vision_service = VisionAnnotationService(
        text_label_score=resolved_settings.text_label_score,
        text_min_word_length=resolved_settings.text_min_word_length,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        rules=rules,
        food_identifier=food_identifier,
        color_analyzer=color_analyzer,
        freshness_scorer=freshness_scorer,
        expiry_estimator=expiry_estimator,
        inference_service=inference_service,
        vision_service=vision_service,
    )
