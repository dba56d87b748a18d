"""Shared test fixtures."""

import pytest

from food_freshness.config import Settings
from food_freshness.domain.foods import FoodCategory, FoodInfo
from food_freshness.domain.observations import ColorSample, Label
from food_freshness.domain.rules import RuleBook
from food_freshness.services.colors import ColorAnalyzer
from food_freshness.services.expiry import ExpiryEstimator
from food_freshness.services.freshness import FreshnessScorer
from food_freshness.services.identifier import FoodIdentifier
from food_freshness.services.inference import InferenceService
from food_freshness.services.rules import load_rule_book


def label(description: str, score: float = 0.9) -> Label:
    """Build a label with a default high confidence."""
    return Label(description=description, score=score)


def color(
    red: float,
    green: float,
    blue: float,
    prominence: float = 0.5,
    pixel_fraction: float = 0.3,
) -> ColorSample:
    """Build a color sample from channel values."""
    return ColorSample(
        rgb=(red, green, blue), prominence=prominence, pixel_fraction=pixel_fraction
    )


def food(name: str, category: FoodCategory, confidence: float = 0.9) -> FoodInfo:
    return FoodInfo(name=name, confidence=confidence, category=category)


VISION_PAYLOAD: dict[str, object] = {
    "labelAnnotations": [
        {"description": "Banana", "score": 0.95},
        {"description": "Natural foods", "score": 0.88},
    ],
    "imagePropertiesAnnotation": {
        "dominantColors": {
            "colors": [
                {
                    "color": {"red": 90, "green": 60},
                    "score": 0.1,
                    "pixelFraction": 0.05,
                },
                {
                    "color": {"red": 230, "green": 200, "blue": 50},
                    "score": 0.8,
                    "pixelFraction": 0.6,
                },
            ]
        }
    },
    "textAnnotations": [{"description": "BEST BY 12/01\norganic"}],
}


@pytest.fixture
def rules() -> RuleBook:
    return load_rule_book()


@pytest.fixture
def identifier(rules: RuleBook) -> FoodIdentifier:
    return FoodIdentifier(rules)


@pytest.fixture
def color_analyzer(rules: RuleBook) -> ColorAnalyzer:
    return ColorAnalyzer(rules)


@pytest.fixture
def scorer(rules: RuleBook, color_analyzer: ColorAnalyzer) -> FreshnessScorer:
    return FreshnessScorer(rules=rules, color_analyzer=color_analyzer)


@pytest.fixture
def estimator(rules: RuleBook) -> ExpiryEstimator:
    return ExpiryEstimator(rules)


@pytest.fixture
def inference_service(
    identifier: FoodIdentifier,
    scorer: FreshnessScorer,
    estimator: ExpiryEstimator,
) -> InferenceService:
    return InferenceService(
        identifier=identifier,
        scorer=scorer,
        estimator=estimator,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        rules_path=None,
        debug=False,
        log_level="INFO",
        debug_label_limit=10,
        text_label_score=0.8,
        text_min_word_length=3,
        environment="test",
    )
