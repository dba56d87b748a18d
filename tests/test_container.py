"""Tests for container wiring."""

import json
import logging
from pathlib import Path

import pytest

from food_freshness.config import Settings
from food_freshness.containers import build_container
from food_freshness.rule_tables import default_rules
from tests.conftest import label


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.inference_service is not None
    assert container.vision_service.text_label_score == 0.8
    assert container.freshness_scorer.rules is container.rules
    assert container.expiry_estimator.rules is container.rules


def test_build_container_loads_rules_file(settings: Settings, tmp_path: Path) -> None:
    data = default_rules()
    data["default_expiry_days"] = 10
    data["category_expiry_days"] = {}
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    settings.rules_path = path

    container = build_container(settings)
    result = container.inference_service.analyze([], [])

    # 10 * 0.31 rounds to 3.
    assert result.expiry.days == 3


def test_debug_logs_inference(
    settings: Settings, caplog: pytest.LogCaptureFixture
) -> None:
    settings.debug = True
    container = build_container(settings)
    logger = logging.getLogger("food_freshness")
    logger.propagate = True
    try:
        with caplog.at_level(logging.INFO, logger="food_freshness"):
            container.inference_service.analyze([label("banana", 0.95)], [])
    finally:
        logger.propagate = False

    assert any("Inference:" in record.message for record in caplog.records)


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FOOD_FRESHNESS_DEBUG_LABEL_LIMIT", "4")
    monkeypatch.setenv("FOOD_FRESHNESS_TEXT_LABEL_SCORE", "0.7")

    settings = Settings()

    assert settings.debug_label_limit == 4
    assert settings.text_label_score == 0.7


def test_build_container_applies_log_level(settings: Settings) -> None:
    settings.log_level = "WARNING"
    logger = logging.getLogger("food_freshness")
    try:
        build_container(settings)
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(logging.INFO)
