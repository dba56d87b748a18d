"""Rule book loading."""

import logging
from pathlib import Path

from food_freshness.domain.rules import RuleBook
from food_freshness.rule_tables import default_rules

_logger = logging.getLogger(__name__)


def load_rule_book(path: Path | None = None) -> RuleBook:
    """Load the rule book from a JSON file, or the built-in tables."""
    if path is None:
        return RuleBook.model_validate(default_rules())
    rules = RuleBook.model_validate_json(path.read_text(encoding="utf-8"))
    _logger.info(
        "Loaded rule book: path=%s food_rules=%s expiry_overrides=%s",
        path,
        len(rules.food_rules),
        len(rules.food_expiry_days),
    )
    return rules
