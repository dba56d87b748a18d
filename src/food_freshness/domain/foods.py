"""Food identity models."""

from dataclasses import dataclass
from enum import StrEnum


class FoodCategory(StrEnum):
    """Closed set of food categories."""

    FRUITS = "fruits"
    VEGETABLES = "vegetables"
    GRAINS = "grains"
    DAIRY = "dairy"
    PROTEINS = "proteins"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FoodInfo:
    """Best-guess identity of the pictured food."""

    name: str
    confidence: float
    category: FoodCategory


UNKNOWN_FOOD = FoodInfo(
    name="Unknown Food", confidence=0.0, category=FoodCategory.UNKNOWN
)
