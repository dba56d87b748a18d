"""Models for observations produced by the vision step."""

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Channel = Annotated[float, Field(ge=0.0, le=255.0)]


class InvalidInputError(ValueError):
    """Raised when observations fall outside their documented ranges."""


class Label(BaseModel):
    """Described, confidence-scored observation about image content."""

    model_config = ConfigDict(frozen=True)

    description: str
    score: float = Field(ge=0.0, le=1.0)


class ColorSample(BaseModel):
    """Dominant color with its relative weight and area share."""

    model_config = ConfigDict(frozen=True)

    rgb: tuple[Channel, Channel, Channel]
    prominence: float = Field(ge=0.0, le=1.0)
    pixel_fraction: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def red(self) -> float:
        return self.rgb[0]

    @property
    def green(self) -> float:
        return self.rgb[1]

    @property
    def blue(self) -> float:
        return self.rgb[2]


@dataclass(frozen=True)
class Observations:
    """Validated input for a single inference call."""

    labels: tuple[Label, ...]
    colors: tuple[ColorSample, ...]
    text: str | None = None
