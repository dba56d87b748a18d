"""Models for Google Vision image annotation responses."""

from pydantic import BaseModel, ConfigDict, Field


class _VisionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class VisionLabel(_VisionModel):
    """Single label annotation."""

    description: str = ""
    score: float = Field(default=0.0, ge=0.0, le=1.0)


class VisionColor(_VisionModel):
    """RGB channels; Vision omits channels that are zero."""

    red: float = Field(default=0.0, ge=0.0, le=255.0)
    green: float = Field(default=0.0, ge=0.0, le=255.0)
    blue: float = Field(default=0.0, ge=0.0, le=255.0)


class VisionColorInfo(_VisionModel):
    """Dominant color with its score and pixel fraction."""

    color: VisionColor = Field(default_factory=VisionColor)
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    pixel_fraction: float = Field(
        default=0.0, ge=0.0, le=1.0, alias="pixelFraction"
    )


class VisionDominantColors(_VisionModel):
    colors: list[VisionColorInfo] = Field(default_factory=list)


class VisionImageProperties(_VisionModel):
    dominant_colors: VisionDominantColors = Field(
        default_factory=VisionDominantColors, alias="dominantColors"
    )


class VisionTextAnnotation(_VisionModel):
    """OCR text block; the first annotation holds the full text."""

    description: str = ""


class VisionAnnotation(_VisionModel):
    """Subset of an ``annotateImage`` response used for inference."""

    label_annotations: list[VisionLabel] = Field(
        default_factory=list, alias="labelAnnotations"
    )
    image_properties_annotation: VisionImageProperties | None = Field(
        default=None, alias="imagePropertiesAnnotation"
    )
    text_annotations: list[VisionTextAnnotation] = Field(
        default_factory=list, alias="textAnnotations"
    )
