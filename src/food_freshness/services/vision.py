"""Conversion of vision annotations into inference observations."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from food_freshness.domain.observations import (
    ColorSample,
    InvalidInputError,
    Label,
    Observations,
)
from food_freshness.domain.vision import VisionAnnotation, VisionColorInfo

_logger = logging.getLogger(__name__)


@dataclass
class VisionAnnotationService:
    """Turns an image annotation response into labels and colors.

    OCR words are appended after the label annotations with a fixed score,
    so printed text such as "expired" reaches the freshness rules.
    """

    text_label_score: float = 0.8
    text_min_word_length: int = 3
    debug: bool = False

    def to_observations(self, payload: Mapping[str, object]) -> Observations:
        """Validate a raw annotation payload and extract observations."""
        try:
            annotation = VisionAnnotation.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid vision annotation: {exc}") from exc
        return self.extract(annotation)

    def extract(self, annotation: VisionAnnotation) -> Observations:
        """Extract observations from a parsed annotation."""
        labels = [
            Label(description=item.description, score=item.score)
            for item in annotation.label_annotations
        ]
        text = _full_text(annotation)
        if text:
            labels.extend(
                Label(description=word, score=self.text_label_score)
                for word in text.split()
                if len(word) >= self.text_min_word_length
            )

        colors = sorted(
            (_to_sample(info) for info in _dominant_colors(annotation)),
            key=lambda sample: sample.prominence,
            reverse=True,
        )
        if self.debug:
            _logger.info(
                "Vision extract: labels=%s text_words=%s colors=%s",
                len(annotation.label_annotations),
                len(labels) - len(annotation.label_annotations),
                len(colors),
            )
        return Observations(labels=tuple(labels), colors=tuple(colors), text=text)


def _full_text(annotation: VisionAnnotation) -> str | None:
    if not annotation.text_annotations:
        return None
    return annotation.text_annotations[0].description


def _dominant_colors(annotation: VisionAnnotation) -> list[VisionColorInfo]:
    properties = annotation.image_properties_annotation
    if properties is None:
        return []
    return properties.dominant_colors.colors


def _to_sample(info: VisionColorInfo) -> ColorSample:
    return ColorSample(
        rgb=(info.color.red, info.color.green, info.color.blue),
        prominence=info.score,
        pixel_fraction=info.pixel_fraction,
    )
