"""
Field Merge Policy

Decides, per output field, which stage's value is used.

This is the DECISION LAYER:
- stages propose values (generative, name-derived, OCR/vision, rule-based)
- each field lists its candidates in priority order
- ``first_present`` takes the first candidate that has a value, else a default

Precedence:
    name, description : generative  > rule-based
    brand             : from generated name > from OCR text
    color             : from generated name > from dominant colors

Overall confidence is the plain mean of the name, category and description
confidences.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar

from product_vision.ai.product_writer import GENERATIVE_CONFIDENCE
from product_vision.classifiers.brand import (
    classify_primary_color,
    extract_brand_from_name,
    extract_brand_from_text,
    extract_color_from_name,
)
from product_vision.models import GenerativeCandidate, VisionSignals
from product_vision.rule_writer import (
    DESCRIPTION_CONFIDENCE,
    generate_rule_name,
    generate_template_description,
    rule_name_confidence,
)

T = TypeVar("T")

SOURCE_GENERATIVE = "generative"
SOURCE_GENERATED_NAME = "generated_name"
SOURCE_RULES = "rules"
SOURCE_OCR = "ocr"
SOURCE_VISION = "vision"
SOURCE_NONE = "none"


@dataclass(frozen=True)
class FieldCandidate(Generic[T]):
    """A proposed value for one field, with where it came from."""

    value: Optional[T]
    confidence: float = 0.0
    source: str = SOURCE_NONE

    @property
    def is_present(self) -> bool:
        if self.value is None:
            return False
        if isinstance(self.value, str):
            return bool(self.value.strip())
        return True


MISSING = FieldCandidate(None)


def first_present(
    candidates: Iterable[FieldCandidate[T]],
    default: FieldCandidate[T] = MISSING,
) -> FieldCandidate[T]:
    """First candidate holding a value, else ``default``."""
    for candidate in candidates:
        if candidate.is_present:
            return candidate
    return default


def overall_confidence(name: float, category: float, description: float) -> float:
    return (name + category + description) / 3


@dataclass(frozen=True)
class MergedFields:
    """Winning candidate per merged field."""

    name: FieldCandidate[str]
    description: FieldCandidate[str]
    brand: FieldCandidate[str]
    color: FieldCandidate[str]


def merge_fields(signals: VisionSignals, generative: GenerativeCandidate) -> MergedFields:
    """Apply the precedence rules to the generative candidate and vision signals."""
    name = first_present(
        [FieldCandidate(generative.name, GENERATIVE_CONFIDENCE, SOURCE_GENERATIVE)],
        default=FieldCandidate(
            generate_rule_name(signals), rule_name_confidence(signals), SOURCE_RULES
        ),
    )

    description = first_present(
        [FieldCandidate(generative.description, GENERATIVE_CONFIDENCE, SOURCE_GENERATIVE)],
        default=FieldCandidate(
            generate_template_description(signals), DESCRIPTION_CONFIDENCE, SOURCE_RULES
        ),
    )

    ocr_brand = extract_brand_from_text(signals.text)
    brand = first_present(
        [
            FieldCandidate(
                extract_brand_from_name(generative.name),
                GENERATIVE_CONFIDENCE,
                SOURCE_GENERATED_NAME,
            ),
            FieldCandidate(ocr_brand.value, ocr_brand.confidence, SOURCE_OCR),
        ]
    )

    vision_color = classify_primary_color(signals)
    color = first_present(
        [
            FieldCandidate(
                extract_color_from_name(generative.name),
                GENERATIVE_CONFIDENCE,
                SOURCE_GENERATED_NAME,
            ),
            FieldCandidate(vision_color.value, vision_color.confidence, SOURCE_VISION),
        ]
    )

    return MergedFields(name=name, description=description, brand=brand, color=color)
