"""
Typed data model for the attribute inference pipeline.

Every stage hands typed models to the next one instead of loose dicts:
vision output is normalized into ``VisionSignals`` once, the rule engines
return ``ClassificationResult`` objects, and the pipeline assembles a
frozen ``AnalysisResult`` for the caller.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Generative output bounds
NAME_MAX_LENGTH = 150
DESCRIPTION_MIN_LENGTH = 50


# =============================================================================
# VISION SIGNALS
# =============================================================================


class VisionTerm(BaseModel):
    """A label or localized object with its detection score."""

    model_config = ConfigDict(frozen=True)

    term: str
    score: float = 0.0

    @field_validator("term")
    @classmethod
    def clean_term(cls, v: str) -> str:
        return (v or "").strip()

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, v) -> float:
        try:
            score = float(v or 0.0)
        except (TypeError, ValueError):
            return 0.0
        return max(0.0, min(1.0, score))


class ColorSample(BaseModel):
    """A dominant color region as reported by the vision provider."""

    model_config = ConfigDict(frozen=True)

    rgb: tuple[int, int, int]
    score: float = 0.0

    @field_validator("rgb", mode="before")
    @classmethod
    def clamp_channels(cls, v) -> tuple[int, int, int]:
        r, g, b = (max(0, min(255, round(float(c or 0)))) for c in v)
        return (r, g, b)


class VisionSignals(BaseModel):
    """Normalized output of the vision stage, produced once per image."""

    model_config = ConfigDict(frozen=True)

    labels: list[VisionTerm] = Field(default_factory=list)
    objects: list[VisionTerm] = Field(default_factory=list)
    text: str = ""
    dominant_colors: list[str] = Field(default_factory=list)
    color_samples: list[ColorSample] = Field(default_factory=list)

    @field_validator("text", mode="before")
    @classmethod
    def clean_text(cls, v: Optional[str]) -> str:
        return v or ""

    def all_terms(self) -> list[str]:
        """Lower-cased label terms followed by object terms."""
        return [label.term.lower() for label in self.labels] + [
            obj.term.lower() for obj in self.objects
        ]

    @property
    def is_empty(self) -> bool:
        return not (
            self.labels
            or self.objects
            or self.text.strip()
            or self.dominant_colors
            or self.color_samples
        )


# =============================================================================
# CATALOG
# =============================================================================


class CategoryCandidate(BaseModel):
    """A store category supplied by the catalog system."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slug: str
    # Optional data-driven keywords; takes precedence over the static slug table
    keywords: Optional[list[str]] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v) -> str:
        return str(v)

    @field_validator("slug")
    @classmethod
    def clean_slug(cls, v: str) -> str:
        return (v or "").strip().lower()


class CategoryMatch(BaseModel):
    """Outcome of the category matcher."""

    category: Optional[CategoryCandidate] = None
    confidence: float = 0.0
    alternatives: list[CategoryCandidate] = Field(default_factory=list)
    # Normalized score per category id, only for categories scoring above zero
    scores: dict[str, float] = Field(default_factory=dict)
    # Slugs with no keyword source at all (neither data-driven nor static)
    unmapped_slugs: list[str] = Field(default_factory=list)


# =============================================================================
# RULE ENGINE OUTPUT
# =============================================================================


class ClassificationResult(BaseModel, Generic[T]):
    """Outcome of a rule engine: value, confidence and runner-up values."""

    model_config = ConfigDict(frozen=True)

    value: Optional[T] = None
    confidence: float = 0.0
    alternatives: list[T] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_confidence(self):
        if (self.value is None) != (self.confidence == 0):
            raise ValueError("confidence must be 0 exactly when value is None")
        return self

    @classmethod
    def none(cls) -> "ClassificationResult":
        return cls()


class MainItem(BaseModel):
    """The single product the image most likely depicts."""

    model_config = ConfigDict(frozen=True)

    item: str
    score: float
    group: str  # clothing | shoes | accessories | perfumes


# =============================================================================
# GENERATIVE STAGE
# =============================================================================


class GenerativeCandidate(BaseModel):
    """Raw name/description from the generative stage after validation.

    Out-of-bounds fields are nulled independently of each other.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v) -> Optional[str]:
        if not isinstance(v, str):
            return None
        v = v.strip()
        if not v or len(v) > NAME_MAX_LENGTH:
            return None
        return v

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v) -> Optional[str]:
        if not isinstance(v, str):
            return None
        v = v.strip()
        if len(v) < DESCRIPTION_MIN_LENGTH:
            return None
        return v

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.description is None


# =============================================================================
# FINAL RESULT
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SuggestedCategory(_CamelModel):
    id: str
    name: str
    confidence: float


class CategoryRef(_CamelModel):
    id: str
    name: str


class ConfidenceBreakdown(_CamelModel):
    overall: float
    name: float
    category: float
    description: float


class AnalysisResult(_CamelModel):
    """Structured product metadata returned to the admin tooling for review."""

    name: str
    description: str
    suggested_category: Optional[SuggestedCategory] = None
    alternatives: list[CategoryRef] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    style: Optional[str] = None
    material: Optional[str] = None
    brand: Optional[str] = None
    color: Optional[str] = None
    gender: Optional[str] = None
    confidence: ConfidenceBreakdown

    def to_dict(self) -> dict:
        """JSON-ready dict using the camelCase keys the admin UI expects."""
        return self.model_dump(by_alias=True, mode="json")
