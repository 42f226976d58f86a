"""Tests for model validation rules."""

import pytest
from pydantic import ValidationError

from product_vision.models import (
    AnalysisResult,
    CategoryCandidate,
    ClassificationResult,
    ConfidenceBreakdown,
    GenerativeCandidate,
    VisionTerm,
)


def test_classification_result_confidence_tracks_value() -> None:
    assert ClassificationResult[str].none().confidence == 0.0

    with pytest.raises(ValidationError):
        ClassificationResult[str](value=None, confidence=0.4)
    with pytest.raises(ValidationError):
        ClassificationResult[str](value="Leather", confidence=0.0)


def test_generative_bounds() -> None:
    assert GenerativeCandidate(name="n" * 150).name == "n" * 150
    assert GenerativeCandidate(name="n" * 151).name is None
    assert GenerativeCandidate(description="d" * 50).description == "d" * 50
    assert GenerativeCandidate(description="d" * 49).description is None
    assert GenerativeCandidate(name=42).is_empty


def test_term_score_is_clamped() -> None:
    assert VisionTerm(term=" Shoe ", score=1.7) == VisionTerm(term="Shoe", score=1.0)
    assert VisionTerm(term="Shoe", score="n/a").score == 0.0


def test_category_id_and_slug_are_normalized() -> None:
    category = CategoryCandidate(id=3, name="Shoes", slug=" Shoes ")

    assert category.id == "3"
    assert category.slug == "shoes"


def test_result_to_dict_uses_camel_case() -> None:
    result = AnalysisResult(
        name="Black Shoe",
        description="This Shoe.",
        confidence=ConfidenceBreakdown(overall=0.5, name=0.7, category=0.0, description=0.75),
    )

    data = result.to_dict()

    assert data["suggestedCategory"] is None
    assert data["alternatives"] == []
    assert data["confidence"]["description"] == 0.75
