"""
Style, material and gender classifiers.

Each one is a fixed ordered keyword table run through the shared rule
engine against labels then objects. All are pure functions of the vision
signals.
"""

from product_vision.classifiers.rules import (
    KeywordGroup,
    build_groups,
    classify_first_match,
    signal_terms,
)
from product_vision.classifiers.vocabulary import (
    GENDER_KEYWORDS,
    MATERIAL_GROUPS,
    STYLE_GROUPS,
)
from product_vision.models import ClassificationResult, VisionSignals

MATERIAL_RULES = build_groups(MATERIAL_GROUPS)
STYLE_RULES = build_groups(STYLE_GROUPS)
GENDER_RULES = tuple(
    KeywordGroup(tuple(keywords), gender, whole_word=True)
    for gender, keywords in GENDER_KEYWORDS
)


def classify_material(signals: VisionSignals) -> ClassificationResult[str]:
    """Canonical material name, e.g. ``"Faux Leather"``; empty when none is seen."""
    return classify_first_match(signal_terms(signals), MATERIAL_RULES)


def classify_style(signals: VisionSignals) -> ClassificationResult[str]:
    return classify_first_match(signal_terms(signals), STYLE_RULES)


def classify_gender(signals: VisionSignals) -> ClassificationResult[str]:
    """``"women"``, ``"men"`` or ``"unisex"``."""
    return classify_first_match(signal_terms(signals), GENDER_RULES)
