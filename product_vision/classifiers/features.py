"""
Free-form product features for the result's ``features`` list.

Example output: ["Black", "White", "Casual", "Striped", "Cotton", "Pocket"]
"""

from product_vision.classifiers.vocabulary import (
    DETAIL_KEYWORDS,
    FEATURE_MATERIAL_KEYWORDS,
    FEATURE_STYLE_KEYWORDS,
    PATTERN_KEYWORDS,
)
from product_vision.color_namer import UNKNOWN_COLOR, rgb_to_color_name
from product_vision.models import VisionSignals

MAX_FEATURES = 10
FEATURE_COLOR_SAMPLES = 3


def _title(keyword: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in keyword.split())


def extract_features(signals: VisionSignals) -> list[str]:
    """
    Up to ten features, in this order:

    1. names of the first three color samples
    2. style keywords
    3. pattern keywords
    4. material keywords
    5. construction details (buttons, zippers, pockets, ...)

    Keywords are matched by substring against labels and objects.
    Duplicates are dropped keeping the first occurrence.
    """
    features: list[str] = []

    for sample in signals.color_samples[:FEATURE_COLOR_SAMPLES]:
        name = rgb_to_color_name(*sample.rgb)
        if name != UNKNOWN_COLOR:
            features.append(name)

    terms = signals.all_terms()
    for table in (
        FEATURE_STYLE_KEYWORDS,
        PATTERN_KEYWORDS,
        FEATURE_MATERIAL_KEYWORDS,
        DETAIL_KEYWORDS,
    ):
        for term in terms:
            for keyword in table:
                if keyword in term:
                    features.append(_title(keyword))

    return list(dict.fromkeys(features))[:MAX_FEATURES]
