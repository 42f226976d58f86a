"""
Brand and color extraction from text.

Two sources feed these fields:

- the OCR text found on the product (labels, tags, printed logos)
- an already-generated product name, e.g. "Toga Virilis Strap-Detail Clogs"

The name-derived values win when both exist; that precedence lives in the
pipeline's merge policy, these helpers only extract.
"""

import re
from typing import Optional, Sequence

from product_vision.classifiers.vocabulary import (
    BACKGROUND_COLORS,
    DARK_FASHION_COLORS,
    MATERIAL_GROUPS,
    NAME_COLOR_WORDS,
    NON_BRAND_WORDS,
)
from product_vision.color_namer import hex_colors_to_names
from product_vision.models import ClassificationResult, VisionSignals

_ACRONYM_RE = re.compile(r"^[A-Z]{1,2}$")

# Confidence for OCR brands: a repeated two-word span is a much stronger signal
REPEATED_PAIR_CONFIDENCE = 0.8
SINGLE_TOKEN_CONFIDENCE = 0.5
PRIMARY_COLOR_CONFIDENCE = 0.7

# Number of dominant colors considered for the primary color
PRIMARY_COLOR_CANDIDATES = 3

# Leading words of a generated name that describe the product, not the brand
NAME_DESCRIPTOR_WORDS = frozenset(
    word for phrase in NAME_COLOR_WORDS for word in phrase.split()
) | frozenset(
    word for keywords, _ in MATERIAL_GROUPS for keyword in keywords for word in keyword.split()
)


# =============================================================================
# BRAND FROM OCR TEXT
# =============================================================================


def brand_candidate_tokens(text: str) -> list[str]:
    """
    Capitalized OCR tokens that could be part of a brand.

    Drops short tokens, one/two letter acronyms ("XL", "US") and the
    deny-list of origin marks and place names ("MADE", "IN", "ITALY", ...).
    """
    return [
        word
        for word in text.split()
        if len(word) > 2
        and word[0].isupper()
        and not _ACRONYM_RE.match(word)
        and word.upper() not in NON_BRAND_WORDS
    ]


def extract_brand_from_text(text: Optional[str]) -> ClassificationResult[str]:
    """
    Guess the brand from raw OCR text.

    A pair of adjacent candidate tokens that occurs more than once in the
    text (case-insensitive) wins; otherwise the first candidate token.
    """
    if not text or not text.strip():
        return ClassificationResult[str].none()

    tokens = brand_candidate_tokens(text)
    if not tokens:
        return ClassificationResult[str].none()

    for first, second in zip(tokens, tokens[1:]):
        pair = f"{first} {second}"
        occurrences = len(re.findall(re.escape(pair), text, flags=re.IGNORECASE))
        if occurrences > 1:
            return ClassificationResult[str](
                value=pair,
                confidence=REPEATED_PAIR_CONFIDENCE,
                alternatives=[t for t in tokens[:3] if t not in (first, second)],
            )

    return ClassificationResult[str](
        value=tokens[0],
        confidence=SINGLE_TOKEN_CONFIDENCE,
        alternatives=tokens[1:3],
    )


# =============================================================================
# BRAND / COLOR FROM A GENERATED NAME
# =============================================================================


def extract_brand_from_name(name: Optional[str]) -> Optional[str]:
    """
    Up to two leading capitalized words longer than two characters.

    Color and material words end the brand, so "Black Suede Buckle Mules"
    has no brand while "Toga Virilis Strap-Detail Clogs" gives "Toga Virilis".
    """
    if not name:
        return None

    brand_words = []
    for word in name.split()[:2]:
        if word.lower().strip(",.") in NAME_DESCRIPTOR_WORDS:
            break
        if len(word) > 2 and word[0].isupper():
            brand_words.append(word)
        else:
            break

    return " ".join(brand_words) if brand_words else None


def extract_color_from_name(name: Optional[str]) -> Optional[str]:
    """First known color word in the name (whole words only), title-cased."""
    if not name:
        return None

    lowered = name.lower()
    for color in NAME_COLOR_WORDS:
        if re.search(rf"\b{re.escape(color)}\b", lowered):
            return color.title()
    return None


# =============================================================================
# PRIMARY COLOR FROM VISION
# =============================================================================


def primary_color_from_vision(dominant_colors: Sequence[str]) -> Optional[str]:
    """
    Pick the product color among the first few dominant colors.

    Light colors that are usually the photo backdrop are set aside, and
    among the rest a dark fashion color is preferred. If everything looks
    like background the first named color is used anyway.
    """
    names = hex_colors_to_names(dominant_colors[:PRIMARY_COLOR_CANDIDATES])
    if not names:
        return None

    foreground = [n for n in names if n not in BACKGROUND_COLORS]
    if not foreground:
        return names[0]

    for name in foreground:
        if any(dark in name for dark in DARK_FASHION_COLORS):
            return name
    return foreground[0]


def classify_primary_color(signals: VisionSignals) -> ClassificationResult[str]:
    color = primary_color_from_vision(signals.dominant_colors)
    if color is None:
        return ClassificationResult[str].none()
    names = hex_colors_to_names(signals.dominant_colors[:PRIMARY_COLOR_CANDIDATES])
    return ClassificationResult[str](
        value=color,
        confidence=PRIMARY_COLOR_CONFIDENCE,
        alternatives=[n for n in dict.fromkeys(names) if n != color],
    )
