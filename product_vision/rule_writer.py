"""
Rule-Based Name/Description Writer

Deterministic fallback used whenever the generative stage is off, fails,
or had a field discarded by validation.

Name:        "[Color] [Material] <Product type>"   e.g. "Black Leather Boots"
Description: one long sentence assembled from clauses, plus a fixed
             closing sentence.
"""

from typing import Optional

from product_vision.classifiers.attributes import classify_material
from product_vision.classifiers.main_item import (
    PLACEHOLDER_ITEM,
    extract_product_type,
    identify_main_item,
    is_non_fashion,
)
from product_vision.classifiers.vocabulary import (
    DESCRIPTION_MATERIAL_KEYWORDS,
    STYLE_KEYWORDS,
)
from product_vision.color_namer import (
    UNKNOWN_COLOR,
    hex_colors_to_names,
    hex_to_color_name,
    rgb_to_color_name,
)
from product_vision.models import VisionSignals

HIGH_CONFIDENCE = 0.7

# Confidence of rule-based output
DEFAULT_NAME_CONFIDENCE = 0.7
MAX_NAME_CONFIDENCE = 0.95
NO_LABEL_NAME_CONFIDENCE = 0.6
DESCRIPTION_CONFIDENCE = 0.75

MAX_FASHION_LABELS = 8
MAX_STYLES = 2
MAX_EXTRA_MATERIALS = 1
MAX_COLORS = 3
MAX_OBJECTS = 3

CLOSING_SENTENCE = (
    "This product combines style and functionality, designed to enhance your "
    "wardrobe with its distinctive features and quality construction."
)


def _title(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def _mentions(label: str, keywords) -> bool:
    lowered = label.lower()
    return any(keyword in lowered for keyword in keywords)


# =============================================================================
# NAME
# =============================================================================


def name_color(signals: VisionSignals) -> Optional[str]:
    """Color name of the most dominant color, or of the first color sample."""
    if signals.dominant_colors:
        name = hex_to_color_name(signals.dominant_colors[0])
    elif signals.color_samples:
        name = rgb_to_color_name(*signals.color_samples[0].rgb)
    else:
        return None
    return None if name == UNKNOWN_COLOR else name


def generate_rule_name(signals: VisionSignals) -> str:
    parts = []

    color = name_color(signals)
    if color:
        parts.append(color)

    material = classify_material(signals).value
    if material:
        parts.append(material)

    parts.append(extract_product_type(signals))

    return _title(" ".join(parts))


def rule_name_confidence(signals: VisionSignals) -> float:
    """Score of the top label capped at 0.95; 0.6 when there are no labels."""
    if not signals.labels:
        return NO_LABEL_NAME_CONFIDENCE
    return min(signals.labels[0].score or DEFAULT_NAME_CONFIDENCE, MAX_NAME_CONFIDENCE)


# =============================================================================
# DESCRIPTION
# =============================================================================


def high_confidence_labels(signals: VisionSignals) -> list[str]:
    """Confident labels with logos, text and backdrops filtered out."""
    return [
        l.term
        for l in signals.labels
        if l.score > HIGH_CONFIDENCE and not is_non_fashion(l.term)
    ][:MAX_FASHION_LABELS]


def generate_template_description(signals: VisionSignals) -> str:
    main_item = identify_main_item(signals)
    labels = high_confidence_labels(signals)

    product_type = main_item.item if main_item else PLACEHOLDER_ITEM
    parts = [f"This {product_type}"]

    styles = [
        l.term
        for l in signals.labels
        if not is_non_fashion(l.term) and _mentions(l.term, STYLE_KEYWORDS)
    ][:MAX_STYLES]
    if styles:
        parts.append(f"features a {' and '.join(styles)} style")

    materials = []
    material = classify_material(signals).value
    if material:
        materials.append(material)
    extra = [
        l.term
        for l in signals.labels
        if not is_non_fashion(l.term)
        and _mentions(l.term, DESCRIPTION_MATERIAL_KEYWORDS)
        and l.term.lower() not in (m.lower() for m in materials)
    ]
    materials.extend(extra[:MAX_EXTRA_MATERIALS])

    if materials:
        parts.append(f"crafted from {' and '.join(materials)}")
    elif len(labels) > 1:
        parts.append("made with quality materials")

    colors = hex_colors_to_names(signals.dominant_colors[:MAX_COLORS])
    if colors:
        plural = "s" if len(colors) > 1 else ""
        parts.append(f"featuring {', '.join(colors)} color{plural}")

    objects = [
        o.term
        for o in signals.objects
        if o.score > HIGH_CONFIDENCE and not is_non_fashion(o.term)
    ][:MAX_OBJECTS]
    if objects:
        parts.append(f"with {', '.join(objects)} details")

    showcased = [
        label
        for label in labels[1:4]
        if not _mentions(label, STYLE_KEYWORDS)
        and not _mentions(label, DESCRIPTION_MATERIAL_KEYWORDS)
    ]
    if showcased:
        parts.append(f"showcasing {', '.join(showcased)}")

    text = " ".join(signals.text.split())
    if text:
        parts.append(f'with "{text}" text/logo')

    return ", ".join(parts) + ". " + CLOSING_SENTENCE
