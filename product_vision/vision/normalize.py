"""
Vision response normalization.

Turns provider annotations into ``VisionSignals``. Inputs are read by
attribute (``description``/``name``, ``score``, ``text``, ``color.red``...),
the shape of Google Cloud Vision's response messages; missing or empty
annotations become empty fields, never errors.
"""

from typing import Any, Iterable, Optional

from product_vision.color_namer import rgb_to_hex
from product_vision.models import ColorSample, VisionSignals, VisionTerm

MAX_DOMINANT_COLORS = 5


def _terms(annotations: Optional[Iterable[Any]], attr: str, limit: Optional[int]) -> list[VisionTerm]:
    terms = []
    for annotation in annotations or ():
        term = (getattr(annotation, attr, "") or "").strip()
        if not term:
            continue
        terms.append(VisionTerm(term=term, score=getattr(annotation, "score", 0.0)))
    return terms[:limit] if limit else terms


def normalize_labels(annotations, limit: Optional[int] = None) -> list[VisionTerm]:
    """Label annotations (``description``, ``score``) in provider order."""
    return _terms(annotations, "description", limit)


def normalize_objects(annotations, limit: Optional[int] = None) -> list[VisionTerm]:
    """Localized object annotations (``name``, ``score``) in provider order."""
    return _terms(annotations, "name", limit)


def normalize_text(full_text_annotation) -> str:
    if full_text_annotation is None:
        return ""
    return getattr(full_text_annotation, "text", "") or ""


def normalize_colors(
    image_properties_annotation,
    max_dominant: int = MAX_DOMINANT_COLORS,
) -> tuple[list[str], list[ColorSample]]:
    """
    Dominant colors from an image properties annotation.

    Returns:
        (dominant hex colors sorted by score, at most ``max_dominant``;
        every color sample in provider order)
    """
    dominant = getattr(image_properties_annotation, "dominant_colors", None)
    colors = getattr(dominant, "colors", None) or ()

    samples = []
    for info in colors:
        color = getattr(info, "color", None)
        if color is None:
            continue
        rgb = (
            getattr(color, "red", 0) or 0,
            getattr(color, "green", 0) or 0,
            getattr(color, "blue", 0) or 0,
        )
        samples.append(ColorSample(rgb=rgb, score=getattr(info, "score", 0.0) or 0.0))

    ranked = sorted(samples, key=lambda s: s.score, reverse=True)
    dominant_hex = [rgb_to_hex(*s.rgb) for s in ranked[:max_dominant]]
    return dominant_hex, samples


def build_signals(
    label_annotations=None,
    object_annotations=None,
    full_text_annotation=None,
    image_properties_annotation=None,
    max_labels: Optional[int] = None,
    max_objects: Optional[int] = None,
    max_dominant_colors: int = MAX_DOMINANT_COLORS,
) -> VisionSignals:
    dominant_colors, color_samples = normalize_colors(
        image_properties_annotation, max_dominant_colors
    )
    return VisionSignals(
        labels=normalize_labels(label_annotations, max_labels),
        objects=normalize_objects(object_annotations, max_objects),
        text=normalize_text(full_text_annotation),
        dominant_colors=dominant_colors,
        color_samples=color_samples,
    )
