"""
Main-Item Identifier

Picks the single product a photo most likely shows. Product shots are
full of things that are not the product: the brand logo, printed text,
the table, the box. Those terms are dropped first, then every remaining
label/object that belongs to a fashion group competes on score.

Localized objects are boosted over whole-image labels because the
localizer has to find the thing inside the frame to report it.
"""

from typing import Iterator, Optional

from product_vision.classifiers.vocabulary import (
    FASHION_GROUP_KEYWORDS,
    NON_FASHION_KEYWORDS,
    PRODUCT_TYPES,
)
from product_vision.models import MainItem, VisionSignals

OBJECT_SCORE_BOOST = 1.2
MISSING_SCORE = 0.5
PLACEHOLDER_ITEM = "product"
PLACEHOLDER_PRODUCT_TYPE = "Product"


def is_non_fashion(term: str) -> bool:
    """True for logos, text, backgrounds, packaging and similar noise."""
    lowered = term.lower()
    return any(keyword in lowered for keyword in NON_FASHION_KEYWORDS)


def _related(term: str, keyword: str) -> bool:
    return keyword in term or term in keyword


def fashion_group(term: str) -> Optional[str]:
    """First fashion group ("clothing", "shoes", ...) whose keywords relate to the term."""
    lowered = term.lower()
    if not lowered:
        return None
    for group, keywords in FASHION_GROUP_KEYWORDS.items():
        if any(_related(lowered, keyword) for keyword in keywords):
            return group
    return None


def _scored_terms(signals: VisionSignals) -> Iterator[tuple[str, float]]:
    """Labels then objects, with missing scores defaulted and objects boosted."""
    for label in signals.labels:
        yield label.term, label.score or MISSING_SCORE
    for obj in signals.objects:
        yield obj.term, (obj.score or MISSING_SCORE) * OBJECT_SCORE_BOOST


def identify_main_item(signals: VisionSignals) -> Optional[MainItem]:
    """
    Highest scoring fashion term after noise filtering.

    Ties keep the term seen first (labels before objects). Returns None when
    no term belongs to a fashion group; callers then use ``PLACEHOLDER_ITEM``.
    """
    best: Optional[MainItem] = None

    for term, score in _scored_terms(signals):
        if not term or is_non_fashion(term):
            continue
        group = fashion_group(term)
        if group is None:
            continue
        if best is None or score > best.score:
            best = MainItem(item=term, score=score, group=group)

    return best


def extract_product_type(signals: VisionSignals) -> str:
    """
    Product type used as the noun of a rule-based name.

    Cascade: the main item; else a known product type related to the
    highest scoring non-noise term; else the first non-noise term;
    else ``"Product"``. The result is capitalized.
    """
    main_item = identify_main_item(signals)
    if main_item is not None:
        return _capitalize(main_item.item)

    ranked = sorted(_scored_terms(signals), key=lambda pair: pair[1], reverse=True)
    candidates = [term for term, _ in ranked if term and not is_non_fashion(term)]

    for term in candidates:
        lowered = term.lower()
        for product_type in PRODUCT_TYPES:
            if _related(lowered, product_type):
                return _capitalize(product_type)

    if candidates:
        return _capitalize(candidates[0])

    return PLACEHOLDER_PRODUCT_TYPE


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]
