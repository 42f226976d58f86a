"""
Rule-based classifiers over normalized vision signals.

Everything in this package is pure: no I/O, no shared mutable state, the
same signals always give the same output.
"""

from .attributes import classify_gender, classify_material, classify_style
from .brand import (
    classify_primary_color,
    extract_brand_from_name,
    extract_brand_from_text,
    extract_color_from_name,
    primary_color_from_vision,
)
from .category_matcher import match_category
from .features import extract_features
from .main_item import (
    PLACEHOLDER_ITEM,
    extract_product_type,
    identify_main_item,
    is_non_fashion,
)
from .rules import KeywordGroup, classify_first_match

__all__ = [
    "KeywordGroup",
    "PLACEHOLDER_ITEM",
    "classify_first_match",
    "classify_gender",
    "classify_material",
    "classify_primary_color",
    "classify_style",
    "extract_brand_from_name",
    "extract_brand_from_text",
    "extract_color_from_name",
    "extract_features",
    "extract_product_type",
    "identify_main_item",
    "is_non_fashion",
    "match_category",
    "primary_color_from_vision",
]
