"""Tests for the per-field merge policy."""

from conftest import make_signals

from product_vision.models import GenerativeCandidate
from product_vision.policy import (
    MISSING,
    SOURCE_GENERATED_NAME,
    SOURCE_GENERATIVE,
    SOURCE_OCR,
    SOURCE_RULES,
    SOURCE_VISION,
    FieldCandidate,
    first_present,
    merge_fields,
    overall_confidence,
)

DESCRIPTION = "A sculpted clog in smooth black leather with a buckled strap across the vamp."


def test_first_present_skips_empty_values() -> None:
    winner = first_present(
        [FieldCandidate(None, 0.9, "a"), FieldCandidate("  ", 0.8, "b"), FieldCandidate("x", 0.4, "c")]
    )

    assert winner.value == "x"
    assert winner.source == "c"


def test_first_present_default() -> None:
    default = FieldCandidate("fallback", 0.1, "d")

    assert first_present([FieldCandidate(None)], default=default) is default
    assert first_present([]) is MISSING


def test_overall_confidence_is_mean() -> None:
    assert abs(overall_confidence(0.9, 0.6, 0.75) - 0.75) < 1e-9


def test_rule_based_fields(sneaker_signals) -> None:
    merged = merge_fields(sneaker_signals, GenerativeCandidate())

    assert merged.name.value == "Black Shoe"
    assert merged.name.source == SOURCE_RULES
    assert merged.description.confidence == 0.75
    assert merged.brand.value is None
    assert merged.color.value == "Black"
    assert merged.color.source == SOURCE_VISION


def test_generated_name_wins(sneaker_signals) -> None:
    generative = GenerativeCandidate(name="Toga Virilis Strap-Detail Clogs", description=DESCRIPTION)

    merged = merge_fields(sneaker_signals, generative)

    assert merged.name.value == "Toga Virilis Strap-Detail Clogs"
    assert merged.name.confidence == 0.9
    assert merged.name.source == SOURCE_GENERATIVE
    assert merged.description.value == DESCRIPTION
    assert merged.brand.value == "Toga Virilis"
    assert merged.brand.source == SOURCE_GENERATED_NAME
    # no color word in the name, so the vision color is used
    assert merged.color.value == "Black"


def test_color_from_generated_name() -> None:
    signals = make_signals(labels=[("boot", 0.9)], dominant_colors=["#000000"])

    merged = merge_fields(signals, GenerativeCandidate(name="Dark Brown Chelsea Boots"))

    assert merged.color.value == "Dark Brown"
    assert merged.color.source == SOURCE_GENERATED_NAME


def test_ocr_brand_without_generated_name() -> None:
    signals = make_signals(labels=[("handbag", 0.9)], text="ACME Studio\nMade in Italy")

    merged = merge_fields(signals, GenerativeCandidate(description=DESCRIPTION))

    assert merged.brand.value == "ACME"
    assert merged.brand.source == SOURCE_OCR
    assert merged.name.source == SOURCE_RULES
    assert merged.description.source == SOURCE_GENERATIVE


def test_lower_case_generated_name_gives_no_name_brand() -> None:
    signals = make_signals(labels=[("bag", 0.9)], text="ACME")

    merged = merge_fields(signals, GenerativeCandidate(name="black tote bag"))

    assert merged.brand.value == "ACME"
    assert merged.color.value == "Black"


def test_color_led_generated_name_keeps_ocr_brand() -> None:
    signals = make_signals(labels=[("mule", 0.9)], text="ACME")

    merged = merge_fields(signals, GenerativeCandidate(name="Black Suede Buckle Mules"))

    assert merged.brand.value == "ACME"
    assert merged.brand.source == SOURCE_OCR
    assert merged.color.value == "Black"
