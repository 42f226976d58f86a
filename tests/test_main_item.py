"""Tests for main-item identification and the product-type fallback."""

from conftest import make_signals

from product_vision.classifiers.main_item import (
    extract_product_type,
    fashion_group,
    identify_main_item,
    is_non_fashion,
)


def test_logo_is_filtered_even_with_higher_score() -> None:
    signals = make_signals(labels=[("t-shirt", 0.9), ("logo", 0.95)])

    item = identify_main_item(signals)

    assert item.item == "t-shirt"
    assert item.group == "clothing"


def test_objects_are_boosted_over_labels() -> None:
    signals = make_signals(labels=[("sneaker", 0.92)], objects=[("Shoe", 0.88)])

    item = identify_main_item(signals)

    assert item.item == "Shoe"
    assert item.group == "shoes"
    assert abs(item.score - 0.88 * 1.2) < 1e-9


def test_missing_score_counts_as_half() -> None:
    signals = make_signals(labels=[("handbag", 0.0), ("dress", 0.4)])

    item = identify_main_item(signals)

    assert item.item == "handbag"
    assert item.score == 0.5


def test_ties_keep_first_seen() -> None:
    signals = make_signals(labels=[("jacket", 0.8), ("coat", 0.8)])

    assert identify_main_item(signals).item == "jacket"


def test_no_fashion_term_gives_none() -> None:
    signals = make_signals(labels=[("logo", 0.99), ("table", 0.8), ("sky", 0.7)])

    assert identify_main_item(signals) is None


def test_perfume_group() -> None:
    assert fashion_group("Perfume") == "perfumes"
    assert fashion_group("cloud") is None


def test_noise_filter() -> None:
    assert is_non_fashion("Brand Logo")
    assert is_non_fashion("cardboard box")
    assert not is_non_fashion("sneaker")


def test_product_type_prefers_main_item() -> None:
    signals = make_signals(labels=[("sneaker", 0.92)], objects=[("shoe", 0.88)])

    assert extract_product_type(signals) == "Shoe"


def test_product_type_falls_back_to_first_non_noise_term() -> None:
    signals = make_signals(labels=[("logo", 0.99), ("lamp", 0.6), ("sky", 0.9)])

    assert extract_product_type(signals) == "Sky"


def test_product_type_placeholder() -> None:
    assert extract_product_type(make_signals()) == "Product"
    assert extract_product_type(make_signals(labels=[("logo", 0.9)])) == "Product"
