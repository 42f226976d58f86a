"""Tests for brand and color extraction."""

from conftest import make_signals

from product_vision.classifiers.brand import (
    brand_candidate_tokens,
    classify_primary_color,
    extract_brand_from_name,
    extract_brand_from_text,
    extract_color_from_name,
    primary_color_from_vision,
)


def test_repeated_pair_wins() -> None:
    text = "TOGA VIRILIS\nMade in Italy\nTOGA VIRILIS"

    result = extract_brand_from_text(text)

    assert result.value == "TOGA VIRILIS"
    assert result.confidence == 0.8


def test_first_token_when_nothing_repeats() -> None:
    result = extract_brand_from_text("Nike Air Max 90")

    assert result.value == "Nike"
    assert result.confidence == 0.5
    assert result.alternatives == ["Air", "Max"]


def test_deny_list_and_acronyms_are_dropped() -> None:
    assert brand_candidate_tokens("MADE IN ITALY XL Size") == []
    assert extract_brand_from_text("MADE IN ITALY").value is None


def test_empty_text() -> None:
    result = extract_brand_from_text("   ")

    assert result.value is None
    assert result.confidence == 0.0


def test_brand_from_name() -> None:
    assert extract_brand_from_name("Toga Virilis Strap-Detail Clogs") == "Toga Virilis"
    assert extract_brand_from_name("Nike running shoes") == "Nike"
    assert extract_brand_from_name("leather boots") is None
    assert extract_brand_from_name(None) is None


def test_color_from_name() -> None:
    assert extract_color_from_name("Black Leather Boots") == "Black"
    assert extract_color_from_name("Dark Brown Loafers") == "Dark Brown"
    assert extract_color_from_name("Tailored Wool Coat") is None


def test_dark_color_preferred_over_background() -> None:
    assert primary_color_from_vision(["#f5f5dc", "#ff0000", "#000000"]) == "Black"
    assert primary_color_from_vision(["#f5f5dc", "#000080"]) == "Navy"


def test_first_foreground_color_without_dark_candidates() -> None:
    assert primary_color_from_vision(["#ff0000", "#00ff00"]) == "Red"


def test_all_background_falls_back_to_first() -> None:
    assert primary_color_from_vision(["#f5f5dc", "#d2b48c"]) == "Beige"


def test_only_first_three_colors_count() -> None:
    assert primary_color_from_vision(["#ff0000", "#ff0000", "#ff0000", "#000000"]) == "Red"
    assert primary_color_from_vision([]) is None


def test_classify_primary_color() -> None:
    result = classify_primary_color(make_signals(dominant_colors=["#ffffff", "#1a1a1a"]))

    assert result.value == "Black"
    assert result.confidence == 0.7
    assert result.alternatives == ["White"]


def test_color_and_material_words_are_not_brands() -> None:
    assert extract_brand_from_name("Black Suede Buckle Mules") is None
    assert extract_brand_from_name("Navy Canvas Sneakers") is None
    assert extract_brand_from_name("Acme Black Sneakers") == "Acme"
