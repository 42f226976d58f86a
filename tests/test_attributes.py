"""Tests for the material, style and gender keyword classifiers."""

from conftest import make_signals

from product_vision.classifiers import classify_gender, classify_material, classify_style


def test_faux_leather_is_not_leather() -> None:
    signals = make_signals(labels=[("leather", 0.9), ("faux leather", 0.8)])

    result = classify_material(signals)

    assert result.value == "Faux Leather"
    assert result.confidence == 0.8
    assert result.alternatives == ["Leather"]


def test_plain_leather() -> None:
    result = classify_material(make_signals(labels=[("Leather", 0.77)]))

    assert result.value == "Leather"
    assert result.confidence == 0.77


def test_no_material() -> None:
    result = classify_material(make_signals(labels=[("footwear", 0.9)], objects=[("Shoe", 0.8)]))

    assert result.value is None
    assert result.confidence == 0.0
    assert result.alternatives == []


def test_missing_score_uses_default() -> None:
    result = classify_material(make_signals(objects=[("cotton", 0.0)]))

    assert result.value == "Cotton"
    assert result.confidence == 0.5


def test_style_follows_table_order() -> None:
    signals = make_signals(labels=[("vintage", 0.7), ("casual wear", 0.6)])

    result = classify_style(signals)

    assert result.value == "Casual"
    assert result.confidence == 0.6
    assert result.alternatives == ["Vintage"]


def test_women_is_not_men() -> None:
    result = classify_gender(make_signals(labels=[("women's fashion", 0.8)]))

    assert result.value == "women"


def test_men() -> None:
    assert classify_gender(make_signals(labels=[("mens shoes", 0.6)])).value == "men"


def test_no_gender() -> None:
    assert classify_gender(make_signals(labels=[("sneaker", 0.9)])).value is None


def test_classifiers_are_repeatable(sneaker_signals) -> None:
    for classify in (classify_material, classify_style, classify_gender):
        assert classify(sneaker_signals) == classify(sneaker_signals)


def test_gender_words_must_stand_alone() -> None:
    signals = make_signals(labels=[("Mannequin", 0.9), ("Human body", 0.8), ("Garment", 0.7)])

    assert classify_gender(signals).value is None


def test_possessive_and_compound_gender_words() -> None:
    assert classify_gender(make_signals(labels=[("Men's clothing", 0.8)])).value == "men"
    assert classify_gender(make_signals(labels=[("Womenswear", 0.8)])).value == "women"
