"""Tests for feature extraction."""

from conftest import make_signals

from product_vision.classifiers import extract_features


def test_features_in_order() -> None:
    signals = make_signals(
        labels=[
            ("casual wear", 0.8),
            ("striped shirt", 0.7),
            ("cotton", 0.6),
            ("shirt with pocket", 0.5),
        ],
        color_samples=[(0, 0, 0), (255, 255, 255)],
    )

    assert extract_features(signals) == ["Black", "White", "Casual", "Striped", "Cotton", "Pocket"]


def test_duplicates_are_dropped() -> None:
    signals = make_signals(
        labels=[("cotton", 0.9), ("cotton blend", 0.8)],
        color_samples=[(0, 0, 0), (0, 0, 0)],
    )

    assert extract_features(signals) == ["Black", "Cotton"]


def test_multi_word_keywords_are_title_cased() -> None:
    assert extract_features(make_signals(labels=[("polka dot dress", 0.7)])) == ["Polka Dot"]


def test_at_most_ten_features() -> None:
    signals = make_signals(
        labels=[
            ("casual", 0.9),
            ("formal", 0.9),
            ("sporty", 0.9),
            ("elegant", 0.9),
            ("vintage", 0.9),
            ("modern", 0.9),
            ("classic", 0.9),
            ("trendy", 0.9),
            ("striped", 0.9),
            ("floral", 0.9),
            ("cotton", 0.9),
        ],
        color_samples=[(0, 0, 0), (255, 0, 0), (0, 0, 255), (0, 128, 0)],
    )

    features = extract_features(signals)

    assert len(features) == 10
    assert features[:3] == ["Black", "Red", "Blue"]
    assert "Green" not in features


def test_no_signals_no_features() -> None:
    assert extract_features(make_signals()) == []
