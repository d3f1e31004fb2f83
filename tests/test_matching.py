"""Tests for name similarity and normalization."""

import pytest

from food_lookup.services.matching import (
    expand_abbreviations,
    is_duplicate,
    normalize_name,
    similarity,
)


def test_similarity_identical_names() -> None:
    assert similarity("Greek Yogurt", "greek yogurt!") == 1.0


def test_similarity_short_input_is_zero() -> None:
    assert similarity("a", "a") == 0.0
    assert similarity("", "banana") == 0.0


def test_similarity_disjoint_names() -> None:
    assert similarity("abc", "xyz") == 0.0


def test_similarity_partial_overlap() -> None:
    score = similarity("chicken breast", "chicken breasts")
    assert 0.85 < score < 1.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Peanut Butter (Creamy)", "peanut butter"),
        ("Oreo Cookies - Original", "oreo cookies"),
        ("Acme Foods, Inc.", "acme foods"),
        ("Cheerios Brand Cereal", "cheerios cereal"),
        ("Greek Yogurt 500g", "greek yogurt"),
        ("  Tomato   Soup  ", "tomato soup"),
    ],
)
def test_normalize_name(raw: str, expected: str) -> None:
    assert normalize_name(raw) == expected


def test_is_duplicate_for_equal_normalized_names() -> None:
    assert is_duplicate("Peanut Butter (Creamy)", "PEANUT BUTTER 340g")


def test_is_duplicate_for_near_names() -> None:
    assert is_duplicate("Chicken Breast", "Chicken Breasts")


def test_is_not_duplicate_for_different_foods() -> None:
    assert not is_duplicate("Chicken Breast", "Chicken Thigh")


def test_long_names_require_exact_normalized_match() -> None:
    long_a = "Organic Whole Grain Honey Oat Breakfast Cereal Clusters"
    long_b = "Organic Whole Grain Honey Oat Breakfast Cereal Cluster"
    assert not is_duplicate(long_a, long_b)
    assert is_duplicate(long_a, f"{long_a} (Family Size)")


def test_expand_abbreviations() -> None:
    assert expand_abbreviations("grnd chkn") == "ground chicken"
    assert expand_abbreviations("PB toast") == "peanut butter toast"
    assert expand_abbreviations("salmon") == "salmon"
