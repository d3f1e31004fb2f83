"""Approximate food-name matching."""

import re

DUPLICATE_THRESHOLD = 0.85
_MAX_FUZZY_LENGTH = 40

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")
_PARENTHETICAL = re.compile(r"\s*\(.*?\)\s*")
_LEGAL_SUFFIXES = (
    re.compile(r"\s*-\s*(original|classic|regular|standard|plain)\s*$"),
    re.compile(r"\s*,\s*(inc|llc|ltd|co|corp|company)\.?\s*$"),
)
_BRAND_TOKENS = re.compile(r"\s*\b(brand|tm|registered)\b\s*")
_PACK_SIZE = re.compile(r"(?:^|\s)\d+\s*(g|oz|ml|kg|lb|lbs)$")

ABBREVIATIONS = {
    "chkn": "chicken",
    "brst": "breast",
    "grnd": "ground",
    "whl": "whole",
    "org": "organic",
    "nat": "natural",
    "pnt": "peanut",
    "bttr": "butter",
    "choc": "chocolate",
    "strwbry": "strawberry",
    "blubrry": "blueberry",
    "brkfst": "breakfast",
    "sndk": "sandwich",
    "yog": "yogurt",
    "yogrt": "yogurt",
    "avocdo": "avocado",
    "avo": "avocado",
    "broc": "broccoli",
    "cauli": "cauliflower",
    "sw": "sweet",
    "pot": "potato",
    "tom": "tomato",
    "sal": "salmon",
    "turk": "turkey",
    "spag": "spaghetti",
    "oatml": "oatmeal",
    "pb": "peanut butter",
    "oj": "orange juice",
}


def similarity(a: str, b: str) -> float:
    """Return the Dice coefficient over character bigrams of two names."""
    left = _clean(a)
    right = _clean(b)
    if len(left) < 2 or len(right) < 2:
        return 0.0
    if left == right:
        return 1.0
    left_bigrams = _bigrams(left)
    right_bigrams = _bigrams(right)
    overlap = len(left_bigrams & right_bigrams)
    return 2 * overlap / (len(left_bigrams) + len(right_bigrams))


def normalize_name(name: str) -> str:
    """Reduce a product name to the form used for duplicate detection."""
    text = _PARENTHETICAL.sub(" ", name.lower())
    for pattern in _LEGAL_SUFFIXES:
        text = pattern.sub("", text)
    text = _collapse(_NON_ALNUM.sub("", text))
    text = _BRAND_TOKENS.sub(" ", text)
    text = _PACK_SIZE.sub("", _collapse(text))
    return _collapse(text)


def is_duplicate(name_a: str, name_b: str) -> bool:
    """Return true when two names describe the same food."""
    normalized_a = normalize_name(name_a)
    normalized_b = normalize_name(name_b)
    if normalized_a == normalized_b:
        return True
    if len(normalized_a) >= _MAX_FUZZY_LENGTH or len(normalized_b) >= _MAX_FUZZY_LENGTH:
        return False
    return similarity(normalized_a, normalized_b) >= DUPLICATE_THRESHOLD


def expand_abbreviations(query: str) -> str:
    """Expand shorthand food words such as 'chkn' or 'pb'."""
    words = query.split()
    expanded = [ABBREVIATIONS.get(word.lower(), word) for word in words]
    return " ".join(expanded)


def _clean(text: str) -> str:
    return _collapse(_NON_ALNUM.sub("", text.lower()))


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _bigrams(text: str) -> set[str]:
    return {text[index : index + 2] for index in range(len(text) - 1)}
