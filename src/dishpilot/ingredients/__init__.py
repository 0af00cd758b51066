"""Ingredient label normalization utilities."""

from .normalization import (
    LABEL_SYNONYMS,
    NON_FOOD_LABELS,
    canonical_ingredient,
    normalize_labels,
    primary_term,
)

__all__ = [
    "LABEL_SYNONYMS",
    "NON_FOOD_LABELS",
    "canonical_ingredient",
    "normalize_labels",
    "primary_term",
]
