"""Classifier label normalization utilities."""

import logging
from typing import FrozenSet, Iterable

logger = logging.getLogger(__name__)

# Classifier label -> ingredient name used in the recipe catalog
LABEL_SYNONYMS = {
    "acorn squash": "squash",
    "spaghetti squash": "squash",
    "butternut squash": "squash",
    "cucumber": "cucumber",
    "granny smith": "apple",
    "eggnog": "egg",
}

# Labels the classifier reports for kitchen surroundings rather than food
NON_FOOD_LABELS = frozenset(
    {
        "refrigerator",
        "plate rack",
        "table",
        "chair",
        "wall",
        "window",
        "cabinet",
        "shelf",
    }
)


def primary_term(label: str) -> str:
    """Reduce a classifier label to its first synonym.

    Args:
        label: Raw label, possibly a comma-separated list of synonyms

    Returns:
        The first synonym, stripped and lowercased

    Examples:
        >>> primary_term("Granny Smith, apple")
        "granny smith"
        >>> primary_term("  Eggnog ")
        "eggnog"
    """
    return label.split(",")[0].strip().lower()


def canonical_ingredient(label: str) -> str:
    """Map a raw label to the ingredient name used in the catalog."""
    term = primary_term(label)
    return LABEL_SYNONYMS.get(term, term)


def normalize_labels(labels: Iterable[str]) -> FrozenSet[str]:
    """Turn raw classifier labels into a set of canonical ingredient names.

    Labels are reduced to their primary term, mapped through
    LABEL_SYNONYMS and then filtered against NON_FOOD_LABELS. Labels with
    no mapping pass through unchanged.

    Args:
        labels: Raw labels from a classifier or a hand-written list

    Returns:
        Canonical, lowercase ingredient names

    Examples:
        >>> sorted(normalize_labels(["granny smith, red delicious", "Eggnog"]))
        ["apple", "egg"]
        >>> normalize_labels(["refrigerator", "egg"])
        frozenset({"egg"})
    """
    mapped = {canonical_ingredient(label) for label in labels}
    mapped.discard("")
    ingredients = frozenset(mapped - NON_FOOD_LABELS)

    dropped = mapped & NON_FOOD_LABELS
    if dropped:
        logger.debug(f"Dropped non-food labels: {sorted(dropped)}")
    logger.debug(f"Normalized ingredients: {sorted(ingredients)}")
    return ingredients
