"""Ingredient coverage matching against a recipe catalog."""

import logging
from typing import AbstractSet, Iterable, List, Sequence

from .models import Recipe, RecipeMatch

logger = logging.getLogger(__name__)

# Minimum share of a recipe's match_ingredients that must be available
DEFAULT_MATCH_THRESHOLD = 0.7


def _lowercase_set(items: Iterable[str]) -> AbstractSet[str]:
    return {item.lower() for item in items}


def score_recipe(recipe: Recipe, available: Iterable[str]) -> RecipeMatch:
    """Compute how many of a recipe's match ingredients are available.

    Comparison is exact after lowercasing both sides. A recipe with no
    match ingredients has a match percentage of 0.

    Args:
        recipe: Recipe to score
        available: Available ingredient names

    Returns:
        RecipeMatch with matched_count and match_percentage filled in
    """
    available_lower = _lowercase_set(available)
    required = recipe.match_ingredients
    matched_count = sum(1 for name in required if name.lower() in available_lower)
    match_percentage = matched_count / len(required) if required else 0.0
    return RecipeMatch(
        recipe=recipe, matched_count=matched_count, match_percentage=match_percentage
    )


def find_matching_recipes(
    available: Iterable[str],
    catalog: Sequence[Recipe],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
) -> List[RecipeMatch]:
    """Rank catalog recipes by how well the available ingredients cover them.

    A recipe is kept when its match percentage is at least ``threshold``.
    Results are sorted by match percentage, highest first; recipes with
    equal percentages keep their catalog order.

    Args:
        available: Available ingredient names, compared case-insensitively
        catalog: Recipes to rank. Not modified.
        threshold: Inclusion threshold between 0 and 1

    Returns:
        New RecipeMatch objects for the recipes that passed the threshold

    Examples:
        >>> matches = find_matching_recipes({"egg", "butter"}, catalog, 0.7)
        >>> [m.recipe.id for m in matches]
        ["omelette"]
    """
    available_lower = _lowercase_set(available)
    scored = [score_recipe(recipe, available_lower) for recipe in catalog]
    matches = [m for m in scored if m.match_percentage >= threshold]
    # sorted() is stable, so ties stay in catalog order
    matches = sorted(matches, key=lambda m: m.match_percentage, reverse=True)

    logger.info(
        f"{len(matches)} of {len(catalog)} recipes matched at threshold {threshold:.2f}"
    )
    return matches
