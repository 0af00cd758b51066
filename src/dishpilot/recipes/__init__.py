"""Recipe catalog models, loading and matching."""

from .catalog import DEFAULT_CATALOG_PATH, catalog_index, load_catalog, parse_catalog, parse_recipe
from .matching import DEFAULT_MATCH_THRESHOLD, find_matching_recipes, score_recipe
from .models import Recipe, RecipeIngredient, RecipeMatch

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_MATCH_THRESHOLD",
    "Recipe",
    "RecipeIngredient",
    "RecipeMatch",
    "catalog_index",
    "find_matching_recipes",
    "load_catalog",
    "parse_catalog",
    "parse_recipe",
    "score_recipe",
]
