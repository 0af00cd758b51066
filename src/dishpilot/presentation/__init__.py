"""View models and display helpers for matched recipes."""

from .localization import DEFAULT_LANGUAGE, localize, quantity_for
from .units import DEFAULT_UNIT_SYSTEM, UnitSystem
from .views import (
    IngredientLine,
    RecipeCard,
    RecipeDetail,
    Step,
    build_card,
    render_detail,
    unused_ingredients,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_UNIT_SYSTEM",
    "IngredientLine",
    "RecipeCard",
    "RecipeDetail",
    "Step",
    "UnitSystem",
    "build_card",
    "localize",
    "quantity_for",
    "render_detail",
    "unused_ingredients",
]
