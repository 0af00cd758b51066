"""Render-ready view models for recipe cards and the recipe detail view."""

import dataclasses
from typing import AbstractSet, Iterable, List, Tuple

from ..recipes.models import Recipe, RecipeMatch
from .localization import DEFAULT_LANGUAGE, localize, quantity_for
from .units import DEFAULT_UNIT_SYSTEM, UnitSystem


@dataclasses.dataclass(frozen=True)
class RecipeCard:
    """Summary of a matched recipe for the results list."""

    id: str
    title: str
    matched_count: int
    required_count: int
    match_percentage: float
    total_time: int
    difficulty: str
    leftover_tip: str
    unused_ingredients: Tuple[str, ...]

    @property
    def match_label(self) -> str:
        return (
            f"{self.match_percentage * 100:.0f}% "
            f"({self.matched_count}/{self.required_count} main items)"
        )


@dataclasses.dataclass(frozen=True)
class IngredientLine:
    name: str
    quantity: str
    unit_system: UnitSystem


@dataclasses.dataclass(frozen=True)
class Step:
    number: int
    text: str

    @property
    def label(self) -> str:
        return f"STEP {self.number}"


@dataclasses.dataclass(frozen=True)
class RecipeDetail:
    """Full recipe view in one language and unit system."""

    id: str
    title: str
    prep_time: int
    cook_time: int
    difficulty: str
    unit_system: UnitSystem
    ingredients: Tuple[IngredientLine, ...]
    steps: Tuple[Step, ...]

    @property
    def toggle_label(self) -> str:
        return f"Switch to {self.unit_system.toggled().label}"


def unused_ingredients(available: Iterable[str], recipe: Recipe) -> List[str]:
    """List available ingredients that the recipe does not match on.

    This is computed against ``match_ingredients`` only. An item that
    appears in the recipe's full ingredient list but not in its match
    ingredients is still reported as unused.

    Args:
        available: Available ingredient names
        recipe: Recipe to compare against

    Returns:
        Unused ingredient names, sorted
    """
    required: AbstractSet[str] = {name.lower() for name in recipe.match_ingredients}
    return sorted({item for item in available if item.lower() not in required})


def build_card(
    match: RecipeMatch, available: Iterable[str], language: str = DEFAULT_LANGUAGE
) -> RecipeCard:
    recipe = match.recipe
    return RecipeCard(
        id=recipe.id,
        title=localize(recipe.name, language),
        matched_count=match.matched_count,
        required_count=match.required_count,
        match_percentage=match.match_percentage,
        total_time=recipe.total_time,
        difficulty=recipe.difficulty,
        leftover_tip=localize(recipe.leftover_handling, language),
        unused_ingredients=tuple(unused_ingredients(available, recipe)),
    )


def render_detail(
    recipe: Recipe,
    unit_system: UnitSystem = DEFAULT_UNIT_SYSTEM,
    language: str = DEFAULT_LANGUAGE,
) -> RecipeDetail:
    """Render the detail view of a recipe.

    Call again after the unit system or language changes; the result is a
    snapshot and never updates itself.

    Args:
        recipe: Recipe to render
        unit_system: Unit system for ingredient quantities
        language: Language for the title, ingredient names and steps

    Returns:
        RecipeDetail with steps numbered from 1

    Raises:
        MissingLocalization: If a field has no entry in any language or unit system
    """
    unit_system = UnitSystem.parse(unit_system)
    lines = []
    for ingredient in recipe.ingredients:
        quantity, used = quantity_for(ingredient, unit_system)
        lines.append(
            IngredientLine(
                name=localize(ingredient.name, language),
                quantity=quantity,
                unit_system=used,
            )
        )

    steps = tuple(
        Step(number=number, text=text)
        for number, text in enumerate(localize(recipe.steps, language), start=1)
    )

    return RecipeDetail(
        id=recipe.id,
        title=localize(recipe.name, language),
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        difficulty=recipe.difficulty,
        unit_system=unit_system,
        ingredients=tuple(lines),
        steps=steps,
    )
