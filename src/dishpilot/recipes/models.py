import dataclasses
import types
from typing import Mapping, Tuple


def _frozen_mapping(mapping: Mapping) -> Mapping:
    return types.MappingProxyType(dict(mapping))


@dataclasses.dataclass(frozen=True)
class RecipeIngredient:
    """One line of a recipe's full ingredient list."""

    name: Mapping[str, str] = dataclasses.field(hash=False)
    qty: Mapping[str, str] = dataclasses.field(hash=False)

    def __post_init__(self):
        object.__setattr__(self, "name", _frozen_mapping(self.name))
        object.__setattr__(self, "qty", _frozen_mapping(self.qty))


@dataclasses.dataclass(frozen=True)
class Recipe:
    """Dataclass for holding a catalog recipe.

    match_ingredients drives matching; ingredients is only used for the
    detail view and may list more items. Mappings are read-only views, so
    a loaded catalog cannot be changed through its recipes.
    """

    id: str
    name: Mapping[str, str] = dataclasses.field(hash=False)
    match_ingredients: Tuple[str, ...]
    ingredients: Tuple[RecipeIngredient, ...]
    steps: Mapping[str, Tuple[str, ...]] = dataclasses.field(hash=False)
    leftover_handling: Mapping[str, str] = dataclasses.field(hash=False)
    prep_time: int
    cook_time: int
    difficulty: str

    def __post_init__(self):
        object.__setattr__(self, "name", _frozen_mapping(self.name))
        object.__setattr__(self, "match_ingredients", tuple(self.match_ingredients))
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(
            self,
            "steps",
            _frozen_mapping({language: tuple(lines) for language, lines in self.steps.items()}),
        )
        object.__setattr__(self, "leftover_handling", _frozen_mapping(self.leftover_handling))

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


@dataclasses.dataclass(frozen=True)
class RecipeMatch:
    recipe: Recipe
    matched_count: int
    match_percentage: float

    @property
    def required_count(self) -> int:
        return len(self.recipe.match_ingredients)
