"""Exception types raised by dishpilot."""

from typing import Optional


class DishPilotError(Exception):
    """Base class for all dishpilot errors."""


class ConfigurationError(DishPilotError):
    """Raised when settings are invalid."""


class CatalogLoadError(DishPilotError):
    """Raised when the recipe catalog cannot be read or downloaded.

    Attributes:
        source: Path or URL the catalog was loaded from
    """

    def __init__(self, source: str, message: str):
        super().__init__(f"Failed to load recipe catalog from {source}: {message}")
        self.source = source


class CatalogParseError(DishPilotError):
    """Raised when the catalog document is not valid catalog data."""


class InvalidRecipeError(CatalogParseError):
    """Raised when a single recipe record fails validation.

    Attributes:
        index: Position of the record in the catalog document
        recipe_id: Identifier of the record, if it had one
    """

    def __init__(self, message: str, index: int, recipe_id: Optional[str] = None):
        where = f"record {index}"
        if recipe_id is not None:
            where += f" ({recipe_id!r})"
        super().__init__(f"Invalid recipe {where}: {message}")
        self.index = index
        self.recipe_id = recipe_id


class ClassifierUnavailable(DishPilotError):
    """Raised when recognition is requested before the classifier is ready."""


class MissingLocalization(DishPilotError, KeyError):
    """Raised when a localized mapping has no usable entry at all."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RecipeNotFoundError(DishPilotError):
    """Raised when a recipe id is not in the catalog."""

    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id
