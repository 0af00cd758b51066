"""Recommendation session: catalog, display preferences and current results."""

import dataclasses
import logging
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Sequence, Tuple

from .classification import ImageClassifier, labels_from_predictions
from .config import Settings, check_language, check_match_threshold
from .exceptions import ClassifierUnavailable, RecipeNotFoundError
from .ingredients import normalize_labels
from .presentation import (
    DEFAULT_LANGUAGE,
    DEFAULT_UNIT_SYSTEM,
    RecipeCard,
    RecipeDetail,
    UnitSystem,
    build_card,
    render_detail,
)
from .recipes import (
    DEFAULT_MATCH_THRESHOLD,
    Recipe,
    RecipeMatch,
    catalog_index,
    find_matching_recipes,
    load_catalog,
)

logger = logging.getLogger(__name__)

# Pantry used when no image has been recognized yet
SIMULATED_INGREDIENTS = (
    "egg",
    "butter",
    "milk",
    "tomato",
    "onion",
    "parsley",
    "squash",
    "thyme",
)


@dataclasses.dataclass(frozen=True)
class RecognitionResult:
    """Outcome of one recognition event."""

    ingredients: FrozenSet[str]
    matches: Tuple[RecipeMatch, ...]
    cards: Tuple[RecipeCard, ...]


class Session:
    """Owns the catalog and the mutable display state of one user session.

    Each recognition event runs label normalization, matching and card
    building to completion and replaces the previous result.

    Attributes:
        catalog: Recipes in catalog order. Never modified.
        language: Language code for display text
        unit_system: Unit system for ingredient quantities
        threshold: Minimum match percentage for a recipe to be listed
        result: Result of the latest recognition event, if any
        open_recipe_id: Id of the recipe shown in the detail view, if any
    """

    def __init__(
        self,
        catalog: Sequence[Recipe],
        language: str = DEFAULT_LANGUAGE,
        unit_system: UnitSystem = DEFAULT_UNIT_SYSTEM,
        threshold: float = DEFAULT_MATCH_THRESHOLD,
    ):
        self.catalog: Tuple[Recipe, ...] = tuple(catalog)
        self._recipes_by_id: Mapping[str, Recipe] = catalog_index(self.catalog)
        self.language = check_language(language)
        self.unit_system = UnitSystem.parse(unit_system)
        self.threshold = check_match_threshold(threshold)
        self.result: Optional[RecognitionResult] = None
        self.open_recipe_id: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "Session":
        """Load the configured catalog and create a session.

        Raises:
            CatalogLoadError: If the catalog cannot be read
            CatalogParseError: If the catalog is invalid
        """
        settings = settings or Settings()
        catalog = load_catalog(settings.catalog, **kwargs)
        return cls(
            catalog,
            language=settings.language,
            unit_system=settings.unit_system,
            threshold=settings.match_threshold,
        )

    @property
    def ingredients(self) -> FrozenSet[str]:
        return self.result.ingredients if self.result else frozenset()

    def recognize(self, labels: Iterable[str]) -> RecognitionResult:
        """Normalize labels, rank the catalog and build result cards.

        Args:
            labels: Raw labels from a classifier or a simulated list

        Returns:
            The new current result
        """
        ingredients = normalize_labels(labels)
        matches = tuple(find_matching_recipes(ingredients, self.catalog, self.threshold))
        cards = tuple(build_card(match, ingredients, self.language) for match in matches)
        self.result = RecognitionResult(ingredients=ingredients, matches=matches, cards=cards)
        logger.info(
            f"Recognized {len(ingredients)} ingredients, {len(matches)} recipes recommended"
        )
        return self.result

    def simulate(self, ingredients: Iterable[str] = SIMULATED_INGREDIENTS) -> RecognitionResult:
        """Run recognition on a hand-written ingredient list."""
        ingredients = list(ingredients)
        logger.info(f"Simulating available ingredients: {ingredients}")
        return self.recognize(ingredients)

    def recognize_image(
        self, classifier: Optional[ImageClassifier], image: Any, top_k: int = 5
    ) -> RecognitionResult:
        """Classify an image and run recognition on the predicted labels.

        Raises:
            ClassifierUnavailable: If there is no classifier or it is not loaded yet
        """
        if classifier is None or not classifier.is_ready:
            raise ClassifierUnavailable("Image classifier is not loaded yet. Please wait.")
        predictions = classifier.classify(image, top_k)
        logger.debug(f"Classifier predictions: {predictions}")
        return self.recognize(labels_from_predictions(predictions))

    def get_recipe(self, recipe_id: str) -> Recipe:
        try:
            return self._recipes_by_id[recipe_id]
        except KeyError:
            raise RecipeNotFoundError(recipe_id) from None

    def open_recipe(self, recipe_id: str) -> RecipeDetail:
        """Show a recipe in the detail view.

        Raises:
            RecipeNotFoundError: If the id is not in the catalog
        """
        recipe = self.get_recipe(recipe_id)
        self.open_recipe_id = recipe_id
        return render_detail(recipe, self.unit_system, self.language)

    def close_recipe(self) -> None:
        self.open_recipe_id = None

    def toggle_units(self) -> Optional[RecipeDetail]:
        """Switch between metric and imperial.

        Returns:
            The re-rendered detail view if a recipe is open, otherwise None
        """
        self.unit_system = self.unit_system.toggled()
        logger.debug(f"Unit system is now {self.unit_system.value}")
        if self.open_recipe_id is None:
            return None
        return render_detail(self.get_recipe(self.open_recipe_id), self.unit_system, self.language)
