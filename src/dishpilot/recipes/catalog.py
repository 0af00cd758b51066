"""Recipe catalog loading and validation."""

import json
import logging
import pathlib
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import requests

from ..exceptions import CatalogLoadError, CatalogParseError, InvalidRecipeError
from ..fetching import CatalogSession
from .models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = pathlib.Path(__file__).resolve().parents[1] / "data" / "recipes.json"

REQUIRED_FIELDS = (
    "id",
    "name",
    "match_ingredients",
    "ingredients",
    "steps",
    "leftover_handling",
    "prep_time",
    "cook_time",
    "difficulty",
)


def is_url(source: Union[str, pathlib.Path]) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _string_mapping(value: Any, field: str, fail: Callable[[str], Exception]) -> Dict[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise fail(f"'{field}' must map strings to strings")
    if not value:
        raise fail(f"'{field}' must have at least one entry")
    return dict(value)


def _string_list(value: Any, field: str, fail: Callable[[str], Exception]) -> Tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise fail(f"'{field}' must be a list of strings")
    return tuple(value)


def _minutes(value: Any, field: str, fail: Callable[[str], Exception]) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise fail(f"'{field}' must be a non-negative integer")
    return value


def parse_recipe(record: Any, index: int = 0) -> Recipe:
    """Build a Recipe from one catalog record.

    Args:
        record: Decoded JSON object for a single recipe
        index: Position of the record in the catalog, for error messages

    Returns:
        An immutable Recipe

    Raises:
        InvalidRecipeError: If a required field is missing or has the wrong type
    """
    if not isinstance(record, dict):
        raise InvalidRecipeError("record must be an object", index)

    recipe_id = record.get("id")
    if not isinstance(recipe_id, str) or not recipe_id:
        raise InvalidRecipeError("'id' must be a non-empty string", index)

    def fail(message: str) -> InvalidRecipeError:
        return InvalidRecipeError(message, index, recipe_id)

    missing = [field for field in REQUIRED_FIELDS if field not in record]
    if missing:
        raise fail(f"missing required field(s): {', '.join(missing)}")

    if not isinstance(record["ingredients"], list):
        raise fail("'ingredients' must be a list")
    ingredients = []
    for position, item in enumerate(record["ingredients"]):
        if not isinstance(item, dict) or "name" not in item or "qty" not in item:
            raise fail(f"ingredient {position} must have 'name' and 'qty'")
        ingredients.append(
            RecipeIngredient(
                name=_string_mapping(item["name"], f"ingredients[{position}].name", fail),
                qty=_string_mapping(item["qty"], f"ingredients[{position}].qty", fail),
            )
        )

    if not isinstance(record["steps"], dict) or not record["steps"]:
        raise fail("'steps' must map at least one language to a list")
    steps = {
        language: _string_list(lines, f"steps.{language}", fail)
        for language, lines in record["steps"].items()
    }

    if not isinstance(record["difficulty"], str):
        raise fail("'difficulty' must be a string")

    return Recipe(
        id=recipe_id,
        name=_string_mapping(record["name"], "name", fail),
        match_ingredients=_string_list(record["match_ingredients"], "match_ingredients", fail),
        ingredients=tuple(ingredients),
        steps=steps,
        leftover_handling=_string_mapping(record["leftover_handling"], "leftover_handling", fail),
        prep_time=_minutes(record["prep_time"], "prep_time", fail),
        cook_time=_minutes(record["cook_time"], "cook_time", fail),
        difficulty=record["difficulty"],
    )


def parse_catalog(document: Any) -> Tuple[Recipe, ...]:
    """Validate a decoded catalog document.

    The document is either a list of recipe records or an object with a
    ``recipes`` list.

    Raises:
        CatalogParseError: If the document has the wrong shape
        InvalidRecipeError: If a record is invalid or an id is repeated
    """
    if isinstance(document, dict) and "recipes" in document:
        document = document["recipes"]
    if not isinstance(document, list):
        raise CatalogParseError("catalog must be a list of recipes")

    recipes: List[Recipe] = []
    seen = set()
    for index, record in enumerate(document):
        recipe = parse_recipe(record, index)
        if recipe.id in seen:
            raise InvalidRecipeError("duplicate recipe id", index, recipe.id)
        seen.add(recipe.id)
        recipes.append(recipe)
    return tuple(recipes)


def _read_document(source: Union[str, pathlib.Path], session: Optional[CatalogSession]) -> Any:
    if is_url(source):
        own_session = session is None
        session = session or CatalogSession()
        try:
            return session.get_json(source)
        except requests.exceptions.HTTPError as e:
            raise CatalogLoadError(str(source), f"HTTP error {e.response.status_code}") from e
        # requests' JSONDecodeError is both a ValueError and a RequestException
        except ValueError as e:
            raise CatalogParseError(f"catalog at {source} is not valid JSON: {e}") from e
        except requests.exceptions.RequestException as e:
            raise CatalogLoadError(str(source), str(e)) from e
        finally:
            if own_session:
                session.close()

    path = pathlib.Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(str(source), e.strerror or str(e)) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogParseError(f"catalog at {source} is not valid JSON: {e}") from e


def load_catalog(
    source: Union[str, pathlib.Path] = DEFAULT_CATALOG_PATH,
    session: Optional[CatalogSession] = None,
) -> Tuple[Recipe, ...]:
    """Load a recipe catalog from a JSON file or an HTTP(S) URL.

    Args:
        source: Local path or URL of the catalog document
        session: Session to use for URLs. A temporary one is created if omitted.

    Returns:
        Tuple of validated recipes in document order

    Raises:
        CatalogLoadError: If the file or URL cannot be read
        CatalogParseError: If the document is not a valid catalog

    Example:
        >>> catalog = load_catalog()
        >>> len(catalog)
        3
    """
    document = _read_document(source, session)
    catalog = parse_catalog(document)
    logger.info(f"Recipes loaded successfully: {len(catalog)} recipes found in {source}")
    return catalog


def catalog_index(catalog: Tuple[Recipe, ...]) -> Mapping[str, Recipe]:
    """Map recipe ids to recipes."""
    return {recipe.id: recipe for recipe in catalog}
