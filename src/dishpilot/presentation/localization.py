"""Lookups with fallback for localized and per-unit catalog fields."""

import logging
from typing import Mapping, Tuple, TypeVar

from ..exceptions import MissingLocalization
from ..recipes.models import RecipeIngredient
from .units import DEFAULT_UNIT_SYSTEM, UnitSystem

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

T = TypeVar("T")


def _lookup_with_fallback(
    mapping: Mapping[str, T], key: str, default_key: str, what: str
) -> Tuple[str, T]:
    if key in mapping:
        return key, mapping[key]
    if default_key in mapping:
        logger.debug(f"No {what} for {key!r}, falling back to {default_key!r}")
        return default_key, mapping[default_key]
    for first_key, value in mapping.items():
        logger.debug(f"No {what} for {key!r} or {default_key!r}, using {first_key!r}")
        return first_key, value
    raise MissingLocalization(f"No {what} available (requested {key!r})")


def localize(mapping: Mapping[str, T], language: str = DEFAULT_LANGUAGE) -> T:
    """Pick the entry for a language from a language-keyed mapping.

    The fallback chain is: the requested language, then English, then the
    first language present in the mapping.

    Args:
        mapping: Language code -> value
        language: Requested language code

    Returns:
        The localized value

    Raises:
        MissingLocalization: If the mapping is empty

    Examples:
        >>> localize({"en": "Omelette", "fr": "Omelette"}, "fr")
        "Omelette"
        >>> localize({"en": "Tomato soup"}, "de")
        "Tomato soup"
    """
    return _lookup_with_fallback(mapping, language, DEFAULT_LANGUAGE, "translation")[1]


def quantity_for(
    ingredient: RecipeIngredient, unit_system: UnitSystem = DEFAULT_UNIT_SYSTEM
) -> Tuple[str, UnitSystem]:
    """Return an ingredient quantity in the requested unit system.

    Falls back to metric, then to whatever unit system the catalog gives.

    Returns:
        The quantity string and the unit system it is expressed in

    Raises:
        MissingLocalization: If the ingredient has no quantities at all
    """
    key, quantity = _lookup_with_fallback(
        ingredient.qty, UnitSystem.parse(unit_system).value, DEFAULT_UNIT_SYSTEM.value, "quantity"
    )
    try:
        used = UnitSystem(key)
    except ValueError:
        # Catalog used a unit key we do not model; report it as requested
        used = UnitSystem.parse(unit_system)
    return quantity, used
