"""Tabular summaries of recipe matches."""

from typing import Iterable, Sequence

import pandas as pd

from .presentation import DEFAULT_LANGUAGE, build_card
from .recipes.models import RecipeMatch

COLUMNS = [
    "id",
    "title",
    "matched_count",
    "required_count",
    "match_percentage",
    "total_time",
    "difficulty",
    "unused_ingredients",
]


def matches_to_dataframe(
    matches: Sequence[RecipeMatch],
    available: Iterable[str],
    language: str = DEFAULT_LANGUAGE,
) -> pd.DataFrame:
    """Create a DataFrame with one row per matched recipe, in ranking order.

    Args:
        matches: Ranked matches
        available: Available ingredient names, used for the unused column
        language: Language for recipe titles

    Returns:
        DataFrame with the columns in COLUMNS. unused_ingredients is a
        comma-separated string.
    """
    available = list(available)
    rows = []
    for match in matches:
        card = build_card(match, available, language)
        rows.append(
            {
                "id": card.id,
                "title": card.title,
                "matched_count": card.matched_count,
                "required_count": card.required_count,
                "match_percentage": card.match_percentage,
                "total_time": card.total_time,
                "difficulty": card.difficulty,
                "unused_ingredients": ", ".join(card.unused_ingredients),
            }
        )
    return pd.DataFrame(rows, columns=COLUMNS)
