import pandas as pd

from dishpilot.recipes import find_matching_recipes
from dishpilot.reporting import COLUMNS, matches_to_dataframe


def test_matches_to_dataframe(catalog):
    available = {"egg", "butter", "milk"}
    matches = find_matching_recipes(available, catalog, threshold=0.5)
    df = matches_to_dataframe(matches, available)

    assert list(df.columns) == COLUMNS
    assert df["id"].tolist() == ["omelette", "scramble", "pancakes"]
    assert df["match_percentage"].is_monotonic_decreasing
    assert df.loc[0, "unused_ingredients"] == "milk"
    assert df.loc[2, "matched_count"] == 2
    assert df.loc[2, "required_count"] == 3


def test_matches_to_dataframe_empty():
    df = matches_to_dataframe([], {"egg"})
    assert isinstance(df, pd.DataFrame)
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_export_columns():
    assert COLUMNS == [
        "id",
        "title",
        "matched_count",
        "required_count",
        "match_percentage",
        "total_time",
        "difficulty",
        "unused_ingredients",
    ]
