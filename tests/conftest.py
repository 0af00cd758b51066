import json

import pytest

from dishpilot.recipes import Recipe, RecipeIngredient


def make_recipe(recipe_id="r1", match_ingredients=("egg", "butter"), **overrides):
    fields = dict(
        id=recipe_id,
        name={"en": f"Recipe {recipe_id}"},
        match_ingredients=tuple(match_ingredients),
        ingredients=(
            RecipeIngredient(
                name={"en": "Eggs", "fr": "Oeufs"},
                qty={"metric": "3", "imperial": "3"},
            ),
            RecipeIngredient(
                name={"en": "Butter"},
                qty={"metric": "15 g", "imperial": "1 tbsp"},
            ),
        ),
        steps={"en": ("Whisk", "Cook")},
        leftover_handling={"en": "Keep the butter cold."},
        prep_time=5,
        cook_time=10,
        difficulty="Easy",
    )
    fields.update(overrides)
    return Recipe(**fields)


def recipe_record(recipe_id="r1", **overrides):
    record = {
        "id": recipe_id,
        "name": {"en": "Omelette", "fr": "Omelette"},
        "match_ingredients": ["egg", "butter"],
        "ingredients": [
            {"name": {"en": "Eggs"}, "qty": {"metric": "3", "imperial": "3"}},
            {"name": {"en": "Butter"}, "qty": {"metric": "15 g", "imperial": "1 tbsp"}},
        ],
        "steps": {"en": ["Whisk", "Cook"]},
        "leftover_handling": {"en": "Keep the butter cold."},
        "prep_time": 5,
        "cook_time": 5,
        "difficulty": "Easy",
    }
    record.update(overrides)
    return record


@pytest.fixture
def omelette():
    return make_recipe("omelette", ["egg", "butter"])


@pytest.fixture
def catalog():
    return (
        make_recipe("omelette", ["egg", "butter"]),
        make_recipe("pancakes", ["egg", "milk", "flour"]),
        make_recipe("salad", ["tomato", "onion", "parsley"]),
        make_recipe("scramble", ["Egg", "Butter"]),
    )


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(
        json.dumps([recipe_record("r1"), recipe_record("r2", match_ingredients=["tomato"])]),
        encoding="utf-8",
    )
    return path
