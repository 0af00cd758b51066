import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from dishpilot.exceptions import CatalogLoadError, CatalogParseError, InvalidRecipeError
from dishpilot.fetching import CatalogSession
from dishpilot.recipes.catalog import (
    DEFAULT_CATALOG_PATH,
    load_catalog,
    parse_catalog,
    parse_recipe,
)

from conftest import recipe_record


def test_load_catalog_from_file(catalog_file):
    catalog = load_catalog(catalog_file)
    assert [recipe.id for recipe in catalog] == ["r1", "r2"]
    assert catalog[0].match_ingredients == ("egg", "butter")
    assert catalog[0].steps["en"] == ("Whisk", "Cook")
    assert catalog[0].ingredients[1].qty["imperial"] == "1 tbsp"


def test_load_bundled_catalog():
    catalog = load_catalog(DEFAULT_CATALOG_PATH)
    assert len(catalog) == 3
    assert all(recipe.match_ingredients for recipe in catalog)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogLoadError) as excinfo:
        load_catalog(tmp_path / "missing.json")
    assert "missing.json" in excinfo.value.source


def test_load_catalog_invalid_json(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(CatalogParseError):
        load_catalog(path)


def test_parse_catalog_accepts_wrapped_document():
    catalog = parse_catalog({"recipes": [recipe_record("r1")]})
    assert catalog[0].id == "r1"


@pytest.mark.parametrize("document", [{"id": "r1"}, "recipes", 42, None])
def test_parse_catalog_rejects_wrong_shape(document):
    with pytest.raises(CatalogParseError):
        parse_catalog(document)


def test_parse_catalog_rejects_duplicate_ids():
    with pytest.raises(InvalidRecipeError) as excinfo:
        parse_catalog([recipe_record("r1"), recipe_record("r1")])
    assert excinfo.value.index == 1
    assert excinfo.value.recipe_id == "r1"


@pytest.mark.parametrize(
    "field",
    ["name", "match_ingredients", "ingredients", "steps", "leftover_handling", "prep_time", "cook_time", "difficulty"],
)
def test_parse_recipe_missing_field(field):
    record = recipe_record("r1")
    del record[field]
    with pytest.raises(InvalidRecipeError, match=field):
        parse_recipe(record, 3)


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": ""},
        {"match_ingredients": "egg"},
        {"name": {"en": 1}},
        {"prep_time": "5"},
        {"cook_time": -1},
        {"prep_time": True},
        {"steps": ["Whisk"]},
        {"ingredients": [{"name": {"en": "Eggs"}}]},
        {"difficulty": 2},
        {"name": {}},
        {"leftover_handling": {}},
        {"steps": {}},
        {"ingredients": [{"name": {"en": "Eggs"}, "qty": {}}]},
        {"ingredients": [{"name": {}, "qty": {"metric": "3"}}]},
    ],
)
def test_parse_recipe_invalid_values(overrides):
    with pytest.raises(InvalidRecipeError):
        parse_recipe(recipe_record("r1", **overrides))


def test_parse_recipe_rejects_non_object():
    with pytest.raises(InvalidRecipeError):
        parse_recipe(["r1"])


def test_parse_recipe_allows_empty_match_ingredients():
    recipe = parse_recipe(recipe_record("r1", match_ingredients=[]))
    assert recipe.match_ingredients == ()


def _response(status_code=200, body=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    response.json.return_value = body
    return response


@patch("requests.Session.get")
def test_load_catalog_from_url(mock_get):
    mock_get.return_value = _response(body=[recipe_record("r1")])
    catalog = load_catalog("https://example.com/recipes.json")
    assert [recipe.id for recipe in catalog] == ["r1"]
    assert mock_get.call_args.kwargs["timeout"] == 30


@patch("requests.Session.get")
def test_load_catalog_http_error(mock_get):
    mock_get.return_value = _response(status_code=404)
    with pytest.raises(CatalogLoadError, match="404"):
        load_catalog("https://example.com/recipes.json")


@patch("requests.Session.get")
def test_load_catalog_connection_error(mock_get):
    mock_get.side_effect = requests.exceptions.ConnectionError("offline")
    session = CatalogSession(max_retries=2, retry_delay=0)
    with pytest.raises(CatalogLoadError):
        load_catalog("https://example.com/recipes.json", session=session)
    assert mock_get.call_count == 2


@patch("requests.Session.get")
def test_load_catalog_url_invalid_json(mock_get):
    response = _response()
    response.json.side_effect = ValueError("Expecting value")
    mock_get.return_value = response
    with pytest.raises(CatalogParseError):
        load_catalog("https://example.com/recipes.json")


def test_load_catalog_round_trips_bundled_data():
    raw = json.loads(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))
    catalog = load_catalog()
    assert [recipe.id for recipe in catalog] == [record["id"] for record in raw]


def test_parsed_recipes_are_read_only():
    (recipe,) = parse_catalog([recipe_record("r1")])
    with pytest.raises(TypeError):
        recipe.name["en"] = "changed"
    with pytest.raises(TypeError):
        recipe.ingredients[0].qty["metric"] = "4"
    with pytest.raises(TypeError):
        recipe.steps["en"] = ("Skip it",)
    assert recipe.name["en"] == "Omelette"


def test_parsed_recipes_do_not_share_the_source_document():
    record = recipe_record("r1")
    (recipe,) = parse_catalog([record])
    record["name"]["en"] = "changed"
    record["steps"]["en"].append("Serve")
    assert recipe.name["en"] == "Omelette"
    assert recipe.steps["en"] == ("Whisk", "Cook")


def test_recipes_are_hashable():
    first, second = parse_catalog([recipe_record("r1"), recipe_record("r2")])
    assert len({first, second, first}) == 2
