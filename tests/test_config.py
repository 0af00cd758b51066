import pytest

from dishpilot.config import Settings
from dishpilot.exceptions import ConfigurationError
from dishpilot.presentation import UnitSystem
from dishpilot.recipes import DEFAULT_CATALOG_PATH, DEFAULT_MATCH_THRESHOLD


def test_defaults():
    settings = Settings()
    assert settings.catalog == DEFAULT_CATALOG_PATH
    assert settings.language == "en"
    assert settings.match_threshold == DEFAULT_MATCH_THRESHOLD == 0.7
    assert settings.unit_system is UnitSystem.METRIC


def test_from_env():
    settings = Settings.from_env(
        {
            "DISHPILOT_CATALOG": "https://example.com/recipes.json",
            "DISHPILOT_LANGUAGE": "ES",
            "DISHPILOT_MATCH_THRESHOLD": "0.3",
            "DISHPILOT_UNIT_SYSTEM": "Imperial",
        }
    )
    assert settings.catalog == "https://example.com/recipes.json"
    assert settings.language == "es"
    assert settings.match_threshold == 0.3
    assert settings.unit_system is UnitSystem.IMPERIAL


def test_from_env_ignores_unset_values():
    assert Settings.from_env({"DISHPILOT_LANGUAGE": ""}) == Settings()


def test_from_env_rejects_bad_threshold():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"DISHPILOT_MATCH_THRESHOLD": "high"})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"match_threshold": 1.5},
        {"match_threshold": -0.1},
        {"match_threshold": "0.5"},
        {"language": "  "},
        {"unit_system": "cubits"},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ConfigurationError):
        Settings(**kwargs)


def test_replace_skips_none():
    settings = Settings().replace(language=None, match_threshold=0.0, unit_system="imperial")
    assert settings.language == "en"
    assert settings.match_threshold == 0.0
    assert settings.unit_system is UnitSystem.IMPERIAL
