"""Runtime settings with environment variable overrides."""

import dataclasses
import os
import pathlib
from typing import Any, Mapping, Optional, Union

from .exceptions import ConfigurationError
from .presentation.localization import DEFAULT_LANGUAGE
from .presentation.units import DEFAULT_UNIT_SYSTEM, UnitSystem
from .recipes.catalog import DEFAULT_CATALOG_PATH
from .recipes.matching import DEFAULT_MATCH_THRESHOLD

ENV_PREFIX = "DISHPILOT_"


def check_language(language: Any) -> str:
    """Return a language code stripped and lowercased.

    Raises:
        ConfigurationError: If the code is not a non-empty string
    """
    if not isinstance(language, str) or not language.strip():
        raise ConfigurationError(f"language must be a non-empty string, got {language!r}")
    return language.strip().lower()


def check_match_threshold(threshold: Any) -> float:
    """Return the match threshold as a float.

    Raises:
        ConfigurationError: If the value is not a number between 0 and 1
    """
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ConfigurationError(f"match_threshold must be a number, got {threshold!r}")
    if not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(f"match_threshold must be between 0 and 1, got {threshold}")
    return float(threshold)


@dataclasses.dataclass
class Settings:
    """Settings for a recommendation session.

    Attributes:
        catalog: Path or URL of the recipe catalog
        language: Language code for display text
        match_threshold: Minimum share of match ingredients a recipe needs
        unit_system: Unit system for ingredient quantities
    """

    catalog: Union[str, pathlib.Path] = DEFAULT_CATALOG_PATH
    language: str = DEFAULT_LANGUAGE
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    unit_system: UnitSystem = DEFAULT_UNIT_SYSTEM

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check and normalize field values.

        Raises:
            ConfigurationError: If a value is out of range or unknown
        """
        self.unit_system = UnitSystem.parse(self.unit_system)
        self.language = check_language(self.language)
        self.match_threshold = check_match_threshold(self.match_threshold)

    def replace(self, **changes) -> "Settings":
        """Return a copy with the given fields changed; None values are ignored."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from DISHPILOT_* environment variables.

        Recognized variables: DISHPILOT_CATALOG, DISHPILOT_LANGUAGE,
        DISHPILOT_MATCH_THRESHOLD and DISHPILOT_UNIT_SYSTEM. Unset
        variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get(ENV_PREFIX + "CATALOG"):
            values["catalog"] = environ[ENV_PREFIX + "CATALOG"]
        if environ.get(ENV_PREFIX + "LANGUAGE"):
            values["language"] = environ[ENV_PREFIX + "LANGUAGE"]
        if environ.get(ENV_PREFIX + "UNIT_SYSTEM"):
            values["unit_system"] = environ[ENV_PREFIX + "UNIT_SYSTEM"]
        raw_threshold = environ.get(ENV_PREFIX + "MATCH_THRESHOLD")
        if raw_threshold:
            try:
                values["match_threshold"] = float(raw_threshold)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_PREFIX}MATCH_THRESHOLD must be a number, got {raw_threshold!r}"
                ) from None
        return cls(**values)
