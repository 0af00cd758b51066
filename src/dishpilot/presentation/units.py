"""Unit systems for displaying ingredient quantities."""

import enum
from typing import Union

from ..exceptions import ConfigurationError


class UnitSystem(str, enum.Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "UnitSystem":
        """Return the other unit system."""
        if self is UnitSystem.METRIC:
            return UnitSystem.IMPERIAL
        return UnitSystem.METRIC

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union[str, "UnitSystem"]) -> "UnitSystem":
        """Parse a unit system name, ignoring case and surrounding whitespace.

        Raises:
            ConfigurationError: If the name is not a known unit system
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Unknown unit system {value!r}; expected one of: {choices}"
            ) from None


DEFAULT_UNIT_SYSTEM = UnitSystem.METRIC
