"""DishPilot - Recipe recommendations from recognized ingredients."""

__version__ = "0.1.0"

from . import classification, fetching, ingredients, presentation, recipes
from .config import Settings
from .session import SIMULATED_INGREDIENTS, RecognitionResult, Session

__all__ = [
    "classification",
    "fetching",
    "ingredients",
    "presentation",
    "recipes",
    "Settings",
    "Session",
    "RecognitionResult",
    "SIMULATED_INGREDIENTS",
]
