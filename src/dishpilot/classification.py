"""Interface to the external image classifier."""

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Iterable, List


@dataclasses.dataclass(frozen=True)
class Prediction:
    class_name: str
    probability: float


class ImageClassifier(ABC):
    """Abstract base class for pretrained image classifiers.

    Implementations wrap a third-party model. Only the returned class
    names are used downstream.
    """

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """Return True once the model is loaded and can classify."""
        pass

    @abstractmethod
    def classify(self, image: Any, top_k: int = 5) -> List[Prediction]:
        """Classify an image.

        Args:
            image: Image in whatever form the model accepts
            top_k: Number of predictions to return

        Returns:
            Predictions ordered by probability, highest first
        """
        pass


def labels_from_predictions(predictions: Iterable[Prediction]) -> List[str]:
    """Extract the raw class names from classifier predictions."""
    return [prediction.class_name for prediction in predictions]
