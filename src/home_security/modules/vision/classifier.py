"""Image classifier port and a stub implementation."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import logging
import random

logger = logging.getLogger(__name__)


class ImageClassifier(ABC):
    """
    Decides whether a camera image shows an intruder.

    Implementations must be free of side effects from the caller's point of view.
    """

    @abstractmethod
    def contains_intruder(self, image: Any, confidence_threshold: float) -> bool:
        """
        Classify an image.

        Args:
            image: Opaque image object (whatever the camera feed produces)
            confidence_threshold: Minimum confidence (0-100) for a positive result

        Returns:
            True if an intruder was found with at least the given confidence
        """
        pass


class FakeImageClassifier(ImageClassifier):
    """
    Stub classifier that ignores the image and flips a coin.

    Pass a seed for repeatable results.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def contains_intruder(self, image: Any, confidence_threshold: float) -> bool:
        result = self._random.random() > 0.5
        logger.debug(f"Fake classification (threshold={confidence_threshold}): {result}")
        return result
