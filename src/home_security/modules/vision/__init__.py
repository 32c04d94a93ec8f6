"""
Vision module for home-security.

Wraps the camera image classifier consulted by the alarm state machine.
No real image processing happens here; FakeImageClassifier stands in for
a model-backed implementation.
"""

from .classifier import ImageClassifier, FakeImageClassifier

__all__ = [
    "ImageClassifier",
    "FakeImageClassifier",
]
