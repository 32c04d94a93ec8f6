"""
Data models for the alarm module.

Defines the alarm state machine configuration.
"""

from dataclasses import dataclass


@dataclass
class AlarmConfig:
    """Configuration for the alarm state machine."""

    version: int = 1
    confidence_threshold: float = 50.0  # Percent confidence for an intruder match

    def __post_init__(self) -> None:
        """Reject thresholds outside 0-100."""
        if not 0.0 <= self.confidence_threshold <= 100.0:
            raise ValueError(
                f"confidence_threshold must be between 0 and 100, got {self.confidence_threshold}"
            )

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "version": self.version,
            "confidence_threshold": self.confidence_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AlarmConfig":
        """Deserialize from dict."""
        raw_threshold = data.get("confidence_threshold", 50.0)
        try:
            threshold = float(raw_threshold)
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"confidence_threshold must be a number, got {raw_threshold!r}"
            ) from e

        return cls(
            version=data.get("version", 1),
            confidence_threshold=threshold,
        )
