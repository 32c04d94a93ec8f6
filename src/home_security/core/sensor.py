"""
Sensor dataclass and helpers.

A Sensor is a binary device report (active/inactive) of one physical type.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any


class SensorType(Enum):
    """Physical kind of sensor."""

    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


@dataclass(unsafe_hash=True)
class Sensor:
    """
    A sensor known to the security panel.

    Two sensors are the same entity when name and type match; the
    active flag is excluded from equality and hashing.

    Attributes:
        name: Human-readable name (e.g., "Front Door")
        sensor_type: Physical kind of sensor
        active: Whether the sensor currently reports activity
    """

    name: str
    sensor_type: SensorType
    active: bool = field(default=False, compare=False)

    @property
    def key(self) -> tuple:
        """Identity key used by stores."""
        return (self.name, self.sensor_type)

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return (self.name, self.sensor_type.value) < (other.name, other.sensor_type.value)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "name": self.name,
            "sensor_type": self.sensor_type.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sensor":
        """
        Deserialize from dict.

        Raises:
            ValueError: If the entry is not a dict, the name is missing or
                the type is unknown
        """
        if not isinstance(data, dict):
            raise ValueError(f"Sensor entry must be a dict, got {data!r}")
        name = data.get("name")
        if not name:
            raise ValueError(f"Sensor entry has no name: {data}")
        return cls(
            name=name,
            sensor_type=SensorType(data.get("sensor_type")),
            active=bool(data.get("active", False)),
        )

    def __str__(self) -> str:
        return f"'{self.name}' ({self.sensor_type.value})"
