"""
Core components of the home-security panel.

This package contains:
- bus: Event Bus implementation
- sensor: Sensor dataclass and SensorType
- status: ArmingStatus and AlarmStatus
- store: SensorStore port and its implementations
"""

from home_security.core.sensor import Sensor, SensorType
from home_security.core.status import AlarmStatus, ArmingStatus
from home_security.core.bus import Event, EventBus, EventFilter
from home_security.core.store import SensorStore, InMemorySensorStore, JsonFileSensorStore

__all__ = [
    "Sensor",
    "SensorType",
    "AlarmStatus",
    "ArmingStatus",
    "Event",
    "EventBus",
    "EventFilter",
    "SensorStore",
    "InMemorySensorStore",
    "JsonFileSensorStore",
]
