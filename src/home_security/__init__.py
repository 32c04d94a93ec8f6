"""
home-security: the alarm core of a home security monitoring panel.

This library provides:
- Sensor store (in-memory or JSON file)
- Alarm state machine driven by sensors, arming and camera images
- Status listeners and a synchronous Event Bus
"""

from home_security.core.sensor import Sensor, SensorType
from home_security.core.status import AlarmStatus, ArmingStatus
from home_security.core.bus import Event, EventBus, EventFilter
from home_security.core.store import SensorStore, InMemorySensorStore, JsonFileSensorStore
from home_security.modules.base import StatusListener, EventBusStatusListener
from home_security.modules.alarm import AlarmStateMachine, AlarmConfig
from home_security.modules.vision import ImageClassifier, FakeImageClassifier

__version__ = "0.1.0"

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
    "StatusListener",
    "EventBusStatusListener",
    "AlarmStateMachine",
    "AlarmConfig",
    "ImageClassifier",
    "FakeImageClassifier",
]
