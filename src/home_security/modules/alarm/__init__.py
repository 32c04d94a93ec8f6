"""
Alarm module for home-security.

Derives the panel's alarm status from sensor events, arming changes and
camera image classifications.

Rules:
- Armed + sensor activated: NO_ALARM -> PENDING_ALARM -> ALARM
- PENDING_ALARM + last active sensor deactivated: back to NO_ALARM
- ALARM ignores sensor reports (re-evaluation while disarmed steps it down to PENDING_ALARM)
- Disarming: NO_ALARM
- Arming home after the camera last saw an intruder: ALARM
- Intruder on camera while armed home: ALARM
- No intruder on camera and no active sensors: NO_ALARM

Notifications:
- StatusListener.on_alarm_status_changed
- StatusListener.on_sensor_status_changed
- StatusListener.on_image_classified
"""

from .module import AlarmStateMachine
from .models import AlarmConfig

__all__ = [
    "AlarmStateMachine",
    "AlarmConfig",
]
