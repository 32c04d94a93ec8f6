"""
Base classes for status listeners.

Listeners are notified synchronously by the alarm state machine.
"""

from abc import ABC

from home_security.core.bus import Event, EventBus
from home_security.core.status import AlarmStatus


class StatusListener(ABC):
    """
    Base class for panel status listeners.

    Every hook is optional; override the ones you care about.
    """

    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        """
        React to the alarm status the state machine just persisted.

        Args:
            status: The persisted alarm status
        """
        pass

    def on_sensor_status_changed(self) -> None:
        """React to a sensor being added, removed, activated or deactivated."""
        pass

    def on_image_classified(self, contains_intruder: bool) -> None:
        """
        React to the result of a camera image classification.

        Args:
            contains_intruder: Whether the classifier found an intruder
        """
        pass


class EventBusStatusListener(StatusListener):
    """
    Republishes status notifications as events on an EventBus.

    Events Emitted:
    - alarm.status_changed: payload {"alarm_status": str}
    - sensor.status_changed: empty payload
    - image.classified: payload {"contains_intruder": bool}
    """

    def __init__(self, bus: EventBus, source: str = "alarm") -> None:
        self._bus = bus
        self._source = source

    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        self._bus.publish(
            Event(
                type="alarm.status_changed",
                source=self._source,
                payload={"alarm_status": status.value},
            )
        )

    def on_sensor_status_changed(self) -> None:
        self._bus.publish(Event(type="sensor.status_changed", source=self._source))

    def on_image_classified(self, contains_intruder: bool) -> None:
        self._bus.publish(
            Event(
                type="image.classified",
                source=self._source,
                payload={"contains_intruder": contains_intruder},
            )
        )
