"""AlarmStateMachine - derive alarm status from sensors, arming and camera."""

import logging
import threading
from typing import Any, Dict, List, Optional, Set

from home_security.core.sensor import Sensor
from home_security.core.status import AlarmStatus, ArmingStatus
from home_security.core.store import SensorStore
from home_security.modules.base import StatusListener
from home_security.modules.vision import ImageClassifier

from .models import AlarmConfig

logger = logging.getLogger(__name__)


class AlarmStateMachine:
    """
    Alarm state machine for the security panel.

    Owns the listener set and the most recent image classification result.
    Arming status, alarm status and sensors live in the SensorStore, which is
    re-read before every decision.

    Alarm states:
    - NO_ALARM: nothing suspicious
    - PENDING_ALARM: a sensor tripped while armed
    - ALARM: a second activation, or an intruder on camera while armed home

    Every public operation runs under one re-entrant lock, so a
    read-decide-persist-notify sequence for one event completes before the
    next begins. Listeners are called inside the lock and may read back.
    """

    CURRENT_CONFIG_VERSION = 1

    def __init__(
        self,
        store: SensorStore,
        classifier: ImageClassifier,
        config: Optional[Dict] = None,
    ) -> None:
        """
        Initialize the state machine.

        Args:
            store: Authoritative store for sensors and status
            classifier: Camera image classifier
            config: Optional configuration dict (see default_config())
        """
        self._store = store
        self._classifier = classifier
        self._config = AlarmConfig.from_dict(self.migrate_config(dict(config or {})))
        self._listeners: List[StatusListener] = []
        self._intruder_detected = False
        self._lock = threading.RLock()

        logger.info(
            f"AlarmStateMachine started: arming={store.get_arming_status().value}, "
            f"alarm={store.get_alarm_status().value}"
        )

    # =========================================================================
    # Configuration
    # =========================================================================

    def default_config(self) -> Dict:
        """Default configuration."""
        return AlarmConfig().to_dict()

    def config_schema(self) -> Dict:
        """JSON schema for UI configuration."""
        return {
            "type": "object",
            "properties": {
                "version": {"type": "integer", "default": 1},
                "confidence_threshold": {
                    "type": "number",
                    "title": "Intruder Confidence Threshold (%)",
                    "description": "Minimum classifier confidence to treat an image as an intruder",
                    "minimum": 0,
                    "maximum": 100,
                    "default": 50.0,
                },
            },
        }

    def migrate_config(self, config: Dict) -> Dict:
        """Migrate configuration from older versions."""
        version = config.get("version", self.CURRENT_CONFIG_VERSION)
        if version == self.CURRENT_CONFIG_VERSION:
            return config

        # No migrations yet (v1 is first version)
        config["version"] = self.CURRENT_CONFIG_VERSION
        return config

    def update_config(self, config: Dict) -> None:
        """
        Replace the configuration.

        Raises:
            ValueError: If the confidence threshold is out of range
        """
        new_config = AlarmConfig.from_dict(self.migrate_config(dict(config)))
        with self._lock:
            self._config = new_config
        logger.info(f"Alarm config updated: {new_config.to_dict()}")

    @property
    def config(self) -> AlarmConfig:
        return self._config

    @property
    def intruder_detected(self) -> bool:
        """Result of the most recent image classification."""
        return self._intruder_detected

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a listener (no-op if already registered)."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        """Unregister a listener (no-op if not registered)."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # =========================================================================
    # Reads
    # =========================================================================

    def get_arming_status(self) -> ArmingStatus:
        with self._lock:
            return self._store.get_arming_status()

    def get_alarm_status(self) -> AlarmStatus:
        with self._lock:
            return self._store.get_alarm_status()

    def get_sensors(self) -> Set[Sensor]:
        with self._lock:
            return self._store.get_sensors()

    # =========================================================================
    # Sensor management
    # =========================================================================

    def add_sensor(self, sensor: Sensor) -> None:
        """
        Add a sensor to the store.

        Raises:
            ValueError: If sensor is None or already known
        """
        if sensor is None:
            raise ValueError("Sensor is required")

        with self._lock:
            self._store.add_sensor(sensor)
            logger.info(f"Added sensor {sensor}")
            self._notify_sensor_status_changed()

    def remove_sensor(self, sensor: Sensor) -> None:
        """
        Remove a sensor from the store.

        Raises:
            ValueError: If sensor is None or unknown
        """
        if sensor is None:
            raise ValueError("Sensor is required")

        with self._lock:
            self._store.remove_sensor(sensor)
            logger.info(f"Removed sensor {sensor}")
            self._notify_sensor_status_changed()

    # =========================================================================
    # Events
    # =========================================================================

    def set_arming_status(self, status: ArmingStatus) -> None:
        """
        Change the arming status.

        Disarming clears the alarm. Arming resets every sensor to inactive
        without running activation rules; arming home while the last camera
        image showed an intruder raises the alarm.

        Args:
            status: New arming status
        """
        with self._lock:
            sensors_reset = False

            if status is ArmingStatus.DISARMED:
                self._store.set_alarm_status(AlarmStatus.NO_ALARM)
            else:
                for sensor in self._store.get_sensors():
                    sensor.active = False
                    self._store.update_sensor(sensor)
                sensors_reset = True

                if status is ArmingStatus.ARMED_HOME and self._intruder_detected:
                    self._store.set_alarm_status(AlarmStatus.ALARM)

            self._store.set_arming_status(status)
            alarm_status = self._store.get_alarm_status()
            logger.info(f"Arming status set to {status.value} (alarm={alarm_status.value})")

            self._notify_alarm_status_changed(alarm_status)
            if sensors_reset:
                self._notify_sensor_status_changed()

    def change_sensor_activation_status(
        self, sensor: Sensor, active: Optional[bool] = None
    ) -> None:
        """
        Report a sensor event and derive the alarm status from it.

        With `active`, this is a hardware report: the stored flag is the
        previous state and `active` the new one. Without it, the alarm status
        is re-evaluated from the flag currently held by the store, which is
        not written.

        Args:
            sensor: A sensor known to the store
            active: New active flag, or None to re-evaluate

        Raises:
            ValueError: If sensor is None or unknown
        """
        with self._lock:
            stored = self._require_sensor(sensor)
            if active is None:
                target = self._reevaluate(stored)
            else:
                target = self._handle_activation(stored, sensor, active)

            if target is not None:
                self._set_alarm_status(target)
            self._notify_sensor_status_changed()

    def process_image(self, image: Any) -> None:
        """
        Classify a camera image and derive the alarm status from it.

        The result is remembered for the next set_arming_status() call.

        Args:
            image: Opaque image object handed to the classifier
        """
        with self._lock:
            contains_intruder = self._classifier.contains_intruder(
                image, self._config.confidence_threshold
            )
            self._intruder_detected = contains_intruder
            logger.debug(f"Image classified: contains_intruder={contains_intruder}")

            target = None
            if contains_intruder:
                if self._store.get_arming_status() is ArmingStatus.ARMED_HOME:
                    target = AlarmStatus.ALARM
            elif not any(s.active for s in self._store.get_sensors()):
                target = AlarmStatus.NO_ALARM

            if target is not None:
                self._set_alarm_status(target)
            self._notify_image_classified(contains_intruder)

    # =========================================================================
    # Transition rules
    # =========================================================================

    def _handle_activation(
        self, stored: Sensor, sensor: Sensor, active: bool
    ) -> Optional[AlarmStatus]:
        """Apply a hardware report; return the alarm status to set, if any."""
        was_active = stored.active
        alarm = self._store.get_alarm_status()
        armed = self._store.get_arming_status().is_armed
        others_active = self._others_active(sensor)

        sensor.active = active
        self._store.update_sensor(sensor)
        logger.debug(f"Sensor {sensor}: {was_active} -> {active} (alarm={alarm.value})")

        # An active alarm ignores further sensor chatter
        if alarm is AlarmStatus.ALARM:
            return None

        if active:
            if not armed:
                return None
            if alarm is AlarmStatus.PENDING_ALARM:
                return AlarmStatus.ALARM
            if not was_active:
                return AlarmStatus.PENDING_ALARM
            return None

        if was_active and alarm is AlarmStatus.PENDING_ALARM and not others_active:
            return AlarmStatus.NO_ALARM
        return None

    def _reevaluate(self, stored: Sensor) -> Optional[AlarmStatus]:
        """Re-derive alarm status from the stored flag; the flag is left as is."""
        alarm = self._store.get_alarm_status()
        arming = self._store.get_arming_status()
        logger.debug(
            f"Re-evaluating sensor {stored}: active={stored.active} "
            f"(arming={arming.value}, alarm={alarm.value})"
        )

        if alarm is AlarmStatus.ALARM:
            # Disarmed panels step an alarm down instead of clearing it
            if arming is ArmingStatus.DISARMED and not stored.active:
                return AlarmStatus.PENDING_ALARM
            return None

        if stored.active:
            if not arming.is_armed:
                return None
            if alarm is AlarmStatus.PENDING_ALARM:
                return AlarmStatus.ALARM
            return AlarmStatus.PENDING_ALARM

        if alarm is AlarmStatus.PENDING_ALARM and not self._others_active(stored):
            return AlarmStatus.NO_ALARM
        return None

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_sensor(self, sensor: Sensor) -> Sensor:
        if sensor is None:
            raise ValueError("Sensor is required")

        for stored in self._store.get_sensors():
            if stored == sensor:
                return stored
        raise ValueError(f"Sensor {sensor} not found")

    def _others_active(self, sensor: Sensor) -> bool:
        return any(s.active for s in self._store.get_sensors() if s != sensor)

    def _set_alarm_status(self, status: AlarmStatus) -> None:
        previous = self._store.get_alarm_status()
        self._store.set_alarm_status(status)
        logger.info(f"Alarm status: {previous.value} -> {status.value}")
        self._notify_alarm_status_changed(status)

    def _notify_alarm_status_changed(self, status: AlarmStatus) -> None:
        for listener in list(self._listeners):
            self._dispatch(listener, "on_alarm_status_changed", status)

    def _notify_sensor_status_changed(self) -> None:
        for listener in list(self._listeners):
            self._dispatch(listener, "on_sensor_status_changed")

    def _notify_image_classified(self, contains_intruder: bool) -> None:
        for listener in list(self._listeners):
            self._dispatch(listener, "on_image_classified", contains_intruder)

    def _dispatch(self, listener: StatusListener, hook: str, *args: Any) -> None:
        try:
            getattr(listener, hook)(*args)
        except Exception as e:
            logger.error(f"Error in status listener {listener!r} during {hook}: {e}", exc_info=True)
