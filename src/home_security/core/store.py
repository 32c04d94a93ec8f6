"""
SensorStore port and its implementations.

The store owns the sensors and the panel-wide arming/alarm status, not the
behavior. The alarm state machine treats it as authoritative and re-reads it
before every decision.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Set, Tuple, Union
import json
import logging

from home_security.core.sensor import Sensor, SensorType
from home_security.core.status import AlarmStatus, ArmingStatus

logger = logging.getLogger(__name__)


class SensorStore(ABC):
    """
    Persistence port for sensors and panel status.

    Implementations decide how (and whether) state survives a restart.
    """

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Return all known sensors."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """
        Add a sensor.

        Raises:
            ValueError: If an equal sensor is already stored
        """
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """
        Remove a sensor.

        Raises:
            ValueError: If the sensor is not stored
        """
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """
        Persist the active flag of a stored sensor.

        Raises:
            ValueError: If the sensor is not stored
        """
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        pass

    @abstractmethod
    def set_arming_status(self, status: ArmingStatus) -> None:
        pass

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        pass

    @abstractmethod
    def set_alarm_status(self, status: AlarmStatus) -> None:
        pass


class InMemorySensorStore(SensorStore):
    """
    Dict-backed store that lives for the process lifetime.

    get_sensors() hands out the stored instances, so a caller that flips
    `active` on one of them must report it through update_sensor() (the
    state machine does this for you).
    """

    def __init__(
        self,
        arming_status: ArmingStatus = ArmingStatus.DISARMED,
        alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
    ) -> None:
        """
        Initialize an empty store.

        Args:
            arming_status: Initial arming status
            alarm_status: Initial alarm status
        """
        self._sensors: Dict[Tuple[str, SensorType], Sensor] = {}
        self._arming_status = arming_status
        self._alarm_status = alarm_status

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def get_sensor(self, name: str, sensor_type: SensorType) -> Optional[Sensor]:
        """
        Get a stored sensor by identity.

        Returns:
            The stored Sensor or None if not found
        """
        return self._sensors.get((name, sensor_type))

    def add_sensor(self, sensor: Sensor) -> None:
        if sensor.key in self._sensors:
            raise ValueError(f"Sensor {sensor} already exists")

        self._sensors[sensor.key] = sensor
        logger.debug(f"Stored sensor {sensor}")

    def remove_sensor(self, sensor: Sensor) -> None:
        if sensor.key not in self._sensors:
            raise ValueError(f"Sensor {sensor} not found")

        del self._sensors[sensor.key]
        logger.debug(f"Removed sensor {sensor}")

    def update_sensor(self, sensor: Sensor) -> None:
        stored = self._sensors.get(sensor.key)
        if stored is None:
            raise ValueError(f"Sensor {sensor} not found")

        stored.active = sensor.active

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, status: ArmingStatus) -> None:
        self._arming_status = status

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        self._alarm_status = status

    def dump_state(self) -> Dict[str, Any]:
        """
        Serialize the store for persistence.

        Returns:
            Dict with arming_status, alarm_status and sensors
        """
        return {
            "arming_status": self._arming_status.value,
            "alarm_status": self._alarm_status.value,
            "sensors": [s.to_dict() for s in sorted(self._sensors.values())],
        }

    def restore_state(self, state: Dict[str, Any]) -> None:
        """
        Replace the store contents with previously dumped state.

        Missing keys fall back to the current values.

        Args:
            state: Dict produced by dump_state()

        Raises:
            ValueError: If a status value or sensor entry is invalid
        """
        if not isinstance(state, dict):
            raise ValueError(f"Store state must be a dict, got {type(state).__name__}")

        arming_status = ArmingStatus(state.get("arming_status", self._arming_status.value))
        alarm_status = AlarmStatus(state.get("alarm_status", self._alarm_status.value))
        entries = state.get("sensors", [])
        if not isinstance(entries, list):
            raise ValueError(f"Store sensors must be a list, got {type(entries).__name__}")
        sensors = [Sensor.from_dict(entry) for entry in entries]

        self._arming_status = arming_status
        self._alarm_status = alarm_status
        self._sensors = {s.key: s for s in sensors}
        logger.info(
            f"Restored store: {arming_status.value}, {alarm_status.value}, "
            f"{len(self._sensors)} sensors"
        )


class JsonFileSensorStore(InMemorySensorStore):
    """
    In-memory store mirrored to a JSON file.

    The file is read once at construction and rewritten after every mutation.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize the store from a JSON file.

        Args:
            path: File to load from and save to (created on first save)

        Raises:
            ValueError: If the file holds invalid JSON or invalid values
        """
        super().__init__()
        self._path = Path(path)

        if self._path.exists():
            try:
                state = json.loads(self._path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid store file {self._path}: {e}") from e
            try:
                self.restore_state(state)
            except ValueError as e:
                raise ValueError(f"Invalid store file {self._path}: {e}") from e
        else:
            logger.warning(f"Store file {self._path} not found; starting empty")

    @property
    def path(self) -> Path:
        return self._path

    def add_sensor(self, sensor: Sensor) -> None:
        super().add_sensor(sensor)
        self._save()

    def remove_sensor(self, sensor: Sensor) -> None:
        super().remove_sensor(sensor)
        self._save()

    def update_sensor(self, sensor: Sensor) -> None:
        super().update_sensor(sensor)
        self._save()

    def set_arming_status(self, status: ArmingStatus) -> None:
        super().set_arming_status(status)
        self._save()

    def set_alarm_status(self, status: AlarmStatus) -> None:
        super().set_alarm_status(status)
        self._save()

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.dump_state(), indent=2), encoding="utf-8")
        logger.debug(f"Saved store to {self._path}")
