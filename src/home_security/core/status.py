"""
Panel-wide status values.

ArmingStatus is selected by the operator. AlarmStatus is derived by the
alarm state machine and never set directly by callers.
"""

from enum import Enum


class ArmingStatus(Enum):
    """Operator-selected panel mode."""

    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def description(self) -> str:
        """Button label for this mode."""
        return _ARMING_DESCRIPTIONS[self]

    @property
    def is_armed(self) -> bool:
        """True for either armed mode."""
        return self is not ArmingStatus.DISARMED


class AlarmStatus(Enum):
    """Derived security state."""

    NO_ALARM = "no_alarm"  # Quiescent
    PENDING_ALARM = "pending_alarm"  # Suspicious, awaiting confirmation
    ALARM = "alarm"  # Triggered

    @property
    def description(self) -> str:
        """Display text for this state."""
        return _ALARM_DESCRIPTIONS[self]


_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Arm Home",
    ArmingStatus.ARMED_AWAY: "Arm Away",
}

_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}
