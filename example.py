#!/usr/bin/env python3
"""
Quick example demonstrating home-security basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

from home_security.core.bus import EventBus, Event
from home_security.core.sensor import Sensor, SensorType
from home_security.core.status import ArmingStatus
from home_security.core.store import InMemorySensorStore
from home_security.modules.alarm import AlarmStateMachine
from home_security.modules.base import EventBusStatusListener
from home_security.modules.vision import FakeImageClassifier

print("=" * 60)
print("home-security Example")
print("=" * 60)

# 1. Core components
print("\n1. Creating core components...")
store = InMemorySensorStore()
bus = EventBus()
alarm = AlarmStateMachine(store, FakeImageClassifier(seed=3))
alarm.add_status_listener(EventBusStatusListener(bus))
print("   ✓ Store, EventBus and AlarmStateMachine created")


def on_event(event: Event) -> None:
    print(f"   → {event.type} {event.payload}")


bus.subscribe(on_event)

# 2. Register sensors
print("\n2. Registering sensors...")
front_door = Sensor("Front Door", SensorType.DOOR)
hall_motion = Sensor("Hall", SensorType.MOTION)
alarm.add_sensor(front_door)
alarm.add_sensor(hall_motion)
print(f"   ✓ Sensors: {[str(s) for s in sorted(alarm.get_sensors())]}")

# 3. Arm and trip sensors
print("\n3. Arming away and tripping sensors...")
alarm.set_arming_status(ArmingStatus.ARMED_AWAY)
alarm.change_sensor_activation_status(front_door, True)
print(f"   Alarm: {alarm.get_alarm_status().description}")
alarm.change_sensor_activation_status(hall_motion, True)
print(f"   Alarm: {alarm.get_alarm_status().description}")

# 4. Disarm
print("\n4. Disarming...")
alarm.set_arming_status(ArmingStatus.DISARMED)
print(f"   Alarm: {alarm.get_alarm_status().description}")

# 5. Camera
print("\n5. Checking camera frames while armed home...")
alarm.set_arming_status(ArmingStatus.ARMED_HOME)
for frame in range(3):
    alarm.process_image(f"frame-{frame}")
    print(f"   Frame {frame}: alarm={alarm.get_alarm_status().description}")

print("\n" + "=" * 60)
print(f"Store state: {store.dump_state()}")
print("=" * 60)
