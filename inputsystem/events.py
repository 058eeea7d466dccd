"""Device and event types shared by the whole input pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "DeviceType",
    "EventType",
    "DeviceEvent",
    "device_type_to_string",
    "event_type_to_string",
]


class DeviceType(IntEnum):
    """Kinds of input device the system understands."""

    KEYBOARD = 0
    TOUCH = 1


class EventType(IntEnum):
    """Kinds of low-level event a device can report."""

    BUTTON = 0
    DIRECTIONAL = 1
    TOUCH_DOWN = 2
    TOUCH_UP = 3


_DEVICE_NAMES = {
    DeviceType.KEYBOARD: "键盘",
    DeviceType.TOUCH: "触屏",
}

_EVENT_NAMES = {
    EventType.BUTTON: "Button",
    EventType.DIRECTIONAL: "Directional",
    EventType.TOUCH_DOWN: "TouchDown",
    EventType.TOUCH_UP: "TouchUp",
}


def device_type_to_string(device_type: DeviceType) -> str:
    """Return the display name of a device type."""
    return _DEVICE_NAMES.get(device_type, "未知")


def event_type_to_string(event_type: EventType) -> str:
    """Return the display name of an event type."""
    return _EVENT_NAMES.get(event_type, "Unknown")


@dataclass(frozen=True)
class DeviceEvent:
    """A single input event, independent of the device that produced it."""

    device: DeviceType
    type: EventType = EventType.BUTTON
    code: int = 0
    value: float = 0.0
    timestamp: int = 0