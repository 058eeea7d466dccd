"""Device adapters that turn native input into device events."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar, Optional, Protocol

from inputsystem.events import DeviceEvent, DeviceType, EventType

__all__ = ["DeviceAdapter", "KeyboardAdapter", "GamepadAdapter"]

Clock = Callable[[], int]


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class DeviceAdapter(ABC):
    """Source of device events that can be switched on and off."""

    device_type: ClassVar[Optional[DeviceType]] = None

    def __init__(self) -> None:
        self.enabled = True

    @abstractmethod
    def poll_events(self) -> list[DeviceEvent]:
        """Return all events gathered since the last poll."""

    def enable(self, on: bool) -> None:
        """Enable or disable the adapter."""
        self.enabled = on


class _SimulatedAdapter(DeviceAdapter):
    """Adapter that emits one pseudo-random event after a random pause."""

    interval_ms: ClassVar[tuple[int, int]] = (0, 0)
    action_count: ClassVar[int] = 1

    def __init__(
        self,
        rng: Optional[_RandomSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else _now_ms
        self.last_event_time = 0
        self.is_moving = False

    def _toggle_moving(self) -> float:
        value = 0.0 if self.is_moving else 1.0
        self.is_moving = not self.is_moving
        return value

    @abstractmethod
    def _make_event(self, action: int, now: int) -> DeviceEvent:
        """Build the event for the chosen action."""

    def poll_events(self) -> list[DeviceEvent]:
        if not self.enabled:
            return []
        now = self._clock()
        low, high = self.interval_ms
        elapsed = now - self.last_event_time
        if elapsed >= 0 and elapsed < self._rng.randint(low, high):
            return []
        action = self._rng.randint(low, high) % self.action_count
        event = self._make_event(action, now)
        self.last_event_time = now
        return [event]


class KeyboardAdapter(_SimulatedAdapter):
    """Keyboard adapter simulating jump, attack and movement keys."""

    device_type = DeviceType.KEYBOARD
    interval_ms = (500, 2000)
    action_count = 4

    def _make_event(self, action: int, now: int) -> DeviceEvent:
        if action == 0:
            code, kind, value = 32, EventType.BUTTON, 1.0
        elif action == 1:
            code, kind, value = 74, EventType.BUTTON, 1.0
        elif action == 2:
            code, kind, value = 87, EventType.DIRECTIONAL, self._toggle_moving()
        else:
            code, kind, value = 83, EventType.DIRECTIONAL, self._toggle_moving()
        return DeviceEvent(DeviceType.KEYBOARD, kind, code, value, now)

    def poll_events(self) -> list[DeviceEvent]:
        return super().poll_events()


class GamepadAdapter(_SimulatedAdapter):
    """Touch-capable gamepad adapter simulating buttons, d-pad and touches."""

    device_type = DeviceType.TOUCH
    interval_ms = (800, 2500)
    action_count = 6

    def __init__(
        self,
        rng: Optional[_RandomSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(rng, clock)
        self.is_touching = False

    def _make_event(self, action: int, now: int) -> DeviceEvent:
        if action == 0:
            kind, code, value = EventType.BUTTON, 0, 1.0
        elif action == 1:
            kind, code, value = EventType.BUTTON, 1, 1.0
        elif action == 2:
            kind, code, value = EventType.DIRECTIONAL, 1001, self._toggle_moving()
        elif action == 3:
            kind, code, value = EventType.DIRECTIONAL, 1002, self._toggle_moving()
        elif action == 4:
            kind, code, value = EventType.TOUCH_DOWN, 2001, 1.0
            self.is_touching = True
        else:
            kind, code, value = EventType.TOUCH_UP, 2002, 0.0
            self.is_touching = False
        return DeviceEvent(DeviceType.TOUCH, kind, code, value, now)

    def poll_events(self) -> list[DeviceEvent]:
        return super().poll_events()