"""Strategies that decide whether an input event should be handled."""

from __future__ import annotations

from abc import ABC, abstractmethod

from inputsystem.events import DeviceEvent, DeviceType, EventType

__all__ = [
    "ConflictResolutionStrategy",
    "LastInputWinsStrategy",
    "DevicePriorityStrategy",
    "TouchVsDirectionalStrategy",
    "ConflictResolver",
]


class ConflictResolutionStrategy(ABC):
    """Decides whether an event may be processed."""

    name: str = ""

    @abstractmethod
    def should_process_input(self, event: DeviceEvent) -> bool:
        """Return True if the event should be processed."""


class LastInputWinsStrategy(ConflictResolutionStrategy):
    """Lets every event through."""

    name = "LastInputWins"

    def should_process_input(self, event: DeviceEvent) -> bool:
        return True


class DevicePriorityStrategy(ConflictResolutionStrategy):
    """Accepts events only from the two named devices."""

    name = "DevicePriority"

    def __init__(self, preferred: DeviceType, less_preferred: DeviceType) -> None:
        self.preferred = preferred
        self.less_preferred = less_preferred

    def should_process_input(self, event: DeviceEvent) -> bool:
        return event.device in (self.preferred, self.less_preferred)


class TouchVsDirectionalStrategy(ConflictResolutionStrategy):
    """While the touch screen is held, blocks events from other devices."""

    name = "TouchVsDirectional"

    def __init__(self) -> None:
        self.is_touching = False

    def should_process_input(self, event: DeviceEvent) -> bool:
        if event.device is DeviceType.TOUCH and event.type in (
            EventType.TOUCH_DOWN,
            EventType.TOUCH_UP,
        ):
            self.is_touching = event.type is EventType.TOUCH_DOWN
            return True
        if self.is_touching:
            return event.device is DeviceType.TOUCH
        return True


class ConflictResolver:
    """Combines strategies; an event passes only if all of them accept it."""

    def __init__(self) -> None:
        self._strategies: list[ConflictResolutionStrategy] = []

    @property
    def strategies(self) -> tuple[ConflictResolutionStrategy, ...]:
        return tuple(self._strategies)

    def add_strategy(self, strategy: ConflictResolutionStrategy | None) -> None:
        """Append a strategy; None is ignored."""
        if strategy is not None:
            self._strategies.append(strategy)

    def should_process_input(self, event: DeviceEvent) -> bool:
        """Ask each strategy in turn, stopping at the first refusal."""
        return all(strategy.should_process_input(event) for strategy in self._strategies)