"""Commands produced from input events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from inputsystem.action_map import GameAction
from inputsystem.events import (
    DeviceEvent,
    DeviceType,
    EventType,
    device_type_to_string,
    event_type_to_string,
)

__all__ = ["Command", "GameActionCommand"]


class Command(ABC):
    """Something to be executed in response to input."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the command."""


class GameActionCommand(Command):
    """Runs a game action that a particular event triggered."""

    def __init__(self, action: GameAction, event: DeviceEvent) -> None:
        self._action = action
        self._event = event

    def __repr__(self) -> str:
        return f"GameActionCommand(action={self._action!r}, event={self._event!r})"

    @property
    def action(self) -> GameAction:
        return self._action

    @property
    def event(self) -> DeviceEvent:
        """The event that triggered this command."""
        return self._event

    @property
    def source_device(self) -> DeviceType:
        return self._event.device

    @property
    def source_code(self) -> int:
        return self._event.code

    @property
    def source_value(self) -> float:
        return self._event.value

    def describe(self) -> str:
        """Return the line reported when the command runs."""
        event = self._event
        device = device_type_to_string(event.device)
        if event.device is DeviceType.TOUCH and event.type in (
            EventType.TOUCH_DOWN,
            EventType.TOUCH_UP,
        ):
            kind = event_type_to_string(event.type)
            return f"执行动作: {self._action.name} (由设备触发: {device}, 事件类型:{kind})"
        return f"执行动作: {self._action.name} (由设备触发: {device})"

    def execute(self) -> None:
        print(self.describe())