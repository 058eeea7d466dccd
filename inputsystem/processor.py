"""Turns input events into executed commands."""

from __future__ import annotations

from typing import Optional

from inputsystem.action_map import ActionMap
from inputsystem.commands import GameActionCommand
from inputsystem.conflict import ConflictResolutionStrategy, ConflictResolver
from inputsystem.events import DeviceEvent

__all__ = ["InputProcessor"]


class InputProcessor:
    """Filters events through a conflict resolver and runs their commands."""

    def __init__(self, action_map: ActionMap) -> None:
        self.action_map = action_map
        self.conflict_resolver = ConflictResolver()

    def process_input(self, event: DeviceEvent) -> list[GameActionCommand]:
        """Run the commands for an event unless a strategy rejects it.

        Returns the commands that were executed.
        """
        if not self.conflict_resolver.should_process_input(event):
            return []
        commands = self.generate_commands(event)
        for command in commands:
            command.execute()
        return commands

    def generate_commands(self, event: DeviceEvent) -> list[GameActionCommand]:
        """Build one command per action bound to the event."""
        return [GameActionCommand(action, event) for action in self.action_map.get_actions(event)]

    def add_conflict_strategy(self, strategy: Optional[ConflictResolutionStrategy]) -> None:
        self.conflict_resolver.add_strategy(strategy)