"""Mapping from physical inputs to named game actions."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Union

from inputsystem.events import DeviceEvent, DeviceType

__all__ = ["GameAction", "ActionMap"]

logger = logging.getLogger(__name__)

_DEVICE_TYPES = {
    "Keyboard": DeviceType.KEYBOARD,
    "Touch": DeviceType.TOUCH,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

BindingKey = tuple[DeviceType, int]


@dataclass(frozen=True)
class GameAction:
    """A logical action such as "Attack" or "Jump"."""

    name: str


def _parse_input_code(text: str) -> int | None:
    """Read the leading integer of ``text``; None if it has none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"input code out of range: {text!r}")
    return value


class ActionMap:
    """Holds defined actions and the bindings of inputs to them."""

    def __init__(self) -> None:
        self._bindings: dict[BindingKey, list[str]] = {}
        self._defined: dict[str, GameAction] = {}

    def initialize(self, bindings_file_path: Union[str, PathLike]) -> None:
        """Load actions and bindings from a JSON file."""
        path = Path(bindings_file_path)
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        self.load_data(data)

    def load_data(self, data: Any) -> None:
        """Add the actions and bindings described by a parsed JSON document."""
        if not isinstance(data, Mapping):
            return

        actions = data.get("actions")
        if isinstance(actions, Mapping):
            for name in sorted(actions):
                self._defined[name] = GameAction(name)

        bindings = data.get("bindings")
        if not isinstance(bindings, Mapping):
            return
        for device_name, device_bindings in sorted(bindings.items()):
            device = _DEVICE_TYPES.get(device_name)
            if device is None:
                logger.warning("Unknown device type in bindings: %s", device_name)
                continue
            if not isinstance(device_bindings, Mapping):
                continue
            for code_text, action_names in sorted(device_bindings.items()):
                code = _parse_input_code(code_text)
                if code is None:
                    logger.warning("Invalid input code in bindings: %s", code_text)
                    continue
                if not isinstance(action_names, list):
                    continue
                for action_name in action_names:
                    if not isinstance(action_name, str):
                        continue
                    if action_name in self._defined:
                        self._bindings.setdefault((device, code), []).append(action_name)
                    else:
                        logger.warning(
                            "Action '%s' not defined, but used in binding.", action_name
                        )

    def get_actions(self, event: DeviceEvent) -> list[GameAction]:
        """Return every action bound to the event's device and code."""
        names = self._bindings.get((event.device, event.code), [])
        return [self._defined[name] for name in names if name in self._defined]

    def all_bindings(self) -> dict[BindingKey, list[str]]:
        """Return a copy of all bindings, ordered by device and code."""
        return {key: list(self._bindings[key]) for key in sorted(self._bindings)}