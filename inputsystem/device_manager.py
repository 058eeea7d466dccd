"""Registry of device adapters and combined event polling."""

from __future__ import annotations

import threading
from typing import Optional

from inputsystem.adapters import DeviceAdapter
from inputsystem.events import DeviceEvent, DeviceType

__all__ = ["DeviceManager"]


class DeviceManager:
    """Keeps the registered adapters and polls them together."""

    def __init__(self) -> None:
        self._adapters: list[DeviceAdapter] = []
        self._lock = threading.Lock()
        self._active_device = DeviceType.KEYBOARD

    @property
    def adapters(self) -> tuple[DeviceAdapter, ...]:
        with self._lock:
            return tuple(self._adapters)

    @property
    def active_device(self) -> DeviceType:
        return self._active_device

    def register_adapter(self, adapter: Optional[DeviceAdapter]) -> None:
        """Add an adapter; None is ignored."""
        if adapter is None:
            return
        with self._lock:
            self._adapters.append(adapter)

    def unregister_adapter(self, adapter: Optional[DeviceAdapter]) -> None:
        """Remove every registration of the adapter."""
        if adapter is None:
            return
        with self._lock:
            self._adapters = [a for a in self._adapters if a is not adapter]

    def poll_events(self) -> list[DeviceEvent]:
        """Collect events from all enabled adapters, in registration order."""
        with self._lock:
            events: list[DeviceEvent] = []
            for adapter in self._adapters:
                if adapter.enabled:
                    events.extend(adapter.poll_events())
            return events

    def enable_device(self, device_type: DeviceType, on: bool) -> None:
        """Enable or disable every adapter of the given device type."""
        with self._lock:
            for adapter in self._adapters:
                if adapter.device_type is device_type:
                    adapter.enable(on)

    def set_active_device(self, device_type: DeviceType) -> None:
        with self._lock:
            self._active_device = device_type