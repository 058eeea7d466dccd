"""Command-line demonstration of the input pipeline."""

from __future__ import annotations

import argparse
import json
import sys
import time
from collections.abc import Iterable, Sequence
from typing import Optional

from inputsystem.action_map import ActionMap
from inputsystem.adapters import GamepadAdapter, KeyboardAdapter
from inputsystem.conflict import ConflictResolver, TouchVsDirectionalStrategy
from inputsystem.device_manager import DeviceManager
from inputsystem.events import DeviceEvent, DeviceType, EventType, device_type_to_string
from inputsystem.processor import InputProcessor

__all__ = ["event_actions", "is_event_filtered", "handle_events", "mocked_events", "main"]

_SWITCH_INTERVAL_MS = 10_000
_FRAME_SECONDS = 0.016


def event_actions(action_map: ActionMap, event: DeviceEvent) -> str:
    """Return the names of the actions bound to an event, comma separated."""
    actions = action_map.get_actions(event)
    if not actions:
        return "未知操作"
    return ", ".join(action.name for action in actions)


def is_event_filtered(event: DeviceEvent, resolver: ConflictResolver) -> bool:
    return not resolver.should_process_input(event)


def handle_events(
    events: Iterable[DeviceEvent], processor: InputProcessor, action_map: ActionMap
) -> None:
    """Report each event and process those the conflict strategies allow."""
    for event in events:
        filtered = is_event_filtered(event, processor.conflict_resolver)
        suffix = " [被冲突策略过滤]" if filtered else ""
        print(
            f"收到事件: {device_type_to_string(event.device)} -> "
            f"{event_actions(action_map, event)}{suffix}"
        )
        if not filtered:
            processor.process_input(event)


def mocked_events(base_time: int) -> list[DeviceEvent]:
    """Return a touch-down, key, touch-up, key sequence starting at base_time."""
    touch_down = DeviceEvent(DeviceType.TOUCH, EventType.TOUCH_DOWN, 2001, 1.0, base_time + 100)
    key_up = DeviceEvent(DeviceType.KEYBOARD, EventType.DIRECTIONAL, 32, 1.0, base_time + 200)
    touch_up = DeviceEvent(DeviceType.TOUCH, EventType.TOUCH_UP, 2002, 0.0, base_time + 300)
    return [touch_down, key_up, touch_up, key_up]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _print_bindings(action_map: ActionMap) -> None:
    for (device, code), actions in action_map.all_bindings().items():
        names = "".join(f"{name} " for name in actions)
        print(f"设备: {device_type_to_string(device)}, 输入代码: {code} -> 动作: {names}")


def _run_loop(
    manager: DeviceManager,
    processor: InputProcessor,
    action_map: ActionMap,
    iterations: Optional[int],
) -> None:
    devices = [DeviceType.KEYBOARD, DeviceType.TOUCH]
    current = 0
    last_switch = 0
    frame = 0
    while iterations is None or frame < iterations:
        now = _now_ms()
        if now - last_switch >= _SWITCH_INTERVAL_MS:
            manager.enable_device(devices[current], False)
            current = (current + 1) % len(devices)
            manager.enable_device(devices[current], True)
            print(f"\n=== 切换到设备: {device_type_to_string(devices[current])} ===")
            last_switch = now
        handle_events(manager.poll_events(), processor, action_map)
        time.sleep(_FRAME_SECONDS)
        frame += 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the input system demonstration.")
    parser.add_argument("--bindings", default="bindings.json", help="bindings JSON file")
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="number of frames to run (default: until interrupted)",
    )
    args = parser.parse_args(argv)

    action_map = ActionMap()
    try:
        action_map.initialize(args.bindings)
    except OSError:
        print(f"Error: Could not open bindings file: {args.bindings}", file=sys.stderr)
    except json.JSONDecodeError as exc:
        print(f"Error parsing JSON bindings file: {args.bindings}\n{exc}", file=sys.stderr)

    manager = DeviceManager()
    processor = InputProcessor(action_map)

    print("=== 输入控制模块测试 ===")
    print("\n--- 打印所有 binding ---")
    _print_bindings(action_map)

    print("\n--- 添加冲突解决策略 ---")
    processor.add_conflict_strategy(TouchVsDirectionalStrategy())
    handle_events(mocked_events(_now_ms()), processor, action_map)

    print("\n--- 注册设备适配器 ---")
    manager.register_adapter(KeyboardAdapter())
    manager.register_adapter(GamepadAdapter())

    print("\n--- 开始处理设备事件 ---")
    print("按 Ctrl+C 退出")
    try:
        _run_loop(manager, processor, action_map, args.iterations)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())