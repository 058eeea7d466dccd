import pytest

from inputsystem.action_map import ActionMap, GameAction
from inputsystem.conflict import TouchVsDirectionalStrategy
from inputsystem.events import DeviceEvent, DeviceType, EventType
from inputsystem.processor import InputProcessor


@pytest.fixture
def action_map():
    amap = ActionMap()
    amap.load_data(
        {
            "actions": {"Jump": {}, "Attack": {}, "Touch": {}},
            "bindings": {
                "Keyboard": {"32": ["Jump", "Attack"]},
                "Touch": {"2001": ["Touch"]},
            },
        }
    )
    return amap


def test_generate_commands_one_per_action(action_map):
    processor = InputProcessor(action_map)
    event = DeviceEvent(DeviceType.KEYBOARD, EventType.BUTTON, 32, 1.0, 5)
    commands = processor.generate_commands(event)
    assert [c.action for c in commands] == [GameAction("Jump"), GameAction("Attack")]
    assert all(c.event == event for c in commands)


def test_generate_commands_unbound_event(action_map):
    processor = InputProcessor(action_map)
    assert processor.generate_commands(DeviceEvent(DeviceType.KEYBOARD, code=99)) == []


def test_process_input_executes_commands(action_map, capsys):
    processor = InputProcessor(action_map)
    executed = processor.process_input(DeviceEvent(DeviceType.KEYBOARD, code=32))
    assert len(executed) == 2
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "执行动作: Jump (由设备触发: 键盘)",
        "执行动作: Attack (由设备触发: 键盘)",
    ]


def test_process_input_respects_conflict_strategy(action_map, capsys):
    processor = InputProcessor(action_map)
    processor.add_conflict_strategy(TouchVsDirectionalStrategy())
    processor.process_input(DeviceEvent(DeviceType.TOUCH, EventType.TOUCH_DOWN, 2001, 1.0))
    capsys.readouterr()
    assert processor.process_input(DeviceEvent(DeviceType.KEYBOARD, code=32)) == []
    assert capsys.readouterr().out == ""


def test_add_conflict_strategy_registers_it(action_map):
    processor = InputProcessor(action_map)
    strategy = TouchVsDirectionalStrategy()
    processor.add_conflict_strategy(strategy)
    processor.add_conflict_strategy(None)
    assert processor.conflict_resolver.strategies == (strategy,)