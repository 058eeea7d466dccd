import pytest

from inputsystem.action_map import GameAction
from inputsystem.commands import Command, GameActionCommand
from inputsystem.events import DeviceEvent, DeviceType, EventType


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_source_fields_follow_event():
    event = DeviceEvent(DeviceType.KEYBOARD, EventType.BUTTON, 74, 1.0, 7)
    command = GameActionCommand(GameAction("Attack"), event)
    assert command.action == GameAction("Attack")
    assert command.event is event
    assert command.source_device is DeviceType.KEYBOARD
    assert command.source_code == 74
    assert command.source_value == 1.0


def test_describe_keyboard():
    event = DeviceEvent(DeviceType.KEYBOARD, EventType.BUTTON, 32, 1.0, 0)
    command = GameActionCommand(GameAction("Jump"), event)
    assert command.describe() == "执行动作: Jump (由设备触发: 键盘)"


@pytest.mark.parametrize("event_type", [EventType.TOUCH_DOWN, EventType.TOUCH_UP])
def test_describe_touch_includes_event_type(event_type):
    event = DeviceEvent(DeviceType.TOUCH, event_type, 2001, 1.0, 0)
    text = GameActionCommand(GameAction("Jump"), event).describe()
    assert text.startswith("执行动作: Jump (由设备触发: 触屏, 事件类型:")
    assert event_type.name.replace("_", "").lower() in text.lower()


def test_describe_touch_button_has_no_event_type():
    event = DeviceEvent(DeviceType.TOUCH, EventType.BUTTON, 0, 1.0, 0)
    text = GameActionCommand(GameAction("Jump"), event).describe()
    assert "事件类型" not in text
    assert text.endswith("(由设备触发: 触屏)")


def test_execute_prints_description(capsys):
    event = DeviceEvent(DeviceType.KEYBOARD, EventType.BUTTON, 87, 1.0, 0)
    command = GameActionCommand(GameAction("MoveForward"), event)
    command.execute()
    assert capsys.readouterr().out == command.describe() + "\n"