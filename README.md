# inputsystem

A small input layer for games. Device events from keyboards and touch
devices are mapped to named game actions, checked against conflict-resolution
strategies, and turned into commands that carry out those actions.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

- **`inputsystem.events`**: `DeviceType` (`KEYBOARD`, `TOUCH`), `EventType`
  (`BUTTON`, `DIRECTIONAL`, `TOUCH_DOWN`, `TOUCH_UP`) and the frozen dataclass
  `DeviceEvent(device, type, code, value, timestamp)`. `device_type_to_string`
  and `event_type_to_string` give display names.
- **`inputsystem.action_map`**: `GameAction` and `ActionMap`.
  `ActionMap.initialize(path)` reads a JSON file (raising `OSError` or
  `json.JSONDecodeError` on failure); `load_data(data)` takes an already parsed
  document. `get_actions(event)` returns the actions bound to the event's device
  and code, and `all_bindings()` returns a copy of all bindings ordered by device
  and code.
- **`inputsystem.commands`**: the abstract `Command` and `GameActionCommand`,
  which holds an action and the event that triggered it (`action`, `event`,
  `source_device`, `source_code`, `source_value`). `describe()` returns the
  report line and `execute()` prints it.
- **`inputsystem.conflict`**: `LastInputWinsStrategy` (accepts everything),
  `DevicePriorityStrategy(preferred, less_preferred)` (accepts only those two
  devices) and `TouchVsDirectionalStrategy` (while a touch is held, rejects
  events from other devices). `ConflictResolver` combines strategies; an event
  passes only if every strategy accepts it.
- **`inputsystem.adapters`**: the abstract `DeviceAdapter` with `poll_events()`
  and `enable(on)`, and the simulated `KeyboardAdapter` and `GamepadAdapter`.
  Each emits at most one event per poll after a random pause; a random source
  (anything with `randint`) and a millisecond clock can be passed in.
- **`inputsystem.device_manager`**: `DeviceManager` registers adapters, polls
  the enabled ones in registration order, enables or disables adapters by
  `DeviceType`, and records an active device.
- **`inputsystem.processor`**: `InputProcessor(action_map)` filters an event
  through its `conflict_resolver`, then builds and executes one
  `GameActionCommand` per bound action; `process_input` returns the commands it
  ran.

## Bindings file

```json
{
  "actions": {
    "Jump": {},
    "Attack": {},
    "MoveForward": {}
  },
  "bindings": {
    "Keyboard": {"32": ["Jump"], "74": ["Attack"], "87": ["MoveForward"]},
    "Touch": {"0": ["Jump"], "1": ["Attack"]}
  }
}
```

An input code is read from its leading integer. Device types other than
`Keyboard` and `Touch`, codes with no leading integer, and actions that were
never defined are skipped with a warning through the `logging` module. A code
outside the 32-bit signed range raises `ValueError`.

## Library use

```python
from inputsystem.action_map import ActionMap
from inputsystem.conflict import TouchVsDirectionalStrategy
from inputsystem.events import DeviceEvent, DeviceType, EventType
from inputsystem.processor import InputProcessor

action_map = ActionMap()
action_map.initialize("bindings.json")

processor = InputProcessor(action_map)
processor.add_conflict_strategy(TouchVsDirectionalStrategy())

event = DeviceEvent(DeviceType.KEYBOARD, EventType.BUTTON, code=32, value=1.0, timestamp=0)
commands = processor.process_input(event)
```

## Command-line demo

```
inputsystem [--bindings PATH] [--iterations N]
```

The demo loads the bindings file (`bindings.json` in the current directory by
default) and prints every binding. It then runs a fixed sequence of events
through `TouchVsDirectionalStrategy`, and afterwards polls the simulated
keyboard and touch adapters every 16 ms, switching the enabled device every
ten seconds. It runs until interrupted with Ctrl+C, or for `N` frames if
`--iterations` is given.

## What it does not do

The adapters do not read real keyboards, gamepads or touch screens; they only
produce simulated events. Commands print a line describing the action rather
than acting on any game state.

## Running the tests

```
pytest
```