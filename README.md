# spixbot

spixbot is a small engine for driving user-interface tests. Test code puts
commands in a queue, and it may do so from any thread. The thread that owns
the user interface then runs those commands against a scene.

## Install

```
pip install spixbot
```

## The executer

`spixbot.executer.CommandExecuter` holds a first-in, first-out queue of
commands.

- `enqueue_command(command)` adds a command. It is safe to call from any
  thread.
- `process_commands(scene)` runs the queued commands in order. It stops at the
  first command whose `can_execute_now()` returns false, and that command is
  tried again on the next call. If the queue is locked by another thread at
  that moment, the call returns without doing anything.
- `state` is the `ExecuterState` that the commands share.

`process_commands` and `state` must be used from the thread that created the
executer. Using them from any other thread raises `RuntimeError`.

## State and environment

`spixbot.state.ExecuterState` collects the error messages that commands report:

- `report_error(error)` records a message.
- `has_errors()` tells whether any message was recorded.
- `errors()` returns a copy of the messages, oldest first.
- `errors_description()` returns the messages joined with newlines.

A command that fails records an error and does not raise, so the commands
after it still run.

`spixbot.state.CommandEnvironment` is what each command receives. It has two
attributes, `scene` and `state`.

## Basic commands

These are in `spixbot.command`.

- `Command` is the abstract base class. A subclass implements
  `execute(env)`. It may also override `can_execute_now()`, which returns
  `True` by default.
- `CustomCmd(exec_fn, can_exec_fn)` is a command built from two callables.
  `exec_fn(env)` does the work and `can_exec_fn()` tells whether the command
  is ready.
- `Wait(wait_time)` holds back the queue. `wait_time` is a `timedelta` or a
  number of seconds. The timer starts the first time the command is asked
  whether it is ready, and that first answer is always "not ready".

## Scene commands

The commands in `spixbot.scene_commands` act on items of a scene. The scene you
pass to `process_commands` must provide:

- `item_at_path(path)`, which returns an item or `None`.
- `events`, with the methods `mouse_down`, `mouse_up`, `mouse_move`,
  `ext_mouse_drop`, `key_press`, `key_release`, `string_input` and `quit`.
- `take_screenshot(path, file_path)` and `take_screenshot_as_base64(path)`.

Each item must provide:

- `size`, with `width` and `height`.
- `visible` and `bounds`.
- `string_property(name)` and `set_string_property(name, value)`.
- `invoke_method(method, args)`, which returns the method's result and raises
  if the method cannot be invoked.

| Command | What it does |
| --- | --- |
| `ClickOnItem(position, mouse_button)` | Presses and releases `mouse_button`. A plain path means the centre of the item. An object with `item_path` and `position_for_item_size(size)` gives a custom point. |
| `DragBegin(path)` | Presses the left button at the item's centre, then moves the mouse there. |
| `DragEnd(path)` | Moves the mouse to the item's centre, then releases the left button. |
| `DropFromExt(path, content)` | Drops `content` onto the item's centre. |
| `EnterKey(path, key_code, modifiers)` | Presses and releases a key. |
| `InputText(path, text)` | Sends a string of text to the item. |
| `SetProperty(path, property_name, property_value)` | Sets a property from a string. |
| `GetProperty(path, property_name, future)` | Resolves the future with the property as a string. If the item is missing, the result is `""`. |
| `GetBoundingBox(path, future)` | Resolves the future with the item's `bounds`. If the item is missing, the result is an all-zero box. |
| `ExistsAndVisible(path, future)` | Resolves the future with `True` only if the item exists and is visible. |
| `InvokeMethod(path, method, args, future)` | Resolves the future with the method's result. If the item is missing or the call fails, the result is `None`. |
| `GetTestStatus(errors_only, future)` | Resolves the future with the errors reported so far. |
| `Screenshot(item_path, file_path)` | Asks the scene to save a screenshot to a file. |
| `ScreenshotAsBase64(item_path, future)` | Resolves the future with the scene's base64 screenshot. |
| `Quit()` | Calls `events.quit()` on the scene. |

The futures are `concurrent.futures.Future` objects. Test code can therefore
wait on them from another thread.

When an item is not found, the commands that look it up record a message of the
form `"<Command>: Item not found: <path>"`. `ExistsAndVisible` is the
exception: it records nothing.

## Example

```python
import time
from concurrent.futures import Future

from spixbot.command import Wait
from spixbot.executer import CommandExecuter
from spixbot.scene_commands import GetProperty

executer = CommandExecuter()
result = Future()
executer.enqueue_command(Wait(0.1))
executer.enqueue_command(GetProperty("mainWindow/results", "text", result))

# Call this repeatedly from the UI thread, e.g. once per event-loop tick:
while not result.done():
    executer.process_commands(scene)
    time.sleep(0.01)

print(result.result())
if executer.state.has_errors():
    print(executer.state.errors_description())
```

## What this package does not do

spixbot contains no scene, items or event delivery of its own. You must
supply a scene object that connects to your user-interface toolkit. There is
no remote-control server, no item-path parsing, and no screenshot encoder.

## Running the tests

```
pip install spixbot[test]
pytest
```