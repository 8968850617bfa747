"""Commands that act on items of a scene.

A scene passed to these commands provides ``item_at_path(path)``, which
returns an item or ``None``, an ``events`` object that delivers input to
items, and the screenshot methods ``take_screenshot(path, file_path)`` and
``take_screenshot_as_base64(path)``.

Items provide ``size`` (with ``width`` and ``height``), ``visible``,
``bounds``, ``string_property(name)``, ``set_string_property(name, value)``
and ``invoke_method(method, args)``, which returns the method's result and
raises if the method cannot be invoked.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, NamedTuple, Protocol

from spixbot.command import Command
from spixbot.state import CommandEnvironment

# Identifier of the primary (left) mouse button.
_LEFT_BUTTON = 1


class _Point(NamedTuple):
    x: float
    y: float


class _Size(NamedTuple):
    width: float
    height: float


class _Rect(NamedTuple):
    top_left: _Point
    size: _Size


class _ItemPosition(Protocol):
    @property
    def item_path(self) -> Any: ...

    def position_for_item_size(self, size: Any) -> Any: ...


def _path_text(path: Any) -> str:
    """Return the textual form of an item path for error messages."""
    if isinstance(path, str):
        return "/".join(part for part in path.split("/") if part)
    to_string = getattr(path, "string", None)
    if callable(to_string):
        return str(to_string())
    return str(path)


def _mid_point(size: Any) -> _Point:
    return _Point(size.width / 2.0, size.height / 2.0)


class ClickOnItem(Command):
    """Press and release a mouse button on an item.

    ``position`` is either a plain item path, meaning the centre of the item,
    or an object with ``item_path`` and ``position_for_item_size(size)``.
    """

    def __init__(self, position: Any, mouse_button: Any) -> None:
        self._position = position
        self._mouse_button = mouse_button

    def _resolve(self, size: Any) -> Any:
        if hasattr(self._position, "position_for_item_size"):
            return self._position.position_for_item_size(size)
        return _mid_point(size)

    def _item_path(self) -> Any:
        return getattr(self._position, "item_path", self._position)

    def execute(self, env: CommandEnvironment) -> None:
        path = self._item_path()
        item = env.scene.item_at_path(path)
        if item is None:
            env.state.report_error(f"ClickOnItem: Item not found: {_path_text(path)}")
            return

        mouse_point = self._resolve(item.size)
        env.scene.events.mouse_down(item, mouse_point, self._mouse_button)
        env.scene.events.mouse_up(item, mouse_point, self._mouse_button)


class DragBegin(Command):
    """Press the left button in the middle of an item and start moving."""

    def __init__(self, path: Any) -> None:
        self._path = path

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"DragBegin: Item not found: {_path_text(self._path)}")
            return

        mid = _mid_point(item.size)
        env.scene.events.mouse_down(item, mid, _LEFT_BUTTON)
        env.scene.events.mouse_move(item, mid)


class DragEnd(Command):
    """Move to the middle of an item and release the left button."""

    def __init__(self, path: Any) -> None:
        self._path = path

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"DragEnd: Item not found: {_path_text(self._path)}")
            return

        mid = _mid_point(item.size)
        env.scene.events.mouse_move(item, mid)
        env.scene.events.mouse_up(item, mid, _LEFT_BUTTON)


class DropFromExt(Command):
    """Drop external pasteboard content onto the middle of an item."""

    def __init__(self, path: Any, content: Any) -> None:
        self._path = path
        self._content = content

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"DropFromExt: Item not found: {_path_text(self._path)}")
            return

        env.scene.events.ext_mouse_drop(item, _mid_point(item.size), self._content)


class EnterKey(Command):
    """Press and release a key on an item."""

    def __init__(self, path: Any, key_code: int, modifiers: int) -> None:
        self._path = path
        self._key_code = key_code
        self._modifiers = modifiers

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"EnterKey: Item not found: {_path_text(self._path)}")
            return

        env.scene.events.key_press(item, self._key_code, self._modifiers)
        env.scene.events.key_release(item, self._key_code, self._modifiers)


class ExistsAndVisible(Command):
    """Resolve a future with whether an item exists and is visible."""

    def __init__(self, path: Any, future: Future) -> None:
        self._path = path
        self._future = future

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        self._future.set_result(bool(item.visible) if item is not None else False)


class GetBoundingBox(Command):
    """Resolve a future with an item's bounds in screen coordinates."""

    def __init__(self, path: Any, future: Future) -> None:
        self._path = path
        self._future = future

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is not None:
            self._future.set_result(item.bounds)
            return
        self._future.set_result(_Rect(_Point(0.0, 0.0), _Size(0.0, 0.0)))
        env.state.report_error(f"GetBoundingBox: Item not found: {_path_text(self._path)}")


class GetProperty(Command):
    """Resolve a future with a property of an item as a string."""

    def __init__(self, path: Any, property_name: str, future: Future) -> None:
        self._path = path
        self._property_name = property_name
        self._future = future

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is not None:
            self._future.set_result(item.string_property(self._property_name))
            return
        self._future.set_result("")
        env.state.report_error(f"GetProperty: Item not found: {_path_text(self._path)}")


class GetTestStatus(Command):
    """Resolve a future with the errors reported so far."""

    def __init__(self, errors_only: bool, future: Future) -> None:
        # Only errors are tracked, so the flag has no effect.
        self._errors_only = errors_only
        self._future = future

    def execute(self, env: CommandEnvironment) -> None:
        self._future.set_result(env.state.errors())


class InputText(Command):
    """Send a string of text to an item."""

    def __init__(self, path: Any, text: str) -> None:
        self._path = path
        self._text = text

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"InputText: Item not found: {_path_text(self._path)}")
            return
        env.scene.events.string_input(item, self._text)


class InvokeMethod(Command):
    """Invoke a method on an item and resolve a future with its result."""

    def __init__(self, path: Any, method: str, args: list[Any], future: Future) -> None:
        self._path = path
        self._method = method
        self._args = list(args)
        self._future = future

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"InvokeMethod: Item not found: {_path_text(self._path)}")
            self._future.set_result(None)
            return

        try:
            result = item.invoke_method(self._method, self._args)
        except Exception:
            env.state.report_error(f"InvokeMethod: Failed to invoke method: {self._method}")
            result = None
        self._future.set_result(result)


class Quit(Command):
    """Ask the application to quit."""

    def execute(self, env: CommandEnvironment) -> None:
        env.scene.events.quit()


class Screenshot(Command):
    """Save a screenshot of an item to a file."""

    def __init__(self, item_path: Any, file_path: str) -> None:
        self._item_path = item_path
        self._file_path = file_path

    def execute(self, env: CommandEnvironment) -> None:
        env.scene.take_screenshot(self._item_path, self._file_path)


class ScreenshotAsBase64(Command):
    """Resolve a future with a base64 screenshot of an item."""

    def __init__(self, item_path: Any, future: Future) -> None:
        self._item_path = item_path
        self._future = future

    def execute(self, env: CommandEnvironment) -> None:
        self._future.set_result(env.scene.take_screenshot_as_base64(self._item_path))


class SetProperty(Command):
    """Set a property of an item from a string."""

    def __init__(self, path: Any, property_name: str, property_value: str) -> None:
        self._path = path
        self._property_name = property_name
        self._property_value = property_value

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self._path)
        if item is None:
            env.state.report_error(f"SetProperty: Item not found: {_path_text(self._path)}")
            return
        item.set_string_property(self._property_name, self._property_value)