"""Windows, event hooks and the event loop that dispatches to them."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from functools import reduce
from typing import Any


class EventType(IntEnum):
    """Event type numbers as the X protocol defines them."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17

HookFunc = Callable[..., Any]


@dataclass
class Event:
    """One event addressed to the window with id `window`.

    `key` is the key symbol of key events, `button`, `x` and `y` describe
    pointer events, `count` is the number of expose events still to follow,
    and `delete_window` marks a client message asking to close the window.
    """

    type: int
    window: int
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False


@dataclass(frozen=True)
class Hook:
    """A callback bound to one event type, with its event mask and argument."""

    mask: int
    func: HookFunc
    param: Any = None


@dataclass(eq=False)
class Window:
    """A window with a hook per event type and the images put into it."""

    id: int
    width: int
    height: int
    title: str
    hooks: dict[int, Hook] = field(default_factory=dict)
    images: list[tuple[Any, int, int]] = field(default_factory=list)

    def hook(self, event_type: int, mask: int, func: HookFunc, param: Any = None) -> None:
        """Call `func` for events of `event_type`, selecting them with `mask`."""
        if not 0 <= event_type < MAX_EVENT:
            raise ValueError(f"event type out of range: {event_type}")
        self.hooks[int(event_type)] = Hook(mask, func, param)

    def key_hook(self, func: HookFunc, param: Any = None) -> None:
        """Call func(key, param) when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func: HookFunc, param: Any = None) -> None:
        """Call func(button, x, y, param) when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func: HookFunc, param: Any = None) -> None:
        """Call func(param) when the window must be redrawn."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all hooks set on the window."""
        return reduce(lambda acc, hook: acc | hook.mask, self.hooks.values(), 0)


def _deliver(hook: Hook, event: Event) -> bool:
    kind = event.type
    if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
        hook.func(event.key, hook.param)
    elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
        hook.func(event.button, event.x, event.y, hook.param)
    elif kind == EventType.MOTION_NOTIFY:
        hook.func(event.x, event.y, hook.param)
    elif kind == EventType.EXPOSE:
        if event.count:
            return False
        hook.func(hook.param)
    elif kind < EventType.KEY_PRESS:
        return False
    else:
        hook.func(hook.param)
    return True


class Display:
    """The set of open windows and the loop that feeds events to them."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self.ended = False
        self._ids = itertools.count(1)
        self._loop: Hook | None = None

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; the newest window comes first in `windows`."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        window = Window(next(self._ids), width, height, title)
        self.windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Close `window`; raise ValueError if it is not open here."""
        if not any(open_window is window for open_window in self.windows):
            raise ValueError(f"window {window.id} is not open")
        self.windows = [w for w in self.windows if w is not window]

    def loop_hook(self, func: HookFunc, param: Any = None) -> None:
        """Call func(param) each time the loop has handled the pending events."""
        self._loop = Hook(0, func, param)

    def _find(self, window_id: int) -> Window | None:
        return next((w for w in self.windows if w.id == window_id), None)

    def dispatch(self, event: Event) -> bool:
        """Send `event` to the hook of its window; tell whether a hook ran."""
        window = self._find(event.window)
        if window is None:
            return False
        called = False
        if event.type == EventType.CLIENT_MESSAGE and event.delete_window:
            closer = window.hooks.get(EventType.DESTROY_NOTIFY)
            if closer is not None:
                closer.func(closer.param)
                called = True
        if 0 <= event.type < MAX_EVENT:
            hook = window.hooks.get(int(event.type))
            if hook is not None and _deliver(hook, event):
                called = True
        return called

    def loop(self, events: Iterable[Event]) -> int:
        """Dispatch `events` until they run out, no window is left or the loop ends.

        The loop hook, if set, runs after each event. Return the number of
        events dispatched.
        """
        handled = 0
        for event in events:
            if not self.windows or self.ended:
                break
            self.dispatch(event)
            handled += 1
            if self._loop is not None:
                self._loop.func(self._loop.param)
        return handled

    def loop_end(self) -> None:
        """Make the running loop stop before its next event."""
        self.ended = True