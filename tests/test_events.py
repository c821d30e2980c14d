import random

import pytest

from fildefer.events import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_PRESS_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventType,
)

ESC = 0xFF1B


@pytest.fixture
def display():
    return Display()


def test_new_windows_come_first(display):
    win1 = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    assert display.windows == [win2, win1]
    assert (win2.width, win2.height, win2.title) == (600, 600, "win2")


def test_new_window_rejects_bad_size(display):
    with pytest.raises(ValueError):
        display.new_window(0, 10, "bad")


def test_destroy_window_removes_only_that_window(display):
    win1 = display.new_window(242, 242, "Title1")
    win2 = display.new_window(242, 242, "Title2")
    display.destroy_window(win1)
    assert display.windows == [win2]


def test_destroy_unknown_window_raises(display):
    win = display.new_window(10, 10, "w")
    display.destroy_window(win)
    with pytest.raises(ValueError):
        display.destroy_window(win)


def test_key_hook_receives_key_on_release(display):
    win = display.new_window(242, 242, "Title1")
    seen = []
    win.key_hook(lambda key, param: seen.append((key, param)), "p")
    assert win.hooks[EventType.KEY_RELEASE].mask == KEY_RELEASE_MASK
    assert display.dispatch(Event(EventType.KEY_RELEASE, win.id, key=97))
    assert not display.dispatch(Event(EventType.KEY_PRESS, win.id, key=97))
    assert seen == [(97, "p")]


def test_mouse_hook_receives_button_and_position(display):
    win = display.new_window(242, 242, "Title1")
    seen = []
    win.mouse_hook(lambda b, x, y, p: seen.append((b, x, y, p)))
    display.dispatch(Event(EventType.BUTTON_PRESS, win.id, button=1, x=5, y=7))
    assert seen == [(1, 5, 7, None)]


def test_motion_hook_receives_position(display):
    win3 = display.new_window(242, 242, "Title3")
    seen = []
    win3.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y, p: seen.append((x, y)), 0)
    display.dispatch(Event(EventType.MOTION_NOTIFY, win3.id, x=12, y=34))
    assert seen == [(12, 34)]


def test_expose_hook_runs_only_on_last_expose(display):
    win = display.new_window(242, 242, "Title1")
    seen = []
    win.expose_hook(lambda p: seen.append(p), "redraw")
    display.dispatch(Event(EventType.EXPOSE, win.id, count=2))
    display.dispatch(Event(EventType.EXPOSE, win.id, count=0))
    assert seen == ["redraw"]


def test_generic_hook_gets_only_param(display):
    win = display.new_window(10, 10, "w")
    seen = []
    win.hook(EventType.FOCUS_IN, 0, lambda p: seen.append(p), 42)
    display.dispatch(Event(EventType.FOCUS_IN, win.id))
    assert seen == [42]


def test_event_mask_is_union_of_hook_masks(display):
    win = display.new_window(10, 10, "w")
    assert win.event_mask() == 0
    win.key_hook(lambda k, p: None)
    win.mouse_hook(lambda b, x, y, p: None)
    win.expose_hook(lambda p: None)
    assert win.event_mask() == KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK


def test_hook_out_of_range_raises(display):
    win = display.new_window(10, 10, "w")
    with pytest.raises(ValueError):
        win.hook(36, 0, lambda p: None)


def test_delete_message_calls_destroy_hook(display):
    win = display.new_window(10, 10, "w")
    seen = []
    win.hook(EventType.DESTROY_NOTIFY, KEY_PRESS_MASK, lambda p: seen.append(p), "bye")
    assert display.dispatch(Event(EventType.CLIENT_MESSAGE, win.id, delete_window=True))
    assert seen == ["bye"]


def test_event_for_unknown_window_is_ignored(display):
    win = display.new_window(10, 10, "w")
    seen = []
    win.key_hook(lambda k, p: seen.append(k))
    assert not display.dispatch(Event(EventType.KEY_RELEASE, win.id + 100, key=1))
    assert seen == []


def test_escape_in_third_window_destroys_it(display):
    win1 = display.new_window(242, 242, "Title1")
    win3 = display.new_window(242, 242, "Title3")

    def key_win3(key, param):
        if key == ESC:
            display.destroy_window(win3)

    win3.key_hook(key_win3, 0)
    display.dispatch(Event(EventType.KEY_RELEASE, win3.id, key=ESC))
    assert display.windows == [win1]


def test_mouse_hook_replacing_window(display):
    random.seed(0)
    state = {}

    def gere_mouse(x, y, button, param):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(random.randrange(1, 500), random.randrange(1, 500), "new win")
        state["win1"].mouse_hook(gere_mouse, 0)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    original = state["win1"]
    state["win1"].mouse_hook(gere_mouse, 0)
    win2.mouse_hook(gere_mouse, 0)

    display.dispatch(Event(EventType.BUTTON_PRESS, original.id, button=1))
    assert len(display.windows) == 2
    assert original not in display.windows
    assert state["win1"].title == "new win"

    replaced = state["win1"]
    display.dispatch(Event(EventType.BUTTON_PRESS, win2.id, button=3))
    assert replaced not in display.windows
    assert win2 in display.windows
    assert len(display.windows) == 2


def test_loop_runs_loop_hook_after_each_event(display):
    win = display.new_window(10, 10, "w")
    ticks = []
    display.loop_hook(lambda p: ticks.append(p), "tick")
    events = [Event(EventType.FOCUS_IN, win.id) for _ in range(3)]
    assert display.loop(events) == 3
    assert ticks == ["tick"] * 3


def test_loop_stops_after_loop_end(display):
    win = display.new_window(10, 10, "w")
    seen = []

    def on_key(key, param):
        seen.append(key)
        display.loop_end()

    win.key_hook(on_key)
    events = [Event(EventType.KEY_RELEASE, win.id, key=k) for k in (1, 2, 3)]
    assert display.loop(events) == 1
    assert seen == [1]


def test_loop_stops_when_no_window_left(display):
    win = display.new_window(10, 10, "w")
    win.key_hook(lambda key, p: display.destroy_window(win))
    events = [Event(EventType.KEY_RELEASE, win.id, key=k) for k in (1, 2)]
    assert display.loop(events) == 1
    assert display.windows == []