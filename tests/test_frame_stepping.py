from __future__ import annotations

import logging

import pytest

from animframe.core.time import SimClock
from animframe.errors import WindowClosed
from animframe.platform.input.pygame_input import (
    PygameInputBackend,
    ScriptedInput,
    UiEvent,
)
from animframe.ui.transport import PLAY, STEP


def _tap(af, name: str) -> UiEvent:
    x, y, w, h = af.transport.button_rect(name)
    return UiEvent("tap", x + w // 2, y + h // 2)


def _click_after(polls: int, inp: ScriptedInput, event_fn):
    """SimClock hook queuing a click once ``polls`` sleeps have happened."""
    clock = SimClock()

    def hook(_now: float) -> None:
        if len(clock.sleeps) == polls:
            inp.push(event_fn())

    clock.on_sleep = hook
    return clock


def test_paused_frame_blocks_until_play(make_frame, config_factory) -> None:
    inp = ScriptedInput()
    holder: dict = {}
    clock = _click_after(3, inp, lambda: _tap(holder["af"], PLAY))
    af = make_frame(
        config=config_factory(autoplay=False), input_backend=inp, clock=clock
    )
    holder["af"] = af

    af.draw_circle(50, 50, 20)
    af.paint_frame()

    assert clock.sleeps == [pytest.approx(0.1)] * 3
    assert af.gate.play_mode
    assert af.transport.playing_icon == "pause"


def test_step_runs_to_next_frame_only(make_frame, config_factory) -> None:
    inp = ScriptedInput()
    clock = SimClock()
    af = make_frame(
        config=config_factory(autoplay=False), input_backend=inp, clock=clock
    )

    def hook(_now: float) -> None:
        if len(clock.sleeps) == 2:
            inp.push(_tap(af, STEP))
        elif len(clock.sleeps) == 5:
            inp.push(_tap(af, PLAY))

    clock.on_sleep = hook

    af.paint_frame()
    assert len(clock.sleeps) == 2
    assert not af.gate.released
    assert af.gate.step_enabled
    assert af.transport.playing_icon == "play"

    # the next frame blocks again until play, three polls later
    af.paint_frame()
    assert len(clock.sleeps) == 5
    assert clock.sleeps[2:] == [pytest.approx(0.1)] * 3
    assert af.gate.play_mode


def test_step_pressed_during_sleep_releases_next_frame(
    make_frame, config_factory
) -> None:
    inp = ScriptedInput()
    clock = SimClock()
    af = make_frame(
        config=config_factory(autoplay=False), input_backend=inp, clock=clock
    )
    inp.push(_tap(af, STEP))
    af.sleep(100)
    assert af.gate.step_pending
    assert len(clock.sleeps) == 5

    af.paint_frame()
    assert len(clock.sleeps) == 5
    assert not af.gate.released

    def hook(_now: float) -> None:
        if len(clock.sleeps) == 7:
            inp.push(_tap(af, PLAY))

    clock.on_sleep = hook
    af.paint_frame()
    assert len(clock.sleeps) == 7
    assert af.gate.play_mode


def test_no_window_with_pygame_input_starts_playing(
    make_frame, config_factory, caplog
) -> None:
    clock = SimClock()

    def hook(_now: float) -> None:
        if len(clock.sleeps) > 1000:
            raise AssertionError("paint_frame kept waiting for clicks")

    clock.on_sleep = hook
    with caplog.at_level(logging.WARNING, logger="animframe.frame"):
        af = make_frame(
            config=config_factory(autoplay=False),
            input_backend=PygameInputBackend(),
            clock=clock,
        )
    assert not af.display.has_window
    assert af.gate.play_mode
    assert "no window" in caplog.text

    af.paint_frame()
    af.paint_frame()
    assert af.frames == 2
    assert clock.sleeps == []


def test_playing_frames_do_not_wait(make_frame, config_factory) -> None:
    clock = SimClock()
    af = make_frame(
        config=config_factory(frame_delay_s=0.08), clock=clock
    )
    for _ in range(5):
        af.paint_frame()
    assert af.frames == 5
    # only the post-frame pause, sliced to keep the window responsive
    assert clock.total_slept == pytest.approx(5 * 0.08)
    assert all(s <= 0.02 + 1e-9 for s in clock.sleeps)


def test_pause_while_playing_stops_at_next_frame(make_frame) -> None:
    inp = ScriptedInput()
    holder: dict = {}
    clock = _click_after(4, inp, lambda: _tap(holder["af"], PLAY))
    af = make_frame(input_backend=inp, clock=clock)
    holder["af"] = af

    af.paint_frame()
    assert clock.sleeps == []
    inp.push(_tap(af, PLAY))
    af.paint_frame()
    # paused by the first click, resumed by the hook after four polls
    assert len(clock.sleeps) == 4
    assert af.gate.play_mode


def test_keyboard_step(make_frame, config_factory) -> None:
    inp = ScriptedInput([[UiEvent("key", key="right")]])
    af = make_frame(config=config_factory(autoplay=False), input_backend=inp)
    af.paint_frame()
    assert not af.gate.released


def test_clicks_in_drawing_area_are_ignored(make_frame, config_factory) -> None:
    inp = ScriptedInput()
    clock = SimClock()
    af = make_frame(
        config=config_factory(autoplay=False), input_backend=inp, clock=clock
    )
    top = af.transport.height

    def hook(_now: float) -> None:
        if len(clock.sleeps) == 1:
            inp.push(UiEvent("tap", 10, top + 10))
        elif len(clock.sleeps) == 3:
            inp.push(_tap(af, PLAY))

    clock.on_sleep = hook
    af.paint_frame()
    assert len(clock.sleeps) == 3


def test_window_close_while_paused_raises(make_frame, config_factory) -> None:
    inp = ScriptedInput([[], [UiEvent("quit")]])
    af = make_frame(config=config_factory(autoplay=False), input_backend=inp)
    with pytest.raises(WindowClosed) as exc:
        af.paint_frame()
    assert isinstance(exc.value, SystemExit)
    assert exc.value.code == 0


def test_quit_key_during_sleep(make_frame) -> None:
    inp = ScriptedInput()
    af = make_frame(input_backend=inp)
    inp.push(UiEvent("key", key="escape"))
    with pytest.raises(WindowClosed):
        af.sleep(100)


def test_sleep_is_sliced_and_validated(make_frame) -> None:
    clock = SimClock()
    af = make_frame(clock=clock)
    af.sleep(100)
    assert clock.total_slept == pytest.approx(0.1)
    assert len(clock.sleeps) == 5
    af.sleep(0)
    assert len(clock.sleeps) == 5
    with pytest.raises(ValueError):
        af.sleep(-1)


def test_startup_delay_uses_clock(make_frame, config_factory) -> None:
    clock = SimClock()
    make_frame(config=config_factory(startup_delay_s=0.5), clock=clock)
    assert clock.total_slept == pytest.approx(0.5)
