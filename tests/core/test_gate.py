from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from animframe.core.gate import FrameGate
from animframe.core.time import SimClock


def test_starts_paused_by_default() -> None:
    gate = FrameGate()
    assert not gate.playing
    assert not gate.released
    assert gate.step_enabled


def test_toggle_play_flips_state() -> None:
    gate = FrameGate()
    gate.toggle_play()
    assert gate.released and gate.play_mode
    assert not gate.step_enabled
    gate.toggle_play()
    assert not gate.released


def test_step_releases_one_frame_only() -> None:
    gate = FrameGate()
    assert gate.request_step() is True
    assert gate.released
    gate.consume()
    assert not gate.released
    assert not gate.step_pending


def test_step_ignored_while_playing() -> None:
    gate = FrameGate(playing=True)
    assert gate.request_step() is False
    assert not gate.step_pending
    gate.consume()
    assert gate.released


def test_play_during_pending_step_keeps_playing() -> None:
    gate = FrameGate()
    gate.request_step()
    gate.toggle_play()
    assert gate.play_mode
    gate.consume()
    assert gate.released


def test_wait_returns_immediately_when_playing() -> None:
    gate = FrameGate(playing=True)
    clock = SimClock()
    pumps: list[int] = []
    assert gate.wait(lambda: pumps.append(1), clock, 0.1) == 0
    assert pumps == [1]
    assert clock.sleeps == []


def test_wait_polls_until_play_pressed() -> None:
    gate = FrameGate()
    clock = SimClock()
    calls = 0

    def pump() -> None:
        nonlocal calls
        calls += 1
        if calls == 4:
            gate.toggle_play()

    polls = gate.wait(pump, clock, 0.1)
    assert polls == 3
    assert clock.sleeps == [0.1, 0.1, 0.1]
    assert gate.released


def test_wait_consumes_step() -> None:
    gate = FrameGate()
    clock = SimClock()
    gate.wait(gate.request_step, clock, 0.1)
    assert not gate.released
    assert clock.monotonic() == 0.0


def test_wait_rejects_non_positive_poll() -> None:
    with pytest.raises(ValueError):
        FrameGate(playing=True).wait(lambda: None, SimClock(), 0.0)


@given(st.lists(st.sampled_from(["play", "step", "frame"]), max_size=40))
def test_flag_invariants(actions: list[str]) -> None:
    gate = FrameGate()
    for action in actions:
        if action == "play":
            before = gate.play_mode
            gate.toggle_play()
            assert gate.play_mode != before
        elif action == "step":
            accepted = gate.request_step()
            assert accepted or gate.playing
        elif gate.released:
            was_step = gate.step_pending
            gate.consume()
            assert not gate.step_pending
            assert gate.released == (not was_step)
        # a pending step always holds the gate open
        assert not gate.step_pending or gate.playing
        assert gate.step_enabled == (not gate.play_mode)
