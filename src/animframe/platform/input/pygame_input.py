"""Pygame InputBackend mapping window events to simple UI events.

A left-button release becomes a ``tap`` event (buttons act on release),
key presses become ``key`` events carrying the lowercase pygame key name,
and closing the window becomes ``quit``. Any object with a compatible
``pump()`` generator can be used instead, which is how tests script clicks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator, Iterable, Protocol

pg: Any = None
try:  # pragma: no cover - optional dependency in CI
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


@dataclass(slots=True)
class UiEvent:
    type: str  # "tap" | "key" | "quit"
    x: int = 0
    y: int = 0
    ts: float = 0.0
    key: str = ""


class InputBackend(Protocol):
    def pump(self) -> Iterable[UiEvent]:
        ...


class PygameInputBackend:
    """Drains the pygame event queue into UiEvents.

    Call pump() regularly so the window stays responsive. In headless mode
    (dummy video) pygame delivers no real input; tests can post events.
    """

    def __init__(self) -> None:
        if pg is None:
            raise RuntimeError("pygame not available for input backend")

    def pump(self) -> Generator[UiEvent, None, None]:
        if not pg.display.get_init():
            return
        for ev in pg.event.get():
            ts = float(pg.time.get_ticks()) / 1000.0
            if ev.type == pg.QUIT:
                yield UiEvent("quit", ts=ts)
            elif ev.type == pg.MOUSEBUTTONUP and ev.button == 1:
                yield UiEvent("tap", int(ev.pos[0]), int(ev.pos[1]), ts)
            elif ev.type == pg.KEYDOWN:
                yield UiEvent("key", ts=ts, key=pg.key.name(ev.key).lower())


class ScriptedInput:
    """Input backend fed from a list of event batches.

    Each pump() call yields the next batch; once exhausted it yields
    nothing. Useful for driving the frame programmatically.
    """

    def __init__(self, batches: Iterable[Iterable[UiEvent]] = ()) -> None:
        self._batches: list[list[UiEvent]] = [list(b) for b in batches]
        self.pumps = 0

    def push(self, *events: UiEvent) -> None:
        self._batches.append(list(events))

    def pump(self) -> Generator[UiEvent, None, None]:
        self.pumps += 1
        if self._batches:
            yield from self._batches.pop(0)
