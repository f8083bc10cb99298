"""AnimationFrame: a drawing window driven frame by frame.

Drawing calls render into an offscreen buffer. ``paint_frame()`` copies
the buffer to the window and then waits for the transport buttons: the
play button [>] lets the program run through frames until paused [||],
the frame-advance button [|>] runs it up to the next ``paint_frame()``.

A typical animation loop::

    af = AnimationFrame()
    x = 0
    while True:
        af.draw_circle(x, 250, 40)
        af.paint_frame()
        x += 5

The first drawing call after a ``paint_frame()`` clears the buffer to
white, so every frame is drawn from scratch.

Timing is approximate: ``sleep()`` and the pause after each frame only
slow the animation down and must not be used for measuring time.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Tuple

from animframe.config import RuntimeConfig, make_runtime_config
from animframe.core.gate import FrameGate
from animframe.core.images import ImageRegistry
from animframe.core.time import Clock, RealClock
from animframe.errors import WindowClosed
from animframe.platform.display.pygame_backend import PygameDisplayBackend
from animframe.platform.input.pygame_input import InputBackend, PygameInputBackend
from animframe.render.canvas import Canvas, Color, DisplayBackend
from animframe.ui.transport import QUIT, TOOLBAR_COLORS, TransportBar

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def to_color(value: Any) -> Color:
    """Normalise a colour argument to an RGBA tuple.

    Accepts ``(r, g, b)`` / ``(r, g, b, a)`` sequences with components in
    0..255, pygame colour names (``"red"``) and hex strings (``"#ff8000"``).
    """
    if isinstance(value, str):
        if pg is None:
            raise RuntimeError("pygame is not available")
        try:
            c = pg.Color(value)
        except ValueError:
            raise ValueError(f"unknown colour name: {value!r}") from None
        return (c.r, c.g, c.b, c.a)
    try:
        parts = [int(v) for v in value]
    except (TypeError, ValueError):
        raise ValueError(f"invalid colour: {value!r}") from None
    if len(parts) == 3:
        parts.append(255)
    if len(parts) != 4 or not all(0 <= v <= 255 for v in parts):
        raise ValueError(f"colour needs 3 or 4 components in 0..255: {value!r}")
    return (parts[0], parts[1], parts[2], parts[3])


class AnimationFrame:
    """Window with a drawing area and play / frame-advance controls.

    Parameters
    ----------
    config: Runtime configuration; built from the user's settings file
        when omitted.
    display: Display backend; a windowed :class:`PygameDisplayBackend` by
        default.
    input_backend: Source of click / key events; pygame's event queue by
        default.
    clock: Clock used for every pause; :class:`RealClock` by default.
    record_dir: When set, each flushed frame is also saved there as
        ``frame_00001.png``, ``frame_00002.png``, ...
    """

    def __init__(
        self,
        *,
        config: RuntimeConfig | None = None,
        display: DisplayBackend | None = None,
        input_backend: InputBackend | None = None,
        clock: Clock | None = None,
        record_dir: str | Path | None = None,
    ) -> None:
        self._cfg = config if config is not None else make_runtime_config()
        s = self._cfg.settings
        self._background: Color = self._cfg.color("canvas", "background")
        self._color: Color = self._cfg.color("canvas", "pen")
        if display is None:
            display = PygameDisplayBackend(
                (s.width, s.height),
                toolbar_height=s.toolbar_height,
                title=s.title,
                background=self._background,
                create_window=True,
            )
        self._display = display
        if input_backend is None:
            input_backend = PygameInputBackend()
        self._input = input_backend
        self._clock = clock if clock is not None else RealClock()
        self._record_dir = Path(record_dir) if record_dir is not None else None

        playing = s.autoplay
        if (
            not playing
            and isinstance(input_backend, PygameInputBackend)
            and not getattr(display, "has_window", True)
        ):
            # no window means no clicks, and a paused gate would never release
            logger.warning("no window to click in; starting in play mode")
            playing = True
        self._gate = FrameGate(playing=playing)
        toolbar_h = int(getattr(display, "toolbar_height", s.toolbar_height))
        self._transport = TransportBar(
            self._gate,
            height=toolbar_h,
            keymap=self._cfg.keymap,
            colors={
                name: self._cfg.color("toolbar", name) for name in TOOLBAR_COLORS
            },
        )
        self._images = ImageRegistry(s.image_dirs)
        self._canvas: Canvas = self._display.begin_frame()
        self._clear_pending = False
        self._frames = 0
        self._closed = False

        self._present()
        self._pause(s.startup_delay_s)

    # Properties ----------------------------------------------------------
    @property
    def gate(self) -> FrameGate:
        return self._gate

    @property
    def transport(self) -> TransportBar:
        return self._transport

    @property
    def display(self) -> DisplayBackend:
        return self._display

    @property
    def frames(self) -> int:
        """Number of ``paint_frame()`` calls so far."""
        return self._frames

    @property
    def color(self) -> Color:
        return self._color

    def size(self) -> Tuple[int, int]:
        """Size of the drawing area in pixels."""
        return self._display.size()

    # Pen -----------------------------------------------------------------
    def set_color(self, color: Any) -> None:
        """Set the pen colour used by the following drawing calls."""
        self._color = to_color(color)

    # Drawing -------------------------------------------------------------
    def _prepare(self) -> Canvas:
        if self._clear_pending:
            self._canvas.clear(self._background)
            self._clear_pending = False
        return self._canvas

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line from (x1, y1) to (x2, y2)."""
        self._prepare().line((x1, y1), (x2, y2), 1, self._color)

    def draw_rect(
        self, x: int, y: int, width: int, height: int, fill: bool = True
    ) -> None:
        """Draw a rectangle with its top-left corner at (x, y).

        With ``fill=False`` only the outline is drawn.
        """
        self._prepare().rect((x, y, width, height), 0 if fill else 1, self._color)

    def draw_circle(self, x: int, y: int, d: int, fill: bool = True) -> None:
        """Draw a circle centred at (x, y).

        ``d`` is the diameter. With ``fill=False`` only the outline is
        drawn. A diameter of zero or less draws nothing.
        """
        canvas = self._prepare()
        d = int(d)
        if d <= 0:
            return
        box = (int(x) - d // 2, int(y) - d // 2, d, d)
        canvas.ellipse(box, 0 if fill else 1, self._color)

    def draw_square(self, x: int, y: int, s: int) -> None:
        """Draw a filled square of side ``s`` centred at (x, y)."""
        s = int(s)
        self.draw_rect(int(x) - s // 2, int(y) - s // 2, s, s, True)

    def draw_string(self, text: str, x: int, y: int, size: float = 12) -> None:
        """Draw ``text`` starting at (x, y), where y is the baseline."""
        canvas = self._prepare()
        size_px = max(1, int(round(size)))
        top = int(y) - canvas.text_ascent(size_px)
        canvas.text((int(x), top), str(text), size_px, self._color)

    def set_image(self, name: str) -> None:
        """Load an image file (png, jpg, gif) and register it as ``name``.

        Relative names are looked up in the configured image directories,
        then next to the running script, then in the working directory.

        Raises:
            ImageLoadError: If the file is missing or cannot be decoded.
        """
        self._images.load(name)

    def draw_image(self, name: str, x: int, y: int, percent: int = 100) -> None:
        """Draw a registered image centred at (x, y) at ``percent`` % scale.

        Images that were never registered are skipped.
        """
        canvas = self._prepare()
        scaled = self._images.scaled(name, percent)
        if scaled is None:
            return
        surface, w, h = scaled
        canvas.blit(surface, (int(x) - w // 2, int(y) - h // 2))

    # Window --------------------------------------------------------------
    def set_size(self, width: int, height: int) -> None:
        """Resize the drawing area; the buffer restarts blank."""
        if (int(width), int(height)) == tuple(self._display.size()):
            return
        self._display.resize((int(width), int(height)))
        self._canvas = self._display.begin_frame()
        self._clear_pending = False
        self._present()

    def save_frame(self, path: str | Path) -> None:
        """Write the current drawing area to a PNG file."""
        self._display.save_png(str(path))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._display.close()

    def __enter__(self) -> "AnimationFrame":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # Frame cycle ---------------------------------------------------------
    def paint_frame(self) -> None:
        """Show everything drawn so far and wait for play / frame advance.

        While playing this returns after a short pause; while paused it
        blocks until the user presses play or frame advance.
        """
        self._frames += 1
        self._present()
        if self._record_dir is not None:
            self.save_frame(self._record_dir / f"frame_{self._frames:05d}.png")
        self._clear_pending = True
        logger.debug("frame %d flushed", self._frames)

        s = self._cfg.settings
        polls = self._gate.wait(self._pump, self._clock, s.poll_interval_s)
        if polls:
            logger.debug("frame %d released after %d polls", self._frames, polls)
        self._present()
        self._pause(s.frame_delay_s)

    def sleep(self, ms: int) -> None:
        """Pause the program for about ``ms`` milliseconds.

        The window keeps handling clicks meanwhile. This slows an
        animation down; it is not an accurate timer.
        """
        if ms < 0:
            raise ValueError(f"sleep time must be >= 0 ms, got {ms}")
        self._pause(ms / 1000.0)

    def _pause(self, seconds: float) -> None:
        if seconds <= 0:
            return
        step = self._cfg.sleep_slice_s
        n = max(1, math.ceil(seconds / step - 1e-9)) if step > 0 else 1
        for _ in range(n):
            self._clock.sleep(seconds / n)
            self._pump()

    # Input ---------------------------------------------------------------
    def _pump(self) -> None:
        changed = False
        for ev in self._input.pump():
            if ev.type == "quit":
                self._quit()
            elif ev.type == "tap":
                changed |= self._transport.on_tap(ev.x, ev.y)
            elif ev.type == "key":
                action = self._transport.on_key(ev.key)
                if action == QUIT:
                    self._quit()
                changed |= action is not None
        if changed:
            self._present()

    def _quit(self) -> None:
        logger.debug("window closed after %d frames", self._frames)
        self.close()
        raise WindowClosed()

    def _present(self) -> None:
        if self._closed:
            return
        width = self._display.size()[0]
        self._display.present(lambda c: self._transport.draw(c, width))

