"""Pygame-based DisplayBackend with an offscreen drawing buffer.

All drawing goes to an offscreen surface the size of the drawing area.
``present()`` composes the toolbar strip and the offscreen buffer onto the
visible surface: the window when one exists, otherwise an in-memory
surface of the same size. Setting SDL_VIDEODRIVER=dummy before use keeps
everything headless and deterministic for tests.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from animframe.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(500, 500), toolbar_height=28)
    canvas = backend.begin_frame()
    canvas.line((10, 10), (490, 10), color=(255, 0, 0, 255))
    backend.present()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Sequence, Tuple

from animframe.render.canvas import BLACK, WHITE, Canvas, Color, DisplayBackend, Rect

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _pygame_color(c: Color) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return int(r), int(g), int(b), int(a)


@dataclass(slots=True)
class _FontCache:
    fonts: Dict[int, Any]

    def __init__(self) -> None:
        self.fonts = {}

    def get(self, size_px: int) -> Any:
        f = self.fonts.get(size_px)
        if f is None:
            if pg is None:
                raise RuntimeError("pygame is not available")
            # Default font for determinism across platforms
            f = pg.font.Font(None, max(1, int(size_px)))
            self.fonts[size_px] = f
        return f


class _PygameCanvas(Canvas):
    def __init__(self, surface: Any, font_cache: _FontCache) -> None:
        self._surface = surface
        self._font_cache = font_cache

    def _pt(self, p: Tuple[int, int]) -> Tuple[int, int]:
        return int(p[0]), int(p[1])

    def _rect(self, r: Rect) -> Any:
        x, y, w, h = r
        return pg.Rect(int(x), int(y), int(w), int(h))

    def clear(self, color: Color) -> None:
        self._surface.fill(_pygame_color(color))

    def line(
        self,
        p0: Tuple[int, int],
        p1: Tuple[int, int],
        width: int = 1,
        color: Color = BLACK,
    ) -> None:
        pg.draw.line(
            self._surface, _pygame_color(color), self._pt(p0), self._pt(p1), width
        )

    def rect(self, rect: Rect, width: int = 0, color: Color = BLACK) -> None:
        if rect[2] <= 0 or rect[3] <= 0:
            return
        pg.draw.rect(self._surface, _pygame_color(color), self._rect(rect), width)

    def ellipse(self, rect: Rect, width: int = 0, color: Color = BLACK) -> None:
        if rect[2] <= 0 or rect[3] <= 0:
            return
        pg.draw.ellipse(self._surface, _pygame_color(color), self._rect(rect), width)

    def polygon(
        self,
        pts: Sequence[Tuple[int, int]],
        width: int = 0,
        color: Color = BLACK,
    ) -> None:
        if len(pts) < 3:
            return
        pg.draw.polygon(
            self._surface, _pygame_color(color), [self._pt(p) for p in pts], width
        )

    def text(
        self,
        pos: Tuple[int, int],
        s: str,
        size_px: int = 12,
        color: Color = BLACK,
    ) -> None:
        font = self._font_cache.get(size_px)
        # Antialiased rendering for consistent appearance
        surf = font.render(s, True, _pygame_color(color))
        self._surface.blit(surf, self._pt(pos))

    def text_ascent(self, size_px: int) -> int:
        return int(self._font_cache.get(size_px).get_ascent())

    def text_size(self, s: str, size_px: int = 12) -> Tuple[int, int]:
        w, h = self._font_cache.get(size_px).size(s)
        return int(w), int(h)

    def blit(self, image: Any, pos: Tuple[int, int]) -> None:
        self._surface.blit(image, self._pt(pos))


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen buffer.

    A window is only created when ``create_window`` is true and the video
    driver is not ``dummy``. The window is never user-resizable; the
    program changes its size through :meth:`resize`.
    """

    def __init__(
        self,
        size: Tuple[int, int] = (500, 500),
        *,
        toolbar_height: int = 28,
        title: str = "AnimationFrame",
        background: Color = WHITE,
        create_window: bool = False,
    ) -> None:
        if pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        # Ensure headless if requested
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not pg.get_init():
            pg.init()
        if not pg.font.get_init():
            pg.font.init()

        self._toolbar_h = max(0, int(toolbar_height))
        self._title = title
        self._background = background
        self._want_window = create_window and (
            os.environ.get("SDL_VIDEODRIVER") != "dummy"
        )
        self._window_surface: Any = None
        self._font_cache = _FontCache()
        self._width = self._height = 0
        self._surface: Any = None
        self._screen: Any = None
        self.resize(size)

    # Geometry ------------------------------------------------------------
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def toolbar_height(self) -> int:
        return self._toolbar_h

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    def resize(self, size: Tuple[int, int]) -> None:
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            raise ValueError(f"drawing area must be positive, got {width}x{height}")
        self._width, self._height = width, height
        full = (width, height + self._toolbar_h)
        if self._want_window:
            try:
                self._window_surface = pg.display.set_mode(full)
                pg.display.set_caption(self._title)
            except Exception:
                logger.warning(
                    "Window creation failed; falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions.",
                    exc_info=True,
                )
                self._want_window = False
                self._window_surface = None
        self._screen = (
            self._window_surface
            if self._window_surface is not None
            else pg.Surface(full, flags=pg.SRCALPHA)
        )
        # Offscreen buffer starts out filled with the background colour
        self._surface = pg.Surface((width, height), flags=pg.SRCALPHA)
        self._surface.fill(_pygame_color(self._background))
        logger.debug("display resized to %dx%d", width, height)

    # Frame cycle ---------------------------------------------------------
    def begin_frame(self) -> Canvas:
        return _PygameCanvas(self._surface, self._font_cache)

    def present(self, overlay: Callable[[Canvas], None] | None = None) -> None:
        screen = self._screen
        screen.fill(_pygame_color(self._background))
        if overlay is not None and self._toolbar_h > 0:
            overlay(_PygameCanvas(screen, self._font_cache))
        screen.blit(self._surface, (0, self._toolbar_h))
        if self._window_surface is not None:
            pg.display.flip()

    @property
    def buffer(self) -> Any:
        """The offscreen surface (drawing area only)."""
        return self._surface

    @property
    def screen(self) -> Any:
        """The visible surface, toolbar included."""
        return self._screen

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        pg.image.save(self._surface, str(path))

    def close(self) -> None:
        if self._window_surface is not None:
            pg.display.quit()
            self._window_surface = None
