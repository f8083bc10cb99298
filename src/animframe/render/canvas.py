"""Framework-agnostic Canvas and DisplayBackend protocols.

Defines the drawing primitives the animation frame needs and a display
backend contract that owns the offscreen buffer and the visible surface.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, Tuple

Color = Tuple[int, int, int, int]
Rect = Tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)


class Canvas(Protocol):
    def clear(self, color: Color) -> None:
        ...

    def line(
        self,
        p0: Tuple[int, int],
        p1: Tuple[int, int],
        width: int = 1,
        color: Color = BLACK,
    ) -> None:
        ...

    def rect(self, rect: Rect, width: int = 0, color: Color = BLACK) -> None:
        """Draw a rectangle; ``width`` 0 fills it."""
        ...

    def ellipse(self, rect: Rect, width: int = 0, color: Color = BLACK) -> None:
        """Draw an ellipse inscribed in ``rect``; ``width`` 0 fills it."""
        ...

    def polygon(
        self,
        pts: Sequence[Tuple[int, int]],
        width: int = 0,
        color: Color = BLACK,
    ) -> None:
        ...

    def text(
        self,
        pos: Tuple[int, int],
        s: str,
        size_px: int = 12,
        color: Color = BLACK,
    ) -> None:
        """Draw ``s`` with its top-left corner at ``pos``."""
        ...

    def text_ascent(self, size_px: int) -> int:
        """Distance from the top of a text line to its baseline."""
        ...

    def blit(self, image: Any, pos: Tuple[int, int]) -> None:
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        """Size of the drawing area (excluding the toolbar)."""
        ...

    def resize(self, size: Tuple[int, int]) -> None:
        ...

    def begin_frame(self) -> Canvas:
        """Return a canvas over the offscreen buffer."""
        ...

    def present(self, overlay: Callable[[Canvas], None] | None = None) -> None:
        """Copy the offscreen buffer to the visible surface.

        ``overlay`` draws the toolbar strip above the drawing area.
        """
        ...

    def save_png(self, path: str) -> None:
        ...

    def close(self) -> None:
        ...
