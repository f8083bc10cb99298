"""Transport toolbar with play/pause and frame-advance buttons."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from animframe.core.gate import FrameGate
from animframe.render.canvas import Canvas, Color, Rect
from animframe.settings.values import KEYMAP, THEME

_TB_THEME = THEME.get("colors", {}).get("toolbar", {})


def _c(v: object, fb: tuple[int, int, int, int]) -> Color:
    if (
        isinstance(v, (list, tuple))
        and len(v) == 4
        and all(isinstance(c, (int, float)) for c in v)
    ):
        return (int(v[0]), int(v[1]), int(v[2]), int(v[3]))
    return fb


TOOLBAR_COLORS: Dict[str, Color] = {
    "bg": _c(_TB_THEME.get("bg"), (238, 238, 238, 255)),
    "button_bg": _c(_TB_THEME.get("button_bg"), (250, 250, 250, 255)),
    "border": _c(_TB_THEME.get("border"), (184, 184, 184, 255)),
    "icon": _c(_TB_THEME.get("icon"), (0, 0, 255, 255)),
    "icon_disabled": _c(_TB_THEME.get("icon_disabled"), (160, 160, 190, 255)),
}

ICON_PX = 20
_MARGIN = 2

# Icon shapes on a 20x20 grid
PLAY_ICON: Sequence[Tuple[int, int]] = ((2, 2), (18, 10), (2, 18))
PAUSE_ICON: Sequence[Rect] = ((3, 2, 6, 16), (11, 2, 6, 16))
STEP_ICON_TRIANGLE: Sequence[Tuple[int, int]] = ((8, 2), (18, 10), (8, 18))
STEP_ICON_BAR: Rect = (2, 2, 4, 16)

PLAY = "play"
STEP = "step"
QUIT = "quit"


class TransportBar:
    """Toolbar strip drawn above the drawing area.

    The play button toggles the gate between playing and paused and shows
    the pause icon while playing. The frame-advance button requests a
    single step and is disabled while playing.

    Parameters
    ----------
    gate: The frame gate the buttons drive.
    height: Toolbar height in pixels; buttons are square and fill it
        minus a small margin.
    keymap: Mapping from action (``play``/``step``/``quit``) to key names.
    colors: Toolbar colours keyed like ``TOOLBAR_COLORS`` (``bg``,
        ``button_bg``, ``border``, ``icon``, ``icon_disabled``); missing keys
        use the packaged theme.
    """

    def __init__(
        self,
        gate: FrameGate,
        *,
        height: int = 28,
        keymap: Dict[str, Sequence[str]] | None = None,
        colors: Dict[str, Color] | None = None,
    ) -> None:
        if height < ICON_PX:
            raise ValueError(f"toolbar height must be >= {ICON_PX}px")
        self.gate = gate
        self.height = int(height)
        self.colors: Dict[str, Color] = {**TOOLBAR_COLORS, **(colors or {})}
        keymap = keymap if keymap is not None else KEYMAP
        self._keys: Dict[str, str] = {}
        for action, names in keymap.items():
            for name in names:
                self._keys[str(name).lower()] = action
        self._rects: Dict[str, Rect] = {}
        self.layout()

    # Layout --------------------------------------------------------------
    def layout(self) -> None:
        """Compute button rectangles in window coordinates."""
        side = max(ICON_PX, self.height - 2 * _MARGIN)
        y = (self.height - side) // 2
        x = _MARGIN
        rects: Dict[str, Rect] = {}
        for name in (PLAY, STEP):
            rects[name] = (x, y, side, side)
            x += side + _MARGIN
        self._rects = rects

    def button_rect(self, name: str) -> Rect:
        return self._rects[name]

    def icon_origin(self, name: str) -> Tuple[int, int]:
        x, y, w, h = self._rects[name]
        return x + (w - ICON_PX) // 2, y + (h - ICON_PX) // 2

    @property
    def playing_icon(self) -> str:
        """Icon currently shown on the play button (``play`` or ``pause``)."""
        return "pause" if self.gate.play_mode else "play"

    # Drawing -------------------------------------------------------------
    def draw(self, canvas: Canvas, width: int) -> None:
        colors = self.colors
        canvas.rect((0, 0, width, self.height), 0, colors["bg"])
        bottom = self.height - 1
        canvas.line((0, bottom), (width - 1, bottom), 1, colors["border"])
        for name, rect in self._rects.items():
            canvas.rect(rect, 0, colors["button_bg"])
            canvas.rect(rect, 1, colors["border"])
            ox, oy = self.icon_origin(name)
            if name == PLAY:
                self._draw_play_icon(canvas, ox, oy)
            else:
                key = "icon" if self.gate.step_enabled else "icon_disabled"
                color = colors[key]
                canvas.polygon(_shift(STEP_ICON_TRIANGLE, ox, oy), 0, color)
                canvas.rect(_shift_rect(STEP_ICON_BAR, ox, oy), 0, color)

    def _draw_play_icon(self, canvas: Canvas, ox: int, oy: int) -> None:
        if self.gate.play_mode:
            for bar in PAUSE_ICON:
                canvas.rect(_shift_rect(bar, ox, oy), 0, self.colors["icon"])
        else:
            canvas.polygon(_shift(PLAY_ICON, ox, oy), 0, self.colors["icon"])

    # Interaction ---------------------------------------------------------
    def _hit(self, x: int, y: int) -> str | None:
        for name, (rx, ry, rw, rh) in self._rects.items():
            if rx <= x < rx + rw and ry <= y < ry + rh:
                return name
        return None

    def activate(self, action: str) -> bool:
        """Run *action* against the gate. Returns True if state changed."""
        if action == PLAY:
            self.gate.toggle_play()
            return True
        if action == STEP:
            return self.gate.request_step()
        return False

    def on_tap(self, x: int, y: int) -> bool:
        """Handle a click in window coordinates."""
        name = self._hit(x, y)
        if name is None:
            return False
        return self.activate(name)

    def on_key(self, key: str) -> str | None:
        """Map a key name to its action, running play/step immediately.

        Returns the action name (``quit`` is left to the caller).
        """
        action = self._keys.get(key.lower())
        if action in (PLAY, STEP):
            self.activate(action)
        return action


def _shift(pts: Sequence[Tuple[int, int]], dx: int, dy: int) -> List[Tuple[int, int]]:
    return [(x + dx, y + dy) for x, y in pts]


def _shift_rect(r: Rect, dx: int, dy: int) -> Rect:
    return (r[0] + dx, r[1] + dy, r[2], r[3])
