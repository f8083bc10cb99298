"""Circle ripples: rings spreading out from a row of centres.

Run with ``python -m animframe.examples.circle_ripples`` and press the
play or frame-advance button.
"""

from __future__ import annotations

from typing import List, Tuple

from animframe.frame import AnimationFrame

RIPPLES = 24
START = 50
GAP = 50
SHIFT = 10
CENTER_Y = 250
SPREAD_STEP = 15


def initial_rings(count: int = RIPPLES) -> Tuple[List[int], List[int]]:
    """Return the ring centres ``x`` and start offsets ``t``.

    Ring ``i`` starts ``i * GAP`` pixels behind the first one, so the rings
    appear one after another as the spread grows.
    """
    x: List[int] = []
    t: List[int] = []
    num = START
    for _ in range(count):
        x.append(num // 2)
        t.append(-(num - START))
        num += GAP
    return x, t


def draw_rings(af: AnimationFrame, x: List[int], t: List[int], spread: int) -> None:
    for i, (cx, offset) in enumerate(zip(x, t)):
        af.draw_circle(cx - i * SHIFT, CENTER_Y, offset + spread, False)


def run(af: AnimationFrame, frames: int | None = None) -> int:
    """Animate until the window closes or ``frames`` frames were shown.

    Returns the number of frames painted.
    """
    x, t = initial_rings()
    spread = 0
    painted = 0
    while frames is None or painted < frames:
        draw_rings(af, x, t, spread)
        af.paint_frame()
        painted += 1
        spread += SPREAD_STEP
    return painted


def main() -> None:
    run(AnimationFrame())


if __name__ == "__main__":
    main()
