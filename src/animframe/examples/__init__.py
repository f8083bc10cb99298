"""Example programs for animframe.

Each example exposes ``run(af, frames=None)`` drawing into an existing
:class:`~animframe.AnimationFrame`, and can also be run as a script.
"""

from animframe.examples import circle_ripples as circle_ripples

DEMOS = {
    "ripples": circle_ripples.run,
}

__all__ = ["circle_ripples", "DEMOS"]
