"""animframe package root.

The project version is defined here as the single source of truth and
exposed via ``__version__``. The packaging configuration (pyproject.toml)
reads this attribute using ``version = { attr = "animframe.__version__" }``.

Student programs normally only need :class:`AnimationFrame`::

    from animframe import AnimationFrame

    af = AnimationFrame()
    af.draw_circle(250, 250, 100)
    af.paint_frame()
"""

from animframe.errors import AnimationFrameError, ImageLoadError, WindowClosed
from animframe.frame import AnimationFrame

__all__ = [
    "__version__",
    "AnimationFrame",
    "AnimationFrameError",
    "ImageLoadError",
    "WindowClosed",
]

# Keep in sync with release tags until setuptools-scm or similar is adopted.
__version__ = "1.2.0"
