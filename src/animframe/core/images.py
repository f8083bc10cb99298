"""Named image registry.

Images are decoded with Pillow (png, jpg, gif; the first frame of an
animated gif) and converted to pygame surfaces once, when registered.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from PIL import Image, UnidentifiedImageError

from animframe.errors import ImageLoadError

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _script_dir() -> Path | None:
    main = sys.modules.get("__main__")
    path = getattr(main, "__file__", None)
    if not path:
        return None
    return Path(path).resolve().parent


def search_dirs(extra: Iterable[str | Path] = ()) -> List[Path]:
    """Directories searched for relative image names, in order."""
    dirs = [Path(d).expanduser() for d in extra]
    script = _script_dir()
    if script is not None:
        dirs.append(script)
    dirs.append(Path.cwd())
    return dirs


def resolve(name: str, dirs: Iterable[Path]) -> Path | None:
    p = Path(name).expanduser()
    if p.is_absolute():
        return p if p.is_file() else None
    for d in dirs:
        candidate = d / p
        if candidate.is_file():
            return candidate
    return None


def decode(path: Path) -> Any:
    """Decode *path* into an RGBA pygame surface."""
    if pg is None:
        raise RuntimeError("pygame is not available")
    try:
        with Image.open(path) as img:
            rgba = img.convert("RGBA")
    except (OSError, UnidentifiedImageError) as exc:
        raise ImageLoadError(str(path), str(exc)) from exc
    return pg.image.frombytes(rgba.tobytes(), rgba.size, "RGBA")


class ImageRegistry:
    """Mapping from the name a program registered to its decoded surface."""

    def __init__(self, dirs: Iterable[str | Path] = ()) -> None:
        self._dirs = list(dirs)
        self._images: Dict[str, Any] = {}
        self._warned: set[str] = set()

    def load(self, name: str) -> Any:
        """Find, decode and register *name*; returns the surface."""
        path = resolve(name, search_dirs(self._dirs))
        if path is None:
            raise ImageLoadError(name, "file not found")
        surface = decode(path)
        self._images[name] = surface
        self._warned.discard(name)
        logger.debug("registered image %r from %s", name, path)
        return surface

    def get(self, name: str) -> Any | None:
        """Return the surface for *name*, or None (warning once) if unknown."""
        surface = self._images.get(name)
        if surface is None and name not in self._warned:
            self._warned.add(name)
            logger.warning("image %r was not registered with set_image()", name)
        return surface

    def scaled(self, name: str, percent: int) -> Tuple[Any, int, int] | None:
        """Return ``(surface, w, h)`` scaled to *percent*, or None."""
        surface = self.get(name)
        if surface is None:
            return None
        w = int(surface.get_width() * percent / 100.0)
        h = int(surface.get_height() * percent / 100.0)
        if w <= 0 or h <= 0:
            return None
        if (w, h) != surface.get_size():
            surface = pg.transform.smoothscale(surface, (w, h))
        return surface, w, h
