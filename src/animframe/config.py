"""Runtime configuration helpers.

Merges the packaged defaults from settings.values, the user's
``settings.json`` and optional CLI overrides into the RuntimeConfig that
AnimationFrame is built from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from .settings.schema import Settings
from .settings.store import SettingsStore
from .settings.values import KEYMAP, THEME, TIMING_DEFAULTS


@dataclass(slots=True)
class RuntimeConfig:
    settings: Settings
    theme: Dict[str, Any] = field(default_factory=lambda: dict(THEME))
    keymap: Dict[str, Sequence[str]] = field(default_factory=lambda: dict(KEYMAP))
    sleep_slice_s: float = float(TIMING_DEFAULTS["sleep_slice_s"])

    def color(self, group: str, name: str) -> tuple[int, int, int, int]:
        """Return a theme colour as an RGBA tuple."""
        v = self.theme.get("colors", {}).get(group, {}).get(name)
        if not isinstance(v, (list, tuple)) or len(v) not in (3, 4):
            raise KeyError(f"theme colour {group}.{name} is not defined")
        r, g, b = (int(c) for c in v[:3])
        a = int(v[3]) if len(v) == 4 else 255
        return (r, g, b, a)


def make_runtime_config(
    *, args: Optional[object] = None, settings: Settings | None = None
) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and CLI overrides.

    *args* is argparse.Namespace-like. Recognised attributes: ``size``
    (a ``(width, height)`` pair), ``play`` and ``headless`` (both start in
    play mode; headless also skips the startup delay).
    """
    base = settings if settings is not None else SettingsStore.load()
    overrides: Dict[str, Any] = {}
    if args is not None:
        size = getattr(args, "size", None)
        if size is not None:
            overrides["width"], overrides["height"] = int(size[0]), int(size[1])
        if getattr(args, "play", False):
            overrides["autoplay"] = True
        if getattr(args, "headless", False):
            overrides["autoplay"] = True
            overrides["startup_delay_s"] = 0.0
    if overrides:
        base = Settings.model_validate(base.model_dump() | overrides)
    return RuntimeConfig(settings=base)
