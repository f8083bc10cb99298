"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. Each section is
merged over hard-coded fallbacks so a missing or partial file still
yields a complete set of defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_WINDOW = {
    "width": 500,
    "height": 500,
    "title": "AnimationFrame",
    "toolbar_height": 28,
}
_FALLBACK_TIMING = {
    "startup_delay_s": 0.5,
    "frame_delay_s": 0.08,
    "poll_interval_s": 0.1,
    "sleep_slice_s": 0.02,
}
_FALLBACK_THEME = {
    "colors": {
        "canvas": {
            "background": [255, 255, 255, 255],
            "pen": [0, 0, 0, 255],
        },
        "toolbar": {
            "bg": [238, 238, 238, 255],
            "button_bg": [250, 250, 250, 255],
            "border": [184, 184, 184, 255],
            "icon": [0, 0, 255, 255],
            "icon_disabled": [160, 160, 190, 255],
        },
    }
}
_FALLBACK_KEYS = {
    "play": ["space", "p"],
    "step": ["right", ".", "s"],
    "quit": ["escape", "q"],
}


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("could not read %s; using built-in defaults", path)
        return {}
    return raw if isinstance(raw, dict) else {}


_window: Dict[str, Any] = dict(_FALLBACK_WINDOW)
_timing: Dict[str, float] = dict(_FALLBACK_TIMING)
_theme: Dict[str, Any] = {
    "colors": {k: dict(v) for k, v in _FALLBACK_THEME["colors"].items()}
}
_keys: Dict[str, List[str]] = {k: list(v) for k, v in _FALLBACK_KEYS.items()}

raw = _load_yaml(_YAML_PATH)
# Window
win = raw.get("window")
if isinstance(win, dict):
    for k in ("width", "height", "toolbar_height"):
        v = win.get(k)
        if isinstance(v, int) and v >= 0:
            _window[k] = v
    if isinstance(win.get("title"), str):
        _window["title"] = win["title"]
# Timing
tm = raw.get("timing")
if isinstance(tm, dict):
    for k in _FALLBACK_TIMING:
        v = tm.get(k)
        if isinstance(v, (int, float)) and v >= 0:
            _timing[k] = float(v)
# Theme (per colour group shallow merge)
theme = raw.get("theme")
if isinstance(theme, dict) and isinstance(theme.get("colors"), dict):
    for group, colors in theme["colors"].items():
        if isinstance(colors, dict):
            _theme["colors"].setdefault(group, {}).update(colors)
# Keyboard shortcuts
keys = raw.get("keys")
if isinstance(keys, dict):
    for action, names in keys.items():
        if action in _keys and isinstance(names, list):
            _keys[action] = [str(n).lower() for n in names]

# --- Public accessors ----------------------------------------------------
WINDOW_DEFAULTS: Dict[str, Any] = dict(_window)
TIMING_DEFAULTS: Dict[str, float] = dict(_timing)
THEME: Dict[str, Any] = dict(_theme)
KEYMAP: Dict[str, Sequence[str]] = {k: tuple(v) for k, v in _keys.items()}

__all__ = [
    "WINDOW_DEFAULTS",
    "TIMING_DEFAULTS",
    "THEME",
    "KEYMAP",
]
