from __future__ import annotations

import argparse

import pytest

from animframe.config import make_runtime_config
from animframe.settings.schema import Settings


def test_defaults_without_args() -> None:
    cfg = make_runtime_config()
    assert cfg.settings == Settings()
    assert cfg.color("canvas", "background") == (255, 255, 255, 255)
    assert cfg.color("canvas", "pen") == (0, 0, 0, 255)


def test_cli_overrides_merge_over_settings() -> None:
    args = argparse.Namespace(size=(320, 240), play=True, headless=False)
    cfg = make_runtime_config(args=args, settings=Settings(frame_delay_s=0.2))
    assert (cfg.settings.width, cfg.settings.height) == (320, 240)
    assert cfg.settings.autoplay
    assert cfg.settings.frame_delay_s == pytest.approx(0.2)


def test_headless_skips_startup_delay_and_plays() -> None:
    args = argparse.Namespace(size=None, play=False, headless=True)
    cfg = make_runtime_config(args=args)
    assert cfg.settings.autoplay
    assert cfg.settings.startup_delay_s == 0.0


def test_unknown_theme_colour() -> None:
    with pytest.raises(KeyError):
        make_runtime_config().color("canvas", "nope")
