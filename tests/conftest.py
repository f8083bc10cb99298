from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

# Headless pygame for the whole suite; must be set before pygame.init()
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from animframe.config import RuntimeConfig, make_runtime_config  # noqa: E402
from animframe.core.time import SimClock  # noqa: E402
from animframe.frame import AnimationFrame  # noqa: E402
from animframe.platform.display.pygame_backend import (  # noqa: E402
    PygameDisplayBackend,
)
from animframe.platform.input.pygame_input import ScriptedInput  # noqa: E402
from animframe.settings.schema import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def animframe_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("ANIMFRAME_HOME", str(home))
    return home


def make_config(**overrides: Any) -> RuntimeConfig:
    values: dict[str, Any] = {
        "width": 200,
        "height": 150,
        "startup_delay_s": 0.0,
        "frame_delay_s": 0.0,
        "autoplay": True,
    }
    values.update(overrides)
    return make_runtime_config(settings=Settings(**values))


@pytest.fixture
def config_factory() -> Callable[..., RuntimeConfig]:
    return make_config


@pytest.fixture
def make_frame() -> Iterator[Callable[..., AnimationFrame]]:
    """Build headless AnimationFrames with scripted input and a sim clock."""
    created: list[AnimationFrame] = []

    def _make(
        *,
        config: RuntimeConfig | None = None,
        input_backend: Any = None,
        clock: Any = None,
        **kwargs: Any,
    ) -> AnimationFrame:
        cfg = config if config is not None else make_config()
        s = cfg.settings
        display = PygameDisplayBackend(
            (s.width, s.height), toolbar_height=s.toolbar_height
        )
        af = AnimationFrame(
            config=cfg,
            display=display,
            input_backend=(
                input_backend if input_backend is not None else ScriptedInput()
            ),
            clock=clock if clock is not None else SimClock(),
            **kwargs,
        )
        created.append(af)
        return af

    yield _make
    for af in created:
        af.close()

