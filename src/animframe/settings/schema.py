"""Pydantic model for user settings."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from .values import TIMING_DEFAULTS, WINDOW_DEFAULTS


class Settings(BaseModel):
    """Window and timing settings read from ``settings.json``.

    Parameters
    ----------
    width / height: Size of the drawing area in pixels (toolbar excluded).
    title: Window caption.
    toolbar_height: Height of the transport toolbar strip in pixels.
    startup_delay_s: Pause after the window opens.
    frame_delay_s: Pause after each released ``paint_frame()``. This
        paces playback; it is not a timing guarantee.
    poll_interval_s: How often the paused frame checks the buttons.
    autoplay: Start in play mode instead of waiting at the first frame.
    image_dirs: Extra directories searched by ``set_image`` for relative
        file names, before the script directory and the working directory.
    """

    width: int = Field(default=int(WINDOW_DEFAULTS["width"]))
    height: int = Field(default=int(WINDOW_DEFAULTS["height"]))
    title: str = Field(default=str(WINDOW_DEFAULTS["title"]))
    toolbar_height: int = Field(default=int(WINDOW_DEFAULTS["toolbar_height"]))
    startup_delay_s: float = Field(default=TIMING_DEFAULTS["startup_delay_s"])
    frame_delay_s: float = Field(default=TIMING_DEFAULTS["frame_delay_s"])
    poll_interval_s: float = Field(default=TIMING_DEFAULTS["poll_interval_s"])
    autoplay: bool = Field(default=False)
    image_dirs: List[str] = Field(default_factory=list)

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("drawing area size must be > 0")
        return v

    @field_validator("toolbar_height")
    @classmethod
    def _chk_toolbar(cls, v: int) -> int:
        if v < 24:
            raise ValueError("toolbar_height must be >= 24 to fit the buttons")
        return v

    @field_validator("startup_delay_s", "frame_delay_s")
    @classmethod
    def _chk_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("delays must be >= 0 seconds")
        return v

    @field_validator("poll_interval_s")
    @classmethod
    def _chk_poll(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("poll_interval_s must be > 0")
        return v
