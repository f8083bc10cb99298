"""Exceptions raised by animframe."""

from __future__ import annotations


class AnimationFrameError(Exception):
    """Base class for animframe errors."""


class ImageLoadError(AnimationFrameError):
    """An image file could not be found or decoded."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"cannot load image {name!r}: {reason}")
        self.name = name
        self.reason = reason


class WindowClosed(SystemExit):
    """Raised from the input pump when the user closes the window.

    Subclasses ``SystemExit`` so an unhandled close ends the student's
    program quietly, the same way closing the window exits the process.
    """

    def __init__(self) -> None:
        super().__init__(0)
