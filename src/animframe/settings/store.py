"""Settings file lookup and loading."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import Settings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load :class:`Settings` from disk.

    Settings are read-only at runtime; the file is edited by hand.
    """

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("ANIMFRAME_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.animframe"))
        return base / "settings.json"

    @classmethod
    def load(cls) -> Settings:
        """Load settings from disk, returning defaults on error."""
        path = cls.settings_path()
        if not path.exists():
            return Settings()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return Settings.model_validate(data)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("ignoring invalid settings file %s: %s", path, exc)
            return Settings()
