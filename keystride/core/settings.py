from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_HOME = Path.home() / ".keystride"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    tick_interval: float = 0.1
    default_category: str = "english"
    log_level: str = "INFO"
    log_file: str = field(default_factory=lambda: str(DEFAULT_HOME / "keystride.log"))


class SettingsStore:
    """Reads user settings. File: ~/.keystride/settings.json.
    A missing or broken file never stops the trainer; defaults are used instead."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._file_path = path or DEFAULT_HOME / "settings.json"

    def load(self) -> Settings:
        defaults = Settings()
        if not self._file_path.exists():
            return defaults
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", self._file_path, e)
            return defaults
        if not isinstance(payload, dict):
            logger.warning("Ignoring settings in %s: expected a JSON object", self._file_path)
            return defaults

        settings = Settings()
        try:
            interval = float(payload.get("tick_interval", defaults.tick_interval))
        except (TypeError, ValueError):
            interval = -1.0
        if interval > 0:
            settings.tick_interval = interval
        else:
            logger.warning("Invalid tick_interval %r, using %s", payload.get("tick_interval"), defaults.tick_interval)

        category = payload.get("default_category", defaults.default_category)
        if isinstance(category, str) and category.strip():
            settings.default_category = category.strip()

        level = str(payload.get("log_level", defaults.log_level)).upper()
        if level in LOG_LEVELS:
            settings.log_level = level
        else:
            logger.warning("Unknown log_level %r, using %s", payload.get("log_level"), defaults.log_level)

        log_file = payload.get("log_file")
        if isinstance(log_file, str) and log_file.strip():
            settings.log_file = str(Path(log_file).expanduser())
        return settings
