from __future__ import annotations

import json
import os
from typing import Any

from . import constants
from .logger import get_logger

_logger = get_logger("settings")

_MIN_WINDOW_SIDE = 100


class SettingsManager:
    def __init__(self, settings_path: str):
        self.settings_path = settings_path
        self._settings: dict[str, Any] = {}
        self.load()

    DEFAULTS: dict[str, Any] = {
        "svg_dir": constants.SVG_DIR,
        "title": constants.TITLE,
        "window_width": constants.WINDOW_WIDTH,
        "window_height": constants.WINDOW_HEIGHT,
    }

    def load(self) -> None:
        try:
            if os.path.exists(self.settings_path):
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        self._settings = data
                        _logger.debug("settings loaded: %s", self.settings_path)
                        return
                    _logger.warning("settings file is not a JSON object: %s", self.settings_path)
        except (OSError, ValueError) as e:
            _logger.warning("settings load failed: %s", e)
        self._settings = {}

    def save(self) -> None:
        try:
            os.makedirs(os.path.dirname(self.settings_path) or ".", exist_ok=True)
            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
            _logger.debug("settings saved: %s", self.settings_path)
        except OSError as e:
            _logger.error("settings save failed: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._settings:
            return self._settings[key]
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def has(self, key: str) -> bool:
        return key in self._settings

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        self.save()

    def update(self, **values: Any) -> None:
        """Set several keys with a single write."""
        self._settings.update(values)
        self.save()

    @property
    def data(self) -> dict[str, Any]:
        return self._settings

    @property
    def svg_dir(self) -> str:
        val = self.get("svg_dir")
        if isinstance(val, str) and val.strip():
            return val
        _logger.warning("saved svg_dir invalid: %r", val)
        return self.DEFAULTS["svg_dir"]

    @property
    def title(self) -> str:
        val = self.get("title")
        if isinstance(val, str):
            return val
        _logger.warning("saved title invalid: %r", val)
        return self.DEFAULTS["title"]

    @property
    def window_size(self) -> tuple[int, int]:
        try:
            w = int(self.get("window_width"))
            h = int(self.get("window_height"))
        except (TypeError, ValueError) as e:
            _logger.warning("failed to parse window size: %s", e)
            return self.DEFAULTS["window_width"], self.DEFAULTS["window_height"]
        return max(_MIN_WINDOW_SIDE, w), max(_MIN_WINDOW_SIDE, h)
