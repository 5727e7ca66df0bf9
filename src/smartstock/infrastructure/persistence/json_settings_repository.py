"""JSON-file-backed user preferences.

Kept apart from the product store: clearing or restoring products never
touches these settings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from smartstock.domain.exceptions import StorageWriteError, ValidationError

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
DEFAULT_THEME = "light"


class JsonSettingsRepository:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get_theme(self) -> str:
        theme = self._load_raw().get("theme", DEFAULT_THEME)
        if theme not in THEMES:
            logger.warning("Unknown theme %r in settings, using %s", theme, DEFAULT_THEME)
            return DEFAULT_THEME
        return theme

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValidationError(
                f"Unknown theme '{theme}' (expected one of: {', '.join(THEMES)})"
            )
        raw = self._load_raw()
        raw["theme"] = theme
        self._persist_raw(raw)

    def toggle_theme(self) -> str:
        theme = "dark" if self.get_theme() == "light" else "light"
        self.set_theme(theme)
        return theme

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self._file_path, exc)
            return {}
        return raw if isinstance(raw, dict) else {}

    def _persist_raw(self, raw: dict) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise StorageWriteError(f"Could not save settings: {exc}") from exc
