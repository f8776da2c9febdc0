"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/config.py
Version:        1.0.0
Description:    Application level settings kept in QSettings: log levels and
                the location of the preferences file. A profile gives each
                instance its own settings, config and data directories.
------------------------------------------------------------------------------
"""

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QSettings, QStandardPaths


class AppConfig:
    """
    Thin typed wrapper around QSettings.

    Settings live in two groups: 'Logging' (global and per component log
    levels) and 'Storage' (where the user preferences JSON is kept).
    """

    APP_ID: str = "estatebook"

    GROUP_LOGGING: str = "Logging"
    GROUP_STORAGE: str = "Storage"

    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"
    KEY_USER_PREFS_PATH: str = "user_prefs_path"

    DEFAULT_LOG_LEVEL: str = "INFO"
    USER_PREFS_FILE: str = "preferences.json"
    LOG_FILE: str = "estatebook.log"

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Args:
            profile: Optional profile name (e.g. 'dev'). Settings and
                directories are then named 'estatebook-<profile>'.
        """
        self.profile = profile
        self.active_id = f"{self.APP_ID}-{profile}" if profile else self.APP_ID
        self.settings = QSettings(self.active_id, self.active_id)

    @contextmanager
    def _group(self, group: str):
        self.settings.beginGroup(group)
        try:
            yield self.settings
        finally:
            self.settings.endGroup()

    def _read(self, group: str, key: str, default: Any = None) -> Any:
        with self._group(group) as settings:
            return settings.value(key, default)

    def _write(self, group: str, key: str, value: Any) -> None:
        if isinstance(value, str):
            value = value.strip()
        with self._group(group) as settings:
            settings.setValue(key, value)

    def _app_dir(self, location: QStandardPaths.StandardLocation) -> Path:
        # Flat layout: <location>/estatebook[-profile]/
        directory = Path(QStandardPaths.writableLocation(location)) / self.active_id
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def get_config_dir(self) -> Path:
        """e.g. ~/.config/estatebook/"""
        return self._app_dir(QStandardPaths.StandardLocation.ConfigLocation)

    def get_data_dir(self) -> Path:
        """e.g. ~/.local/share/estatebook/, home of the address book and the log."""
        return self._app_dir(QStandardPaths.StandardLocation.GenericDataLocation)

    def get_log_file_path(self) -> Path:
        return self.get_data_dir() / self.LOG_FILE

    # --- Storage ---

    def get_user_prefs_path(self) -> Path:
        stored = str(self._read(self.GROUP_STORAGE, self.KEY_USER_PREFS_PATH, "") or "")
        if stored:
            return Path(stored)
        return self.get_config_dir() / self.USER_PREFS_FILE

    def set_user_prefs_path(self, path: str) -> None:
        self._write(self.GROUP_STORAGE, self.KEY_USER_PREFS_PATH, str(path))

    # --- Logging ---

    def get_log_level(self) -> str:
        return str(self._read(self.GROUP_LOGGING, self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        self._write(self.GROUP_LOGGING, self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> Dict[str, str]:
        """Component name (e.g. 'logic.parser') -> level. Unparsable values yield {}."""
        raw = str(self._read(self.GROUP_LOGGING, self.KEY_LOG_COMPONENTS, "{}"))
        try:
            components = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return components if isinstance(components, dict) else {}

    def set_log_components(self, components: Dict[str, str]) -> None:
        self._write(self.GROUP_LOGGING, self.KEY_LOG_COMPONENTS, json.dumps(components))
