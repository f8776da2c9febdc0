"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/user_prefs.py
Version:        1.0.0
Description:    User preferences persisted next to the application config:
                main window geometry and the address book file location.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GuiSettings(BaseModel):
    """Immutable snapshot of the main window geometry."""
    model_config = ConfigDict(frozen=True)

    window_width: int = 900
    window_height: int = 640
    window_x: Optional[int] = None
    window_y: Optional[int] = None


class UserPrefs(BaseModel):
    """Mutable preference holder; copied into the ModelManager on startup."""
    model_config = ConfigDict(validate_assignment=True)

    gui_settings: GuiSettings = Field(default_factory=GuiSettings)
    address_book_file_path: Path = Path("data") / "addressbook.json"

    def reset_data(self, new_prefs: "UserPrefs") -> None:
        self.gui_settings = new_prefs.gui_settings
        self.address_book_file_path = new_prefs.address_book_file_path
