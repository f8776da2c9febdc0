"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           main.py
Version:        1.0.0
Description:    Application entry point. Initializes configuration, logging,
                storage and the in-memory model before launching the main
                window.
------------------------------------------------------------------------------
"""

import sys
import argparse
from pathlib import Path
from typing import Optional, Tuple

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QCoreApplication

from core.address_book import AddressBook
from core.config import AppConfig
from core.exceptions import DataLoadingError
from core.logger import setup_logging, get_logger
from core.logic import LogicManager
from core.model_manager import ModelManager
from core.sample_data import get_sample_address_book
from core.storage import JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager
from core.user_prefs import UserPrefs
from gui.main_window import MainWindow
from gui.utils import show_data_warning

logger = get_logger("core")


def init_user_prefs(prefs_storage: JsonUserPrefsStorage, data_dir: Path) -> UserPrefs:
    """
    Loads the user prefs. A missing or broken file yields defaults with the
    address book placed in the application data directory.
    """
    try:
        user_prefs = prefs_storage.read_user_prefs()
    except DataLoadingError as e:
        logger.warning(f"UserPrefs file is not in the correct format, using defaults: {e}")
        user_prefs = None

    if user_prefs is None:
        user_prefs = UserPrefs(address_book_file_path=data_dir / "addressbook.json")
        prefs_storage.save_user_prefs(user_prefs)
    return user_prefs


def init_model_manager(storage: StorageManager, user_prefs: UserPrefs) -> Tuple[ModelManager, Optional[str]]:
    """
    Builds the model from the stored address book.
    Returns the model and an optional warning for the user.
    """
    warning = None
    try:
        address_book = storage.read_address_book()
        if address_book is None:
            logger.info(f"Creating a new data file {storage.address_book_file_path} populated with a sample address book.")
            address_book = get_sample_address_book()
    except DataLoadingError as e:
        logger.warning(f"Data file at {storage.address_book_file_path} could not be loaded. "
                       f"Starting with an empty address book: {e}")
        warning = str(e)
        address_book = AddressBook()
    return ModelManager(address_book, user_prefs), warning


def main() -> None:
    """
    EstateBook Entry Point.
    Initializes infrastructure and launches the GUI.
    """
    parser = argparse.ArgumentParser(description="EstateBook - Buyer and seller contacts for property agents")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev', 'test')")
    parser.add_argument("-d", "--data-file", type=str, help="Switch to (and remember) another address book file")
    args, unknown = parser.parse_known_args()

    app = QApplication(sys.argv)

    app_id = "estatebook"
    if args.profile:
        app_id = f"estatebook-{args.profile}"
    QCoreApplication.setApplicationName(app_id)

    app_config = AppConfig(profile=args.profile)

    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger.info(f"EstateBook started (Profile: {args.profile or 'default'})")

    prefs_storage = JsonUserPrefsStorage(app_config.get_user_prefs_path())
    user_prefs = init_user_prefs(prefs_storage, app_config.get_data_dir())
    if args.data_file:
        user_prefs.address_book_file_path = Path(args.data_file)

    storage = StorageManager(JsonAddressBookStorage(user_prefs.address_book_file_path), prefs_storage)
    model, warning = init_model_manager(storage, user_prefs)
    logic = LogicManager(model, storage)

    window = MainWindow(logic)
    window.show()

    if warning:
        show_data_warning(window, "EstateBook", warning)

    exit_code = app.exec()

    try:
        storage.save_user_prefs(model.get_user_prefs())
    except OSError as e:
        logger.error(f"Failed to save preferences: {e}")

    logger.info("EstateBook stopped")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
