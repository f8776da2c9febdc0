"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/storage.py
Version:        1.0.0
Description:    JSON persistence for the address book and user preferences.
                Files are validated with pydantic on load; any invalid entry
                or duplicate makes the whole load fail.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from core.address_book import AddressBook
from core.exceptions import DataLoadingError, DuplicateEntryError
from core.logger import get_logger
from core.models.person import Buyer, Seller
from core.user_prefs import UserPrefs

logger = get_logger("storage")


class SerializableAddressBook(BaseModel):
    """On-disk shape of the address book: two ordered lists of records."""
    buyers: List[Buyer] = Field(default_factory=list)
    sellers: List[Seller] = Field(default_factory=list)

    @classmethod
    def from_model(cls, address_book: AddressBook) -> "SerializableAddressBook":
        return cls(buyers=list(address_book.buyers), sellers=list(address_book.sellers))

    def to_model(self) -> AddressBook:
        """
        Raises:
            DataLoadingError: If either list contains similar entries.
        """
        address_book = AddressBook()
        try:
            address_book.set_buyers(self.buyers)
        except DuplicateEntryError as e:
            raise DataLoadingError("Buyers list contains duplicate buyer(s).") from e
        try:
            address_book.set_sellers(self.sellers)
        except DuplicateEntryError as e:
            raise DataLoadingError("Sellers list contains duplicate seller(s).") from e
        return address_book


def _read_text(file_path: Path) -> Optional[str]:
    if not file_path.exists():
        logger.info(f"File not found: {file_path}")
        return None
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataLoadingError(f"Could not read {file_path}: {e}") from e


def _write_text(file_path: Path, content: str) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")


class JsonAddressBookStorage:
    """Reads and writes the address book as a JSON file."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = Path(file_path)

    def read_address_book(self, file_path: Optional[Path] = None) -> Optional[AddressBook]:
        """
        Returns None if the file does not exist.

        Raises:
            DataLoadingError: If the file is unreadable or its content invalid.
        """
        path = Path(file_path) if file_path is not None else self.file_path
        raw = _read_text(path)
        if raw is None:
            return None
        try:
            data = SerializableAddressBook.model_validate_json(raw)
        except ValidationError as e:
            raise DataLoadingError(f"Invalid address book data in {path}: {e}") from e
        address_book = data.to_model()
        logger.info(f"Loaded {len(data.buyers)} buyers and {len(data.sellers)} sellers from {path}")
        return address_book

    def save_address_book(self, address_book: AddressBook, file_path: Optional[Path] = None) -> None:
        """
        Raises:
            OSError: If the file cannot be written.
        """
        path = Path(file_path) if file_path is not None else self.file_path
        payload = SerializableAddressBook.from_model(address_book)
        _write_text(path, payload.model_dump_json(indent=2))
        logger.debug(f"Saved address book to {path}")


class JsonUserPrefsStorage:
    """Reads and writes UserPrefs as a JSON file."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = Path(file_path)

    def read_user_prefs(self) -> Optional[UserPrefs]:
        raw = _read_text(self.file_path)
        if raw is None:
            return None
        try:
            return UserPrefs.model_validate_json(raw)
        except ValidationError as e:
            raise DataLoadingError(f"Invalid preferences in {self.file_path}: {e}") from e

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        _write_text(self.file_path, user_prefs.model_dump_json(indent=2))
        logger.debug(f"Saved user prefs to {self.file_path}")


class StorageManager:
    """Facade over the address book and user prefs storages."""

    def __init__(self, address_book_storage: JsonAddressBookStorage,
                 user_prefs_storage: JsonUserPrefsStorage) -> None:
        self.address_book_storage = address_book_storage
        self.user_prefs_storage = user_prefs_storage

    @property
    def address_book_file_path(self) -> Path:
        return self.address_book_storage.file_path

    @property
    def user_prefs_file_path(self) -> Path:
        return self.user_prefs_storage.file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        return self.user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        self.user_prefs_storage.save_user_prefs(user_prefs)

    def read_address_book(self) -> Optional[AddressBook]:
        return self.address_book_storage.read_address_book()

    def save_address_book(self, address_book: AddressBook) -> None:
        self.address_book_storage.save_address_book(address_book)
