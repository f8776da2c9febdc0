import json

import pytest

from core.address_book import AddressBook
from core.exceptions import DataLoadingError
from core.sample_data import get_sample_address_book
from core.storage import JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager
from core.user_prefs import GuiSettings, UserPrefs


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_returns_none(tmp_path):
    assert JsonAddressBookStorage(tmp_path / "missing.json").read_address_book() is None
    assert JsonUserPrefsStorage(tmp_path / "missing.json").read_user_prefs() is None


def test_save_and_read_keeps_order(tmp_path, alice, bob, carl):
    storage = JsonAddressBookStorage(tmp_path / "nested" / "book.json")
    original = AddressBook()
    original.set_buyers([bob, alice])
    original.set_sellers([carl])

    storage.save_address_book(original)
    restored = storage.read_address_book()

    assert restored == original
    assert list(restored.buyers) == [bob, alice]


def test_saved_file_layout(tmp_path, alice, carl):
    path = tmp_path / "book.json"
    address_book = AddressBook()
    address_book.add_buyer(alice)
    address_book.add_seller(carl)
    JsonAddressBookStorage(path).save_address_book(address_book)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["buyers"][0]["name"] == "Alice Pauline"
    assert data["buyers"][0]["tags"] == ["friends"]
    assert data["sellers"][0]["selling_address"] == "10th street"


def test_read_explicit_path_overrides_default(tmp_path):
    storage = JsonAddressBookStorage(tmp_path / "default.json")
    other = tmp_path / "other.json"
    storage.save_address_book(get_sample_address_book(), other)
    assert storage.read_address_book(other) == get_sample_address_book()
    assert storage.read_address_book() is None


def test_invalid_json_fails(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadingError):
        JsonAddressBookStorage(path).read_address_book()


def test_invalid_entry_fails_whole_load(tmp_path, alice):
    bad = alice.model_dump(mode="json")
    bad["phone"] = "12"
    path = write_json(tmp_path / "book.json", {"buyers": [alice.model_dump(mode="json"), bad], "sellers": []})
    with pytest.raises(DataLoadingError):
        JsonAddressBookStorage(path).read_address_book()


def test_duplicate_entries_fail(tmp_path, alice):
    entry = alice.model_dump(mode="json")
    path = write_json(tmp_path / "book.json", {"buyers": [entry, entry], "sellers": []})
    with pytest.raises(DataLoadingError, match="Buyers list contains duplicate buyer"):
        JsonAddressBookStorage(path).read_address_book()


def test_missing_lists_default_to_empty(tmp_path):
    path = write_json(tmp_path / "book.json", {})
    assert JsonAddressBookStorage(path).read_address_book() == AddressBook()


def test_user_prefs_round_trip(tmp_path):
    storage = JsonUserPrefsStorage(tmp_path / "prefs.json")
    prefs = UserPrefs(gui_settings=GuiSettings(window_width=1000, window_height=500, window_x=10, window_y=20),
                      address_book_file_path=tmp_path / "book.json")
    storage.save_user_prefs(prefs)
    assert storage.read_user_prefs() == prefs


def test_invalid_user_prefs(tmp_path):
    path = write_json(tmp_path / "prefs.json", {"gui_settings": {"window_width": "wide"}})
    with pytest.raises(DataLoadingError):
        JsonUserPrefsStorage(path).read_user_prefs()


def test_storage_manager_delegates(tmp_path):
    manager = StorageManager(JsonAddressBookStorage(tmp_path / "book.json"),
                             JsonUserPrefsStorage(tmp_path / "prefs.json"))
    assert manager.address_book_file_path == tmp_path / "book.json"
    assert manager.user_prefs_file_path == tmp_path / "prefs.json"

    manager.save_address_book(get_sample_address_book())
    manager.save_user_prefs(UserPrefs())
    assert manager.read_address_book() == get_sample_address_book()
    assert manager.read_user_prefs() == UserPrefs()
