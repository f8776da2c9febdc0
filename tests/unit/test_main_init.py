from core.address_book import AddressBook
from core.sample_data import get_sample_address_book
from core.storage import JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager
from core.user_prefs import UserPrefs
from main import init_model_manager, init_user_prefs


def make_storage(tmp_path):
    return StorageManager(JsonAddressBookStorage(tmp_path / "addressbook.json"),
                          JsonUserPrefsStorage(tmp_path / "preferences.json"))


def test_first_start_uses_sample_data(tmp_path):
    model, warning = init_model_manager(make_storage(tmp_path), UserPrefs())
    assert warning is None
    assert model.address_book == get_sample_address_book()


def test_existing_file_is_loaded(tmp_path, alice):
    storage = make_storage(tmp_path)
    address_book = AddressBook()
    address_book.add_buyer(alice)
    storage.save_address_book(address_book)

    model, warning = init_model_manager(storage, UserPrefs())

    assert warning is None
    assert list(model.address_book.buyers) == [alice]


def test_corrupt_file_starts_empty_with_warning(tmp_path):
    storage = make_storage(tmp_path)
    storage.address_book_file_path.write_text('{"buyers": [{"name": "?"}]}', encoding="utf-8")

    model, warning = init_model_manager(storage, UserPrefs())

    assert warning
    assert model.address_book == AddressBook()


def test_init_user_prefs_creates_defaults(tmp_path):
    prefs_storage = JsonUserPrefsStorage(tmp_path / "preferences.json")

    prefs = init_user_prefs(prefs_storage, tmp_path / "data")

    assert prefs.address_book_file_path == tmp_path / "data" / "addressbook.json"
    assert prefs_storage.read_user_prefs() == prefs


def test_init_user_prefs_recovers_from_broken_file(tmp_path):
    prefs_storage = JsonUserPrefsStorage(tmp_path / "preferences.json")
    prefs_storage.file_path.write_text("not json", encoding="utf-8")

    prefs = init_user_prefs(prefs_storage, tmp_path)

    assert prefs.address_book_file_path == tmp_path / "addressbook.json"


def test_init_user_prefs_keeps_existing(tmp_path):
    prefs_storage = JsonUserPrefsStorage(tmp_path / "preferences.json")
    stored = UserPrefs(address_book_file_path=tmp_path / "mine.json")
    prefs_storage.save_user_prefs(stored)

    assert init_user_prefs(prefs_storage, tmp_path / "data") == stored
