"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/model_manager.py
Version:        1.0.0
Description:    In-memory model of the application. Wraps the AddressBook and
                UserPrefs and exposes live filtered/sorted views of buyers and
                sellers to the presentation layer.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Optional

from core.address_book import AddressBook
from core.logger import get_logger
from core.models.person import Buyer, Seller
from core.observable import FilteredSortedList, ObservableSequence, Predicate, SortKey
from core.predicates import PREDICATE_SHOW_ALL
from core.user_prefs import GuiSettings, UserPrefs

logger = get_logger("model")


class ModelManager:
    """
    Owns a private copy of the address book and preferences.
    Each role has its own pipeline: full list -> filter -> sort.
    """

    def __init__(self, address_book: Optional[AddressBook] = None,
                 user_prefs: Optional[UserPrefs] = None) -> None:
        address_book = address_book if address_book is not None else AddressBook()
        user_prefs = user_prefs if user_prefs is not None else UserPrefs()

        logger.debug(f"Initializing with address book: {address_book!r} and user prefs {user_prefs!r}")

        self._address_book = AddressBook(address_book)
        self._user_prefs = user_prefs.model_copy(deep=True)
        self._filtered_buyers: FilteredSortedList = FilteredSortedList(
            self._address_book.buyers, PREDICATE_SHOW_ALL)
        self._filtered_sellers: FilteredSortedList = FilteredSortedList(
            self._address_book.sellers, PREDICATE_SHOW_ALL)

    # --- UserPrefs ---

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs.reset_data(user_prefs)

    def get_user_prefs(self) -> UserPrefs:
        return self._user_prefs

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> Path:
        return self._user_prefs.address_book_file_path

    @address_book_file_path.setter
    def address_book_file_path(self, file_path: Path) -> None:
        self._user_prefs.address_book_file_path = file_path

    # --- AddressBook ---

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def has_buyer(self, buyer: Buyer) -> bool:
        return self._address_book.has_buyer(buyer)

    def has_similar_buyer(self, buyer: Buyer) -> bool:
        return self._address_book.has_similar_buyer(buyer)

    def has_seller(self, seller: Seller) -> bool:
        return self._address_book.has_seller(seller)

    def has_similar_seller(self, seller: Seller) -> bool:
        return self._address_book.has_similar_seller(seller)

    def delete_buyer(self, target: Buyer) -> None:
        self._address_book.remove_buyer(target)

    def delete_seller(self, target: Seller) -> None:
        self._address_book.remove_seller(target)

    def add_buyer(self, buyer: Buyer) -> None:
        self._address_book.add_buyer(buyer)
        self.update_filtered_buyer_list(PREDICATE_SHOW_ALL)

    def add_seller(self, seller: Seller) -> None:
        self._address_book.add_seller(seller)
        self.update_filtered_seller_list(PREDICATE_SHOW_ALL)

    def set_buyer(self, target: Buyer, edited: Buyer) -> None:
        self._address_book.set_buyer(target, edited)

    def set_seller(self, target: Seller, edited: Seller) -> None:
        self._address_book.set_seller(target, edited)

    # --- Filtered / Sorted Views ---

    @property
    def filtered_buyer_list(self) -> ObservableSequence:
        """Read-only, live view of the buyers after filtering and sorting."""
        return self._filtered_buyers

    @property
    def filtered_seller_list(self) -> ObservableSequence:
        """Read-only, live view of the sellers after filtering and sorting."""
        return self._filtered_sellers

    def update_filtered_buyer_list(self, predicate: Predicate) -> None:
        self._filtered_buyers.set_predicate(predicate)

    def update_filtered_seller_list(self, predicate: Predicate) -> None:
        self._filtered_sellers.set_predicate(predicate)

    def update_filtered_sorted_buyer_list(self, sort_key: Optional[SortKey]) -> None:
        """Sets the buyer sort key; None restores insertion order."""
        self._filtered_buyers.set_sort_key(sort_key)

    def update_filtered_sorted_seller_list(self, sort_key: Optional[SortKey]) -> None:
        self._filtered_sellers.set_sort_key(sort_key)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (self._address_book == other._address_book
                and self._user_prefs == other._user_prefs
                and self._filtered_buyers.predicate == other._filtered_buyers.predicate
                and self._filtered_buyers.sort_key == other._filtered_buyers.sort_key
                and self._filtered_buyers == other._filtered_buyers
                and self._filtered_sellers.predicate == other._filtered_sellers.predicate
                and self._filtered_sellers.sort_key == other._filtered_sellers.sort_key
                and self._filtered_sellers == other._filtered_sellers)

    __hash__ = None
