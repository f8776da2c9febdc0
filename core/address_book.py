"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/address_book.py
Version:        1.0.0
Description:    In-memory container of the buyer and seller lists. All
                mutations go through add/remove/set/reset and keep both lists
                free of similar entries.
------------------------------------------------------------------------------
"""

from typing import Iterable, Optional

from core.logger import get_logger
from core.models.person import Buyer, Seller
from core.observable import ObservableSequence
from core.unique_list import UniqueDisplayableList

logger = get_logger("model.address_book")


class AddressBook:
    """
    Wraps all data at the address-book level.
    Callers are expected to pass non-None arguments to every method.
    """

    def __init__(self, to_be_copied: Optional["AddressBook"] = None) -> None:
        self._buyers: UniqueDisplayableList[Buyer] = UniqueDisplayableList("buyer")
        self._sellers: UniqueDisplayableList[Seller] = UniqueDisplayableList("seller")
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # --- Bulk Operations ---

    def set_buyers(self, buyers: Iterable[Buyer]) -> None:
        """Replaces the buyer list. Raises DuplicateEntryError on similar entries."""
        self._buyers.set_items(buyers)

    def set_sellers(self, sellers: Iterable[Seller]) -> None:
        """Replaces the seller list. Raises DuplicateEntryError on similar entries."""
        self._sellers.set_items(sellers)

    def reset_data(self, new_data: "AddressBook") -> None:
        """Replaces the contents of this address book with new_data's."""
        self.set_buyers(new_data.buyers)
        self.set_sellers(new_data.sellers)
        logger.debug(f"Address book reset: {len(self._buyers)} buyers, {len(self._sellers)} sellers")

    # --- Buyer Operations ---

    def has_buyer(self, buyer: Buyer) -> bool:
        return self._buyers.contains(buyer)

    def has_similar_buyer(self, buyer: Buyer) -> bool:
        return self._buyers.contains_similar(buyer)

    def add_buyer(self, buyer: Buyer) -> None:
        """Adds a buyer. Raises DuplicateEntryError if a similar buyer exists."""
        self._buyers.add(buyer)

    def set_buyer(self, target: Buyer, edited: Buyer) -> None:
        """
        Replaces target with edited in place.
        Raises EntryNotFoundError if target is absent and DuplicateEntryError
        if edited is similar to another buyer.
        """
        self._buyers.set_item(target, edited)

    def remove_buyer(self, buyer: Buyer) -> None:
        """Raises EntryNotFoundError if the buyer is absent."""
        self._buyers.remove(buyer)

    # --- Seller Operations ---

    def has_seller(self, seller: Seller) -> bool:
        return self._sellers.contains(seller)

    def has_similar_seller(self, seller: Seller) -> bool:
        return self._sellers.contains_similar(seller)

    def add_seller(self, seller: Seller) -> None:
        self._sellers.add(seller)

    def set_seller(self, target: Seller, edited: Seller) -> None:
        self._sellers.set_item(target, edited)

    def remove_seller(self, seller: Seller) -> None:
        self._sellers.remove(seller)

    # --- Views ---

    @property
    def buyers(self) -> ObservableSequence:
        return self._buyers.as_unmodifiable_list()

    @property
    def sellers(self) -> ObservableSequence:
        return self._sellers.as_unmodifiable_list()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._buyers == other._buyers and self._sellers == other._sellers

    __hash__ = None

    def __repr__(self) -> str:
        return f"AddressBook(buyers={len(self._buyers)}, sellers={len(self._sellers)})"
