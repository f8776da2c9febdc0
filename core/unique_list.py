"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/unique_list.py
Version:        1.0.0
Description:    List of buyers or sellers that enforces the similarity
                uniqueness rule: no two entries may be similar.
------------------------------------------------------------------------------
"""

from typing import Generic, Iterable, List, TypeVar

from core.exceptions import DuplicateEntryError, EntryNotFoundError
from core.models.person import Person
from core.observable import ObservableList, ReadOnlyView

D = TypeVar("D", bound=Person)


class UniqueDisplayableList(Generic[D]):
    """
    Keeps insertion order. Membership via contains() uses full equality,
    contains_similar() uses Person.is_same_displayable.
    """

    def __init__(self, label: str = "entry") -> None:
        self.label = label
        self._internal: ObservableList = ObservableList()
        self._view: ReadOnlyView = ReadOnlyView(self._internal)

    def contains(self, item: D) -> bool:
        return item in self._internal

    def contains_similar(self, item: D) -> bool:
        return any(existing.is_same_displayable(item) for existing in self._internal)

    def add(self, item: D) -> None:
        if self.contains_similar(item):
            raise DuplicateEntryError(f"This {self.label} already exists in the address book")
        self._internal.append(item)

    def set_item(self, target: D, edited: D) -> None:
        """
        Replaces target with edited at the same position.
        edited may be similar to target itself but not to any other entry.
        """
        try:
            index = self._internal.index(target)
        except ValueError:
            raise EntryNotFoundError(f"The {self.label} could not be found") from None

        for position, existing in enumerate(self._internal):
            if position != index and existing.is_same_displayable(edited):
                raise DuplicateEntryError(f"This {self.label} already exists in the address book")
        self._internal.replace_at(index, edited)

    def remove(self, item: D) -> None:
        if item not in self._internal:
            raise EntryNotFoundError(f"The {self.label} could not be found")
        self._internal.remove(item)

    def set_items(self, items: Iterable[D]) -> None:
        items = list(items)
        if not self._items_are_unique(items):
            raise DuplicateEntryError(f"The {self.label} list contains similar entries")
        self._internal.set_all(items)

    def as_unmodifiable_list(self) -> ReadOnlyView:
        return self._view

    @staticmethod
    def _items_are_unique(items: List[D]) -> bool:
        for i, first in enumerate(items):
            for second in items[i + 1:]:
                if first.is_same_displayable(second):
                    return False
        return True

    def __iter__(self):
        return iter(self._view)

    def __len__(self) -> int:
        return len(self._internal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueDisplayableList):
            return NotImplemented
        return list(self._internal) == list(other._internal)

    __hash__ = None

    def __repr__(self) -> str:
        return f"UniqueDisplayableList({list(self._internal)!r})"
