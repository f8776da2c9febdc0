"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/predicates.py
Version:        1.0.0
Description:    Filter predicates and sort keys for the buyer/seller views.
                They are value objects so that two models with the same view
                state compare equal.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from core.models.person import Person


@dataclass(frozen=True)
class ShowAllPredicate:
    """Default predicate: every entry is visible."""

    def __call__(self, item: Any) -> bool:
        return True


PREDICATE_SHOW_ALL = ShowAllPredicate()


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """
    Matches entries whose name contains any of the keywords as a whole word,
    ignoring case.
    """
    keywords: Tuple[str, ...]

    def __call__(self, item: Person) -> bool:
        words = {word.casefold() for word in item.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


# Sort field name -> record attribute
BUYER_SORT_FIELDS: Dict[str, str] = {
    "name": "name",
    "phone": "phone",
    "email": "email",
    "address": "address",
    "info": "house_info",
}

SELLER_SORT_FIELDS: Dict[str, str] = {
    **BUYER_SORT_FIELDS,
    "selling": "selling_address",
}


@dataclass(frozen=True)
class AttributeSortKey:
    """
    Sort key on a single record attribute. Text attributes sort
    case-insensitively, phone numbers numerically.
    """
    attribute: str
    reverse: bool = False

    def __call__(self, item: Person) -> Any:
        value = getattr(item, self.attribute)
        if self.attribute == "phone":
            return int(value)
        return value.casefold()
