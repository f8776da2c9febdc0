"""Prefixes of the prefix-tagged command arguments (e.g. 'n/John')."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("ah/")
PREFIX_SELLING_ADDRESS = Prefix("as/")
PREFIX_HOUSE_INFO = Prefix("i/")
PREFIX_TAG = Prefix("t/")
PREFIX_SORT_FIELD = Prefix("s/")
PREFIX_SORT_ORDER = Prefix("o/")
