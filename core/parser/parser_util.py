"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/parser/parser_util.py
Version:        1.0.0
Description:    Parses and validates single argument values. Every function
                trims its input and raises ParseError carrying the field's
                constraint message on invalid values.
------------------------------------------------------------------------------
"""

import re
from typing import FrozenSet, Iterable

from core.exceptions import ParseError
from core.models import fields

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_SORT_ORDER = "Sort order should be either 'asc' or 'desc'"

INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_index(one_based_index: str) -> int:
    trimmed = one_based_index.strip()
    # ASCII digits only
    if not INDEX_PATTERN.fullmatch(trimmed) or int(trimmed) < 1:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def parse_name(name: str) -> str:
    trimmed = name.strip()
    if not fields.is_valid_name(trimmed):
        raise ParseError(fields.NAME_CONSTRAINTS)
    return trimmed


def parse_phone(phone: str) -> str:
    trimmed = phone.strip()
    if not fields.is_valid_phone(trimmed):
        raise ParseError(fields.PHONE_CONSTRAINTS)
    return trimmed


def parse_email(email: str) -> str:
    trimmed = email.strip()
    if not fields.is_valid_email(trimmed):
        raise ParseError(fields.EMAIL_CONSTRAINTS)
    return trimmed


def parse_address(address: str) -> str:
    trimmed = address.strip()
    if not fields.is_valid_address(trimmed):
        raise ParseError(fields.ADDRESS_CONSTRAINTS)
    return trimmed


def parse_house_info(house_info: str) -> str:
    trimmed = house_info.strip()
    if not fields.is_valid_house_info(trimmed):
        raise ParseError(fields.HOUSE_INFO_CONSTRAINTS)
    return trimmed


def parse_tag(tag: str) -> str:
    trimmed = tag.strip()
    if not fields.is_valid_tag(trimmed):
        raise ParseError(fields.TAG_CONSTRAINTS)
    return trimmed


def parse_tags(tags: Iterable[str]) -> FrozenSet[str]:
    return frozenset(parse_tag(tag) for tag in tags)


def parse_sort_order(order: str) -> bool:
    """Returns True for descending order."""
    trimmed = order.strip().lower()
    if trimmed not in ("asc", "desc"):
        raise ParseError(MESSAGE_INVALID_SORT_ORDER)
    return trimmed == "desc"
