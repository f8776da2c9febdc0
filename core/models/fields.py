"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/models/fields.py
Version:        1.0.0
Description:    Validation rules and constraint messages for the individual
                contact fields (name, phone, email, addresses, tags).
------------------------------------------------------------------------------
"""

import re

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special "
    "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
    "with any special characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of "
    "domain labels separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by "
    "hyphens, if any."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
HOUSE_INFO_CONSTRAINTS = "House info can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"

# [^\W_] is a unicode-aware alphanumeric character
_ALNUM = r"[^\W_]"

NAME_PATTERN = re.compile(rf"{_ALNUM}(?:{_ALNUM}| )*")
PHONE_PATTERN = re.compile(r"[0-9]{3,}")
_LOCAL_PART = rf"{_ALNUM}+(?:[+_.\-]{_ALNUM}+)*"
_DOMAIN_LABEL = rf"{_ALNUM}+(?:-{_ALNUM}+)*"
_DOMAIN_LAST_LABEL = rf"{_ALNUM}{{2,}}(?:-{_ALNUM}+)*"
EMAIL_PATTERN = re.compile(rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST_LABEL}")
FREE_TEXT_PATTERN = re.compile(r"[^\s].*", re.DOTALL)
TAG_PATTERN = re.compile(rf"{_ALNUM}+")


def is_valid_name(value: str) -> bool:
    return bool(NAME_PATTERN.fullmatch(value))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(value))


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_address(value: str) -> bool:
    """Any non-blank text that does not start with whitespace."""
    return bool(FREE_TEXT_PATTERN.fullmatch(value))


def is_valid_house_info(value: str) -> bool:
    return bool(FREE_TEXT_PATTERN.fullmatch(value))


def is_valid_tag(value: str) -> bool:
    return bool(TAG_PATTERN.fullmatch(value))


def normalize_name(value: str) -> str:
    """Case-folded name with internal whitespace collapsed, used for similarity checks."""
    return " ".join(value.split()).casefold()
