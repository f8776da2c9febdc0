"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/messages.py
Version:        1.0.0
Description:    User-facing message templates shared across commands and
                parsers, plus the one-line record formatter.
------------------------------------------------------------------------------
"""

from typing import Iterable

from core.models.person import Buyer, Person, Seller

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_INDEX = "The {} index provided is invalid"
MESSAGE_LISTED_OVERVIEW = "{} {}s listed!"
MESSAGE_DUPLICATE_PREFIXES = "Multiple values specified for the following single-valued field(s): {}"
MESSAGE_SAVE_FAILED = "Could not save data due to the following error: {}"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def format_tags(tags: Iterable[str]) -> str:
    return "".join(f"[{tag}]" for tag in sorted(tags))


def format_record(record: Person) -> str:
    """Single line summary of a buyer or seller for the result display."""
    parts = [
        record.name,
        f"Phone: {record.phone}",
        f"Email: {record.email}",
        f"Address: {record.address}",
    ]
    if isinstance(record, Seller):
        parts.append(f"Selling Address: {record.selling_address}")
    if isinstance(record, (Buyer, Seller)):
        parts.append(f"House Info: {record.house_info}")
    parts.append(f"Tags: {format_tags(record.tags)}")
    return "; ".join(parts)
