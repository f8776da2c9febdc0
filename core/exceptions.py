"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/exceptions.py
Version:        1.0.0
Description:    Exception hierarchy shared by the model, parser, command and
                storage layers.
------------------------------------------------------------------------------
"""

from typing import Optional


class EstateBookError(Exception):
    """Base class for all recoverable application errors."""


class ParseError(EstateBookError):
    """
    Raised when command text does not match the expected grammar.

    Args:
        message: User facing message (usually the invalid-format usage text).
        detail: Optional underlying reason, e.g. a field constraint.
    """

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail


class CommandError(EstateBookError):
    """Raised when a parsed command cannot be executed against the model."""


class DuplicateEntryError(EstateBookError):
    """Raised when an operation would create two similar entries in a list."""


class EntryNotFoundError(EstateBookError):
    """Raised when the targeted entry is not present in a list."""


class DataLoadingError(EstateBookError):
    """Raised when a persisted file cannot be read or fails validation."""
