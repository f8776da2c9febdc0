"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/parser/__init__.py
Version:        1.0.0
Description:    Text command parsing: prefix tokenizer, field parsers and one
                parser per command.
------------------------------------------------------------------------------
"""

from .address_book_parser import AddressBookParser
