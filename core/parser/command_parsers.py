"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/parser/command_parsers.py
Version:        1.0.0
Description:    One parser per command. A parser either returns a fully
                populated command or raises ParseError with the command's
                usage text; partial commands are never returned.
------------------------------------------------------------------------------
"""

from typing import ClassVar, Dict, Optional, Type

from core.commands.buyer import (
    AddBuyerCommand, DeleteBuyerCommand, EditBuyerCommand, FindBuyerCommand, SortBuyerCommand
)
from core.commands.displayable import (
    AddCommand, DeleteCommand, EditCommand, EditDescriptor, FindCommand, SortCommand
)
from core.commands.seller import (
    AddSellerCommand, DeleteSellerCommand, EditSellerCommand, FindSellerCommand, SortSellerCommand
)
from core.exceptions import ParseError
from core.logger import get_logger
from core.messages import invalid_format
from core.parser import parser_util
from core.parser.cli_syntax import (
    PREFIX_ADDRESS, PREFIX_EMAIL, PREFIX_HOUSE_INFO, PREFIX_NAME, PREFIX_PHONE,
    PREFIX_SELLING_ADDRESS, PREFIX_SORT_FIELD, PREFIX_SORT_ORDER, PREFIX_TAG
)
from core.parser.tokenizer import ArgumentMultimap, tokenize
from core.predicates import NameContainsKeywordsPredicate

logger = get_logger("logic.parser")

MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_FOREIGN_PREFIXES = "Prefixes not accepted by this command: {}"

BUYER_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_HOUSE_INFO)
SELLER_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
                   PREFIX_SELLING_ADDRESS, PREFIX_HOUSE_INFO)

# Prefixes of all record fields; a command rejects those it does not take
FIELD_PREFIXES = SELLER_PREFIXES + (PREFIX_TAG,)

# Prefix -> (record attribute, field parser)
_FIELD_PARSERS = {
    PREFIX_NAME: ("name", parser_util.parse_name),
    PREFIX_PHONE: ("phone", parser_util.parse_phone),
    PREFIX_EMAIL: ("email", parser_util.parse_email),
    PREFIX_ADDRESS: ("address", parser_util.parse_address),
    PREFIX_SELLING_ADDRESS: ("selling_address", parser_util.parse_address),
    PREFIX_HOUSE_INFO: ("house_info", parser_util.parse_house_info),
}


class CommandParser:
    """Base for all parsers: wraps any field failure into the invalid-format error."""

    COMMAND: ClassVar[Type]

    def parse(self, args: str):
        try:
            return self._parse(args)
        except ParseError as e:
            logger.debug(f"{self.COMMAND.COMMAND_WORD}: rejected {args!r} ({e})")
            raise ParseError(invalid_format(self.COMMAND.MESSAGE_USAGE), detail=str(e)) from e

    def _parse(self, args: str):
        raise NotImplementedError


def _parse_fields(argmap: ArgumentMultimap, prefixes) -> Dict[str, str]:
    return {
        _FIELD_PARSERS[prefix][0]: _FIELD_PARSERS[prefix][1](argmap.get_value(prefix))
        for prefix in prefixes
        if argmap.get_value(prefix) is not None
    }


def _reject_foreign_prefixes(args: str, *accepted) -> None:
    """
    Field prefixes a command does not accept (e.g. 'as/' for a buyer) would
    otherwise be swallowed by the preceding value.
    """
    foreign = [p for p in FIELD_PREFIXES if p not in accepted]
    argmap = tokenize(args, *foreign)
    found = [str(p) for p in foreign if argmap.has(p)]
    if found:
        raise ParseError(MESSAGE_FOREIGN_PREFIXES.format(" ".join(found)))


class _AddCommandParser(CommandParser):
    COMMAND: ClassVar[Type[AddCommand]]
    REQUIRED: ClassVar[tuple]

    def _parse(self, args: str) -> AddCommand:
        _reject_foreign_prefixes(args, *self.REQUIRED, PREFIX_TAG)
        argmap = tokenize(args, *self.REQUIRED, PREFIX_TAG)

        missing = [str(p) for p in self.REQUIRED if not argmap.has(p)]
        if missing:
            raise ParseError(f"Missing required prefixes: {' '.join(missing)}")
        if argmap.get_preamble():
            raise ParseError(f"Unexpected text before the first prefix: {argmap.get_preamble()!r}")
        argmap.verify_no_duplicate_prefixes_for(*self.REQUIRED)

        values = _parse_fields(argmap, self.REQUIRED)
        values["tags"] = parser_util.parse_tags(argmap.get_all_values(PREFIX_TAG))
        return self.COMMAND(self.COMMAND.ROLE.record_type(**values))


class AddBuyerCommandParser(_AddCommandParser):
    """Parses 'n/NAME p/PHONE e/EMAIL ah/ADDRESS i/INFO [t/TAG]...'."""
    COMMAND = AddBuyerCommand
    REQUIRED = BUYER_PREFIXES


class AddSellerCommandParser(_AddCommandParser):
    """Parses 'n/NAME p/PHONE e/EMAIL ah/ADDRESS as/SELLING_ADDRESS i/INFO [t/TAG]...'."""
    COMMAND = AddSellerCommand
    REQUIRED = SELLER_PREFIXES


class _DeleteCommandParser(CommandParser):
    COMMAND: ClassVar[Type[DeleteCommand]]

    def _parse(self, args: str) -> DeleteCommand:
        return self.COMMAND(parser_util.parse_index(args))


class DeleteBuyerCommandParser(_DeleteCommandParser):
    COMMAND = DeleteBuyerCommand


class DeleteSellerCommandParser(_DeleteCommandParser):
    COMMAND = DeleteSellerCommand


class _EditCommandParser(CommandParser):
    COMMAND: ClassVar[Type[EditCommand]]
    EDITABLE: ClassVar[tuple]

    def _parse(self, args: str) -> EditCommand:
        _reject_foreign_prefixes(args, *self.EDITABLE, PREFIX_TAG)
        argmap = tokenize(args, *self.EDITABLE, PREFIX_TAG)
        index = parser_util.parse_index(argmap.get_preamble())
        argmap.verify_no_duplicate_prefixes_for(*self.EDITABLE)

        values = _parse_fields(argmap, self.EDITABLE)
        tags = self._parse_tags_for_edit(argmap)
        descriptor = EditDescriptor(tags=tags, **values)
        if not descriptor.is_any_field_edited():
            raise ParseError(MESSAGE_NOT_EDITED)
        return self.COMMAND(index, descriptor)

    @staticmethod
    def _parse_tags_for_edit(argmap: ArgumentMultimap):
        """A single empty 't/' clears the tags; no 't/' keeps them."""
        values = argmap.get_all_values(PREFIX_TAG)
        if not values:
            return None
        if values == [""]:
            return frozenset()
        return parser_util.parse_tags(values)


class EditBuyerCommandParser(_EditCommandParser):
    COMMAND = EditBuyerCommand
    EDITABLE = BUYER_PREFIXES


class EditSellerCommandParser(_EditCommandParser):
    COMMAND = EditSellerCommand
    EDITABLE = SELLER_PREFIXES


class _FindCommandParser(CommandParser):
    COMMAND: ClassVar[Type[FindCommand]]

    def _parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise ParseError("No keywords given")
        return self.COMMAND(NameContainsKeywordsPredicate(tuple(keywords)))


class FindBuyerCommandParser(_FindCommandParser):
    COMMAND = FindBuyerCommand


class FindSellerCommandParser(_FindCommandParser):
    COMMAND = FindSellerCommand


class _SortCommandParser(CommandParser):
    COMMAND: ClassVar[Type[SortCommand]]

    def _parse(self, args: str) -> SortCommand:
        _reject_foreign_prefixes(args)
        argmap = tokenize(args, PREFIX_SORT_FIELD, PREFIX_SORT_ORDER)
        if argmap.get_preamble() or not argmap.has(PREFIX_SORT_FIELD):
            raise ParseError("Expected s/FIELD")
        argmap.verify_no_duplicate_prefixes_for(PREFIX_SORT_FIELD, PREFIX_SORT_ORDER)

        field_name = argmap.get_value(PREFIX_SORT_FIELD).lower()
        if field_name not in self.COMMAND.ROLE.sort_fields:
            raise ParseError(f"Unknown sort field: {field_name!r}")

        order: Optional[str] = argmap.get_value(PREFIX_SORT_ORDER)
        descending = parser_util.parse_sort_order(order) if order is not None else False
        return self.COMMAND(field_name, descending)


class SortBuyerCommandParser(_SortCommandParser):
    COMMAND = SortBuyerCommand


class SortSellerCommandParser(_SortCommandParser):
    COMMAND = SortSellerCommand
