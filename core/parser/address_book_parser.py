"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/parser/address_book_parser.py
Version:        1.0.0
Description:    Entry point of command parsing. Splits the command word from
                its arguments and dispatches to the matching parser.
------------------------------------------------------------------------------
"""

import re
from typing import Callable, Dict

from core.commands import (
    AddBuyerCommand, AddSellerCommand, ClearCommand, Command, DeleteBuyerCommand,
    DeleteSellerCommand, EditBuyerCommand, EditSellerCommand, ExitCommand, FindBuyerCommand,
    FindSellerCommand, HelpCommand, ListCommand, SortBuyerCommand, SortSellerCommand
)
from core.exceptions import ParseError
from core.logger import get_logger
from core.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from core.parser import command_parsers

logger = get_logger("logic.parser")

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class AddressBookParser:
    """Parses a full line of user input into a Command."""

    def __init__(self) -> None:
        self._dispatch: Dict[str, Callable[[str], Command]] = {
            AddBuyerCommand.COMMAND_WORD: command_parsers.AddBuyerCommandParser().parse,
            AddSellerCommand.COMMAND_WORD: command_parsers.AddSellerCommandParser().parse,
            DeleteBuyerCommand.COMMAND_WORD: command_parsers.DeleteBuyerCommandParser().parse,
            DeleteSellerCommand.COMMAND_WORD: command_parsers.DeleteSellerCommandParser().parse,
            EditBuyerCommand.COMMAND_WORD: command_parsers.EditBuyerCommandParser().parse,
            EditSellerCommand.COMMAND_WORD: command_parsers.EditSellerCommandParser().parse,
            FindBuyerCommand.COMMAND_WORD: command_parsers.FindBuyerCommandParser().parse,
            FindSellerCommand.COMMAND_WORD: command_parsers.FindSellerCommandParser().parse,
            SortBuyerCommand.COMMAND_WORD: command_parsers.SortBuyerCommandParser().parse,
            SortSellerCommand.COMMAND_WORD: command_parsers.SortSellerCommandParser().parse,
            # Argument-less commands ignore any trailing text
            ListCommand.COMMAND_WORD: lambda args: ListCommand(),
            ClearCommand.COMMAND_WORD: lambda args: ClearCommand(),
            HelpCommand.COMMAND_WORD: lambda args: HelpCommand(),
            ExitCommand.COMMAND_WORD: lambda args: ExitCommand(),
        }

    @property
    def command_words(self):
        return sorted(self._dispatch)

    def parse_command(self, user_input: str) -> Command:
        """
        Raises:
            ParseError: If the input is blank, the command word unknown or
                the arguments malformed.
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        logger.debug(f"Command word: {command_word}; Arguments: {arguments!r}")

        handler = self._dispatch.get(command_word)
        if handler is None:
            logger.debug(f"Unknown command word: {command_word}")
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return handler(arguments)
