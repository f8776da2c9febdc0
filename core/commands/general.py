"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/commands/general.py
Version:        1.0.0
Description:    Commands that act on the whole address book or the UI.
------------------------------------------------------------------------------
"""

from core.address_book import AddressBook
from core.commands.base import Command, CommandResult
from core.model_manager import ModelManager
from core.predicates import PREDICATE_SHOW_ALL


class _StatelessCommand(Command):
    """Commands without arguments compare equal by type."""

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ListCommand(_StatelessCommand):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows all buyers and sellers."
    MESSAGE_SUCCESS = "Listed all buyers and sellers"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_buyer_list(PREDICATE_SHOW_ALL)
        model.update_filtered_seller_list(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


class ClearCommand(_StatelessCommand):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Deletes all buyers and sellers."
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, model: ModelManager) -> CommandResult:
        model.set_address_book(AddressBook())
        return CommandResult(self.MESSAGE_SUCCESS)


class HelpCommand(_StatelessCommand):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


class ExitCommand(_StatelessCommand):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting EstateBook as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
