"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/logic.py
Version:        1.0.0
Description:    Glue between the UI and the model: parses a line of user input,
                executes the command and persists the address book afterwards.
------------------------------------------------------------------------------
"""

from pathlib import Path

from core.commands import CommandResult
from core.exceptions import CommandError, ParseError
from core.logger import get_logger, log_command
from core.messages import MESSAGE_SAVE_FAILED
from core.model_manager import ModelManager
from core.models.person import Buyer, Seller
from core.observable import ObservableSequence
from core.parser import AddressBookParser
from core.storage import StorageManager
from core.user_prefs import GuiSettings

logger = get_logger("logic")


class LogicManager:
    """
    Single entry point used by the GUI. Execution is synchronous; the
    address book file is rewritten after every successful command.
    """

    def __init__(self, model: ModelManager, storage: StorageManager) -> None:
        self.model = model
        self.storage = storage
        self.parser = AddressBookParser()

    def execute(self, command_text: str) -> CommandResult:
        """
        Raises:
            ParseError: If the text is not a valid command.
            CommandError: If the command fails or the data cannot be saved.
        """
        logger.info(f"----------------[USER COMMAND][{command_text}]")
        try:
            command = self.parser.parse_command(command_text)
            result = command.execute(self.model)
        except (ParseError, CommandError) as e:
            log_command(command_text, error=str(e))
            raise

        try:
            self.storage.save_address_book(self.model.address_book)
        except OSError as e:
            logger.error(f"Saving the address book failed: {e}")
            raise CommandError(MESSAGE_SAVE_FAILED.format(e)) from e

        log_command(command_text, feedback=result.feedback_to_user)
        return result

    @property
    def filtered_buyer_list(self) -> ObservableSequence:
        return self.model.filtered_buyer_list

    @property
    def filtered_seller_list(self) -> ObservableSequence:
        return self.model.filtered_seller_list

    @property
    def address_book_file_path(self) -> Path:
        return self.model.address_book_file_path

    @property
    def gui_settings(self) -> GuiSettings:
        return self.model.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self.model.gui_settings = gui_settings
