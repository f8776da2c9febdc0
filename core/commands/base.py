"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/commands/base.py
Version:        1.0.0
Description:    Command abstraction and the result object returned to the UI.
------------------------------------------------------------------------------
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from core.model_manager import ModelManager


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successfully executed command."""
    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    """A single user intent, executed against the model."""

    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        """
        Executes the command.

        Raises:
            CommandError: If the model rejects the operation.
        """
