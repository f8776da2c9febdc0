"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/commands/__init__.py
Version:        1.0.0
Description:    Executable user commands.
------------------------------------------------------------------------------
"""

from .base import Command, CommandResult
from .buyer import (
    AddBuyerCommand, DeleteBuyerCommand, EditBuyerCommand, FindBuyerCommand, SortBuyerCommand
)
from .seller import (
    AddSellerCommand, DeleteSellerCommand, EditSellerCommand, FindSellerCommand, SortSellerCommand
)
from .general import ClearCommand, ExitCommand, HelpCommand, ListCommand
from .displayable import EditDescriptor
