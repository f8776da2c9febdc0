"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/commands/buyer.py
Version:        1.0.0
Description:    Commands operating on the buyer list.
------------------------------------------------------------------------------
"""

from core.commands.displayable import (
    AddCommand, DeleteCommand, EditCommand, FindCommand, Role, SortCommand
)
from core.model_manager import ModelManager
from core.models.person import Buyer
from core.predicates import BUYER_SORT_FIELDS

BUYER = Role(
    key="buyer",
    record_type=Buyer,
    sort_fields=BUYER_SORT_FIELDS,
    filtered_list=ModelManager.filtered_buyer_list.fget,
    has_similar=ModelManager.has_similar_buyer,
    add=ModelManager.add_buyer,
    delete=ModelManager.delete_buyer,
    replace=ModelManager.set_buyer,
    update_filter=ModelManager.update_filtered_buyer_list,
    update_sort=ModelManager.update_filtered_sorted_buyer_list,
)


class AddBuyerCommand(AddCommand):
    ROLE = BUYER
    COMMAND_WORD = "addbuyer"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a buyer to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL ah/HOME_ADDRESS i/HOUSE_INFO [t/TAG]...\n"
        f"Example: {COMMAND_WORD} n/John Doe p/98765432 e/johnd@example.com "
        "ah/311, Clementi Ave 2, #02-25 i/4 room flat near MRT t/firsttime"
    )


class DeleteBuyerCommand(DeleteCommand):
    ROLE = BUYER
    COMMAND_WORD = "deletebuyer"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the buyer identified by the index number used in the "
        "displayed buyer list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )


class EditBuyerCommand(EditCommand):
    ROLE = BUYER
    COMMAND_WORD = "editbuyer"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the buyer identified by the index number "
        "used in the displayed buyer list. Existing values will be overwritten by the "
        "input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[n/NAME] [p/PHONE] [e/EMAIL] [ah/HOME_ADDRESS] [i/HOUSE_INFO] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} 1 p/91234567 e/johndoe@example.com"
    )


class FindBuyerCommand(FindCommand):
    ROLE = BUYER
    COMMAND_WORD = "findbuyer"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all buyers whose names contain any of the specified "
        "keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )


class SortBuyerCommand(SortCommand):
    ROLE = BUYER
    COMMAND_WORD = "sortbuyer"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Sorts the displayed buyers by a field.\n"
        f"Parameters: s/FIELD ({'|'.join(BUYER_SORT_FIELDS)}) [o/ORDER (asc|desc)]\n"
        f"Example: {COMMAND_WORD} s/name o/desc"
    )
