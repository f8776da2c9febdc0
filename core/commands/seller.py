"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/commands/seller.py
Version:        1.0.0
Description:    Commands operating on the seller list.
------------------------------------------------------------------------------
"""

from core.commands.displayable import (
    AddCommand, DeleteCommand, EditCommand, FindCommand, Role, SortCommand
)
from core.model_manager import ModelManager
from core.models.person import Seller
from core.predicates import SELLER_SORT_FIELDS

SELLER = Role(
    key="seller",
    record_type=Seller,
    sort_fields=SELLER_SORT_FIELDS,
    filtered_list=ModelManager.filtered_seller_list.fget,
    has_similar=ModelManager.has_similar_seller,
    add=ModelManager.add_seller,
    delete=ModelManager.delete_seller,
    replace=ModelManager.set_seller,
    update_filter=ModelManager.update_filtered_seller_list,
    update_sort=ModelManager.update_filtered_sorted_seller_list,
)


class AddSellerCommand(AddCommand):
    ROLE = SELLER
    COMMAND_WORD = "addseller"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a seller to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL ah/HOME_ADDRESS as/SELLING_ADDRESS "
        "i/HOUSE_INFO [t/TAG]...\n"
        f"Example: {COMMAND_WORD} n/Jane Tan p/91112222 e/jane@example.com "
        "ah/12 Bedok North St 1 as/88 Pasir Ris Dr 3 i/5 room HDB, high floor t/motivated"
    )


class DeleteSellerCommand(DeleteCommand):
    ROLE = SELLER
    COMMAND_WORD = "deleteseller"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the seller identified by the index number used in the "
        "displayed seller list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )


class EditSellerCommand(EditCommand):
    ROLE = SELLER
    COMMAND_WORD = "editseller"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the seller identified by the index number "
        "used in the displayed seller list. Existing values will be overwritten by the "
        "input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[ah/HOME_ADDRESS] [as/SELLING_ADDRESS] [i/HOUSE_INFO] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} 2 as/10 Tampines Ave 5 i/3 room flat"
    )


class FindSellerCommand(FindCommand):
    ROLE = SELLER
    COMMAND_WORD = "findseller"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all sellers whose names contain any of the specified "
        "keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} jane"
    )


class SortSellerCommand(SortCommand):
    ROLE = SELLER
    COMMAND_WORD = "sortseller"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Sorts the displayed sellers by a field.\n"
        f"Parameters: s/FIELD ({'|'.join(SELLER_SORT_FIELDS)}) [o/ORDER (asc|desc)]\n"
        f"Example: {COMMAND_WORD} s/selling"
    )
