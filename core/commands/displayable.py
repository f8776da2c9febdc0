"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/commands/displayable.py
Version:        1.0.0
Description:    Role-generic add/delete/edit/find/sort commands. Buyer and
                seller commands bind these to a Role, which routes each
                operation to the matching ModelManager method.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar, Dict, FrozenSet, Optional, Type

from core.commands.base import Command, CommandResult
from core.exceptions import CommandError, DuplicateEntryError, EntryNotFoundError
from core.logger import get_logger
from core.messages import MESSAGE_INVALID_INDEX, MESSAGE_LISTED_OVERVIEW, format_record
from core.model_manager import ModelManager
from core.models.person import Person
from core.observable import ObservableSequence
from core.predicates import PREDICATE_SHOW_ALL, AttributeSortKey, NameContainsKeywordsPredicate

logger = get_logger("logic.commands")


@dataclass(frozen=True)
class Role:
    """
    Binds a record type to its ModelManager operations. The operations are
    unbound ModelManager methods, called as role.add(model, record).
    """
    key: str
    record_type: Type[Person]
    sort_fields: Dict[str, str]
    filtered_list: Callable[[ModelManager], ObservableSequence]
    has_similar: Callable[[ModelManager, Person], bool]
    add: Callable[[ModelManager, Person], None]
    delete: Callable[[ModelManager, Person], None]
    replace: Callable[[ModelManager, Person, Person], None]
    update_filter: Callable[[ModelManager, Any], None]
    update_sort: Callable[[ModelManager, Any], None]

    @property
    def duplicate_message(self) -> str:
        return f"This {self.key} already exists in the address book"


def _get_displayed(role: Role, model: ModelManager, index: int) -> Person:
    """Resolves a one-based index against the currently displayed list."""
    displayed = role.filtered_list(model)
    if index < 1 or index > len(displayed):
        raise CommandError(MESSAGE_INVALID_INDEX.format(role.key))
    return displayed[index - 1]


@dataclass(frozen=True)
class AddCommand(Command):
    to_add: Person

    ROLE: ClassVar[Role]

    def execute(self, model: ModelManager) -> CommandResult:
        if self.ROLE.has_similar(model, self.to_add):
            raise CommandError(self.ROLE.duplicate_message)
        try:
            self.ROLE.add(model, self.to_add)
        except DuplicateEntryError as e:
            raise CommandError(str(e)) from e
        return CommandResult(f"New {self.ROLE.key} added: {format_record(self.to_add)}")


@dataclass(frozen=True)
class DeleteCommand(Command):
    target_index: int

    ROLE: ClassVar[Role]

    def execute(self, model: ModelManager) -> CommandResult:
        target = _get_displayed(self.ROLE, model, self.target_index)
        try:
            self.ROLE.delete(model, target)
        except EntryNotFoundError as e:
            raise CommandError(str(e)) from e
        return CommandResult(f"Deleted {self.ROLE.key}: {format_record(target)}")


@dataclass(frozen=True)
class EditDescriptor:
    """
    Fields to change on a record. None means 'keep the current value';
    an empty tag set clears all tags.
    """
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    selling_address: Optional[str] = None
    house_info: Optional[str] = None
    tags: Optional[FrozenSet[str]] = None

    def updates(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}

    def is_any_field_edited(self) -> bool:
        return bool(self.updates())

    def apply_to(self, record: Person) -> Person:
        data = record.model_dump()
        data.update(self.updates())
        return type(record).model_validate(data)


@dataclass(frozen=True)
class EditCommand(Command):
    target_index: int
    descriptor: EditDescriptor

    ROLE: ClassVar[Role]

    def execute(self, model: ModelManager) -> CommandResult:
        target = _get_displayed(self.ROLE, model, self.target_index)
        edited = self.descriptor.apply_to(target)

        if not target.is_same_displayable(edited) and self.ROLE.has_similar(model, edited):
            raise CommandError(self.ROLE.duplicate_message)

        try:
            self.ROLE.replace(model, target, edited)
        except (DuplicateEntryError, EntryNotFoundError) as e:
            raise CommandError(str(e)) from e
        self.ROLE.update_filter(model, PREDICATE_SHOW_ALL)
        return CommandResult(f"Edited {self.ROLE.key}: {format_record(edited)}")


@dataclass(frozen=True)
class FindCommand(Command):
    predicate: NameContainsKeywordsPredicate

    ROLE: ClassVar[Role]

    def execute(self, model: ModelManager) -> CommandResult:
        self.ROLE.update_filter(model, self.predicate)
        count = len(self.ROLE.filtered_list(model))
        return CommandResult(MESSAGE_LISTED_OVERVIEW.format(count, self.ROLE.key))


@dataclass(frozen=True)
class SortCommand(Command):
    field_name: str
    descending: bool = False

    ROLE: ClassVar[Role]

    def execute(self, model: ModelManager) -> CommandResult:
        attribute = self.ROLE.sort_fields.get(self.field_name)
        if attribute is None:
            raise CommandError(f"Cannot sort {self.ROLE.key}s by '{self.field_name}'")
        self.ROLE.update_sort(model, AttributeSortKey(attribute, reverse=self.descending))
        order = "descending" if self.descending else "ascending"
        logger.debug(f"Sorting {self.ROLE.key}s by {attribute} ({order})")
        return CommandResult(f"Sorted {self.ROLE.key}s by {self.field_name} ({order})")
