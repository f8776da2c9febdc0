"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/models/person.py
Version:        1.0.0
Description:    Immutable contact records. Buyer and Seller share the Person
                field set and carry a 'role' discriminator plus their
                role-specific payload.
------------------------------------------------------------------------------
"""

from typing import Annotated, Any, FrozenSet, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from core.models import fields


class Person(BaseModel):
    """
    Shared identity fields of every contact. All fields are required and
    validated; instances are frozen value objects.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    phone: str
    email: str
    address: str
    tags: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not fields.is_valid_name(v):
            raise ValueError(fields.NAME_CONSTRAINTS)
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not fields.is_valid_phone(v):
            raise ValueError(fields.PHONE_CONSTRAINTS)
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if not fields.is_valid_email(v):
            raise ValueError(fields.EMAIL_CONSTRAINTS)
        return v

    @field_validator("address")
    @classmethod
    def check_address(cls, v: str) -> str:
        if not fields.is_valid_address(v):
            raise ValueError(fields.ADDRESS_CONSTRAINTS)
        return v

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        for tag in v:
            if not fields.is_valid_tag(tag):
                raise ValueError(fields.TAG_CONSTRAINTS)
        return v

    @field_serializer("tags")
    def serialize_tags(self, tags: FrozenSet[str]) -> list:
        # Stable order keeps the data file diff-friendly
        return sorted(tags)

    def is_same_displayable(self, other: Any) -> bool:
        """
        Weaker notion of equality used to detect likely duplicates.
        Two records of the same role are similar when their name (ignoring
        case and extra whitespace), phone and email match.
        """
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return (fields.normalize_name(self.name) == fields.normalize_name(other.name)
                and self.phone == other.phone
                and self.email == other.email)


class Buyer(Person):
    """A prospective buyer and the kind of house they are looking for."""
    role: Literal["buyer"] = "buyer"
    house_info: str

    @field_validator("house_info")
    @classmethod
    def check_house_info(cls, v: str) -> str:
        if not fields.is_valid_house_info(v):
            raise ValueError(fields.HOUSE_INFO_CONSTRAINTS)
        return v


class Seller(Person):
    """A seller, the address of the property on sale and its description."""
    role: Literal["seller"] = "seller"
    selling_address: str
    house_info: str

    @field_validator("selling_address")
    @classmethod
    def check_selling_address(cls, v: str) -> str:
        if not fields.is_valid_address(v):
            raise ValueError(fields.ADDRESS_CONSTRAINTS)
        return v

    @field_validator("house_info")
    @classmethod
    def check_house_info(cls, v: str) -> str:
        if not fields.is_valid_house_info(v):
            raise ValueError(fields.HOUSE_INFO_CONSTRAINTS)
        return v


# Tagged union over the two roles, resolved by the 'role' field
Displayable = Annotated[Union[Buyer, Seller], Field(discriminator="role")]
