import pytest
from pydantic import TypeAdapter, ValidationError

from core.models.person import Buyer, Displayable, Seller


def test_buyer_equality_is_full_field_equality(alice, make_buyer):
    assert alice == make_buyer()
    assert alice != make_buyer(address="Somewhere else")
    assert alice != make_buyer(tags=frozenset())


def test_records_are_immutable(alice):
    with pytest.raises(ValidationError):
        alice.name = "Someone"


def test_similarity_ignores_case_whitespace_and_non_identity_fields(alice, make_buyer):
    variant = make_buyer(name="alice   pauline", address="Other street",
                         house_info="Landed", tags=frozenset({"vip"}))
    assert alice.is_same_displayable(variant)
    assert alice != variant


def test_similarity_requires_same_phone_and_email(alice, make_buyer):
    assert not alice.is_same_displayable(make_buyer(phone="11111111"))
    assert not alice.is_same_displayable(make_buyer(email="other@example.com"))


def test_buyer_and_seller_are_never_similar(alice, make_seller):
    seller = make_seller(name=alice.name, phone=alice.phone, email=alice.email)
    assert not alice.is_same_displayable(seller)
    assert not seller.is_same_displayable(alice)


def test_invalid_fields_are_rejected(make_buyer, make_seller):
    with pytest.raises(ValidationError):
        make_buyer(phone="badnumber")
    with pytest.raises(ValidationError):
        make_buyer(house_info=" ")
    with pytest.raises(ValidationError):
        make_seller(selling_address="")
    with pytest.raises(ValidationError):
        make_buyer(tags=frozenset({"not valid"}))


def test_seller_requires_selling_address_and_house_info():
    with pytest.raises(ValidationError):
        Seller(name="Carl", phone="123", email="c@example.com", address="x", house_info="y")


def test_role_discriminator_selects_variant(alice, carl):
    adapter = TypeAdapter(Displayable)
    assert isinstance(adapter.validate_python(alice.model_dump()), Buyer)
    assert isinstance(adapter.validate_python(carl.model_dump()), Seller)
    assert alice.role == "buyer"
    assert carl.role == "seller"


def test_tags_serialize_sorted(make_buyer):
    buyer = make_buyer(tags=frozenset({"zeta", "alpha"}))
    assert buyer.model_dump()["tags"] == ["alpha", "zeta"]
