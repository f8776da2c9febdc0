import pytest

from core.models import fields


@pytest.mark.parametrize("value, expected", [
    ("peter jack", True),
    ("12345", True),
    ("Capital Tan", True),
    ("David Roger Jackson Ray Jr 2nd", True),
    ("", False),
    (" ", False),
    ("^", False),
    ("peter*", False),
])
def test_name_validation(value, expected):
    assert fields.is_valid_name(value) is expected


@pytest.mark.parametrize("value, expected", [
    ("911", True),
    ("3094", True),
    ("124293842033123", True),
    ("91", False),
    ("phone", False),
    ("9011p041", False),
    ("9312 1534", False),
    ("", False),
])
def test_phone_validation(value, expected):
    assert fields.is_valid_phone(value) is expected


@pytest.mark.parametrize("value, expected", [
    ("email@com", True),
    ("PeterJack_1190@example.com", True),
    ("a@bc", True),
    ("test@localhost", True),
    ("peter_jack@very-very-very-long-example.com", True),
    ("a1+be.d@example1.com", True),
    ("peterjack@example", True),
    ("@example.com", False),
    ("peterjackexample.com", False),
    ("peterjack@", False),
    ("peterjack@example.c", False),
    ("-peterjack@example.com", False),
    ("peterjack-@example.com", False),
    ("peterjack@-example.com", False),
    ("peter jack@example.com", False),
    ("peterjack@example.com.", False),
])
def test_email_validation(value, expected):
    assert fields.is_valid_email(value) is expected


@pytest.mark.parametrize("value, expected", [
    ("Blk 456, Den Road, #01-355", True),
    ("-", True),
    ("", False),
    (" ", False),
    (" leading space", False),
])
def test_address_validation(value, expected):
    assert fields.is_valid_address(value) is expected


def test_house_info_and_tag_validation():
    assert fields.is_valid_house_info("3 room flat, high floor")
    assert not fields.is_valid_house_info("")
    assert fields.is_valid_tag("friends")
    assert not fields.is_valid_tag("best friend")
    assert not fields.is_valid_tag("#friend")


def test_normalize_name():
    assert fields.normalize_name("  Alice   PAULINE ") == "alice pauline"
