import pytest

from core.commands.buyer import AddBuyerCommand
from core.exceptions import ParseError
from core.messages import invalid_format
from core.models.fields import PHONE_CONSTRAINTS
from core.models.person import Buyer
from core.parser.command_parsers import AddBuyerCommandParser

BROKEN_INPUT = "ALASDKJDL"
PARTIAL_INPUT = "n/adam p/3094 e/email@com ah/homeaddress"
BAD_FIELDS_INPUT = "n/adam p/badnumber e/email@com ah/homeaddress i/info"
VALID_INPUT = "n/adam p/3094 e/email@com ah/homeaddress i/info"


@pytest.fixture
def parser():
    return AddBuyerCommandParser()


@pytest.mark.parametrize("args", [BROKEN_INPUT, PARTIAL_INPUT, BAD_FIELDS_INPUT, ""])
def test_invalid_input_gives_usage(parser, args):
    with pytest.raises(ParseError) as excinfo:
        parser.parse(args)
    assert str(excinfo.value) == invalid_format(AddBuyerCommand.MESSAGE_USAGE)


def test_bad_field_reports_constraint(parser):
    with pytest.raises(ParseError) as excinfo:
        parser.parse(BAD_FIELDS_INPUT)
    assert excinfo.value.detail == PHONE_CONSTRAINTS


def test_valid_input(parser):
    expected = Buyer(name="adam", phone="3094", email="email@com",
                     address="homeaddress", house_info="info")
    assert parser.parse(VALID_INPUT) == AddBuyerCommand(expected)


def test_fields_in_any_order_with_tags(parser):
    command = parser.parse(" t/friend i/info ah/homeaddress e/email@com p/3094 n/adam t/vip ")
    assert command.to_add.tags == frozenset({"friend", "vip"})
    assert command.to_add.name == "adam"


def test_preamble_is_rejected(parser):
    with pytest.raises(ParseError):
        parser.parse("extra " + VALID_INPUT)


def test_repeated_single_valued_prefix_is_rejected(parser):
    with pytest.raises(ParseError) as excinfo:
        parser.parse(VALID_INPUT + " n/eve")
    assert "n/" in excinfo.value.detail


@pytest.mark.parametrize("args", [VALID_INPUT + " as/foo", "n/adam as/foo p/3094 e/email@com ah/homeaddress i/info"])
def test_selling_address_prefix_is_rejected(parser, args):
    with pytest.raises(ParseError) as excinfo:
        parser.parse(args)
    assert str(excinfo.value) == invalid_format(AddBuyerCommand.MESSAGE_USAGE)
    assert "as/" in excinfo.value.detail


def test_slash_inside_value_is_kept(parser):
    command = parser.parse("n/adam p/3094 e/email@com ah/block s/o 5 i/info")
    assert command.to_add.address == "block s/o 5"
