import os

# Widgets must be creatable without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QStandardPaths

from core.models.person import Buyer, Seller


@pytest.fixture(autouse=True, scope="session")
def isolated_standard_paths():
    """Redirects QStandardPaths to test locations so real user data is never touched."""
    QStandardPaths.setTestModeEnabled(True)
    yield
    QStandardPaths.setTestModeEnabled(False)


@pytest.fixture
def make_buyer():
    def _make(**overrides):
        values = dict(name="Alice Pauline", phone="94351253", email="alice@example.com",
                      address="123, Jurong West Ave 6, #08-111", house_info="4 room flat",
                      tags=frozenset({"friends"}))
        values.update(overrides)
        return Buyer(**values)
    return _make


@pytest.fixture
def make_seller():
    def _make(**overrides):
        values = dict(name="Carl Kurz", phone="95352563", email="heinz@example.com",
                      address="wall street", selling_address="10th street",
                      house_info="Terrace house", tags=frozenset())
        values.update(overrides)
        return Seller(**values)
    return _make


@pytest.fixture
def alice(make_buyer):
    return make_buyer()


@pytest.fixture
def bob(make_buyer):
    return make_buyer(name="Bob Choo", phone="98765432", email="johnd@example.com",
                      address="311, Clementi Ave 2, #02-25", house_info="Condo",
                      tags=frozenset({"owesMoney", "friends"}))


@pytest.fixture
def carl(make_seller):
    return make_seller()


@pytest.fixture
def dana(make_seller):
    return make_seller(name="Daniel Meier", phone="87652533", email="cornelia@example.com",
                       address="10th street", selling_address="Blk 2 Jurong East",
                       house_info="Executive maisonette", tags=frozenset({"friends"}))
