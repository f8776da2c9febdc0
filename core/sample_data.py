"""Seed content used when no address book file exists yet."""

from core.address_book import AddressBook
from core.models.person import Buyer, Seller


def get_sample_buyers():
    return [
        Buyer(name="Alex Yeoh", phone="87438807", email="alexyeoh@example.com",
              address="Blk 30 Geylang Street 29, #06-40", house_info="3 room flat near MRT",
              tags=frozenset({"firsttime"})),
        Buyer(name="Bernice Yu", phone="99272758", email="berniceyu@example.com",
              address="Blk 30 Lorong 3 Serangoon Gardens, #07-18", house_info="Condo with pool",
              tags=frozenset({"investor", "urgent"})),
        Buyer(name="Charlotte Oliveiro", phone="93210283", email="charlotte@example.com",
              address="Blk 11 Ang Mo Kio Street 74, #11-04", house_info="Landed, 4 bedrooms"),
    ]


def get_sample_sellers():
    return [
        Seller(name="David Li", phone="91031282", email="lidavid@example.com",
               address="Blk 436 Serangoon Gardens Street 26, #16-43",
               selling_address="Blk 45 Aljunied Street 85, #11-31",
               house_info="5 room HDB, high floor", tags=frozenset({"motivated"})),
        Seller(name="Irfan Ibrahim", phone="92492021", email="irfan@example.com",
               address="Blk 47 Tampines Street 20, #17-35",
               selling_address="8 Marine Parade Road, #03-02",
               house_info="2 bedroom condo, sea view"),
    ]


def get_sample_address_book() -> AddressBook:
    address_book = AddressBook()
    address_book.set_buyers(get_sample_buyers())
    address_book.set_sellers(get_sample_sellers())
    return address_book
