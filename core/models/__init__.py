"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/models/__init__.py
Version:        1.0.0
Description:    Package initializer for core data models. Exports the Buyer and
                Seller records and the Displayable tagged union.
------------------------------------------------------------------------------
"""

from .person import Person, Buyer, Seller, Displayable
