"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/__init__.py
Version:        1.0.0
Description:    Core logic package for EstateBook. Contains the buyer/seller
                records, the in-memory model, command parsing and execution,
                and JSON persistence.
------------------------------------------------------------------------------
"""
