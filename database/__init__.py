"""
Property Listing Seed - Database module.

This module contains the document store connection utilities and the
seeding scripts.
"""

from database.connection import (
    check_connection,
    create_document_store,
    get_document_store,
)

__all__ = [
    "create_document_store",
    "get_document_store",
    "check_connection",
]
