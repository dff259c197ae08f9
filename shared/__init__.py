"""
Property Listing Seed - Shared module.

This module contains shared utilities, configuration, and the document
store client used across the application.
"""

from shared.appwrite_client import Document, DocumentList, DocumentStoreClient
from shared.config import SeedConfig, Settings, get_settings, load_settings
from shared.logging_config import configure_logging
from shared.errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorLogger,
    InvalidRangeError,
    RemoteOperationError,
    SeedError,
    categorize,
    get_error_logger,
    map_status_to_category,
)

__all__ = [
    # Core utilities
    "Settings",
    "SeedConfig",
    "get_settings",
    "load_settings",
    "configure_logging",
    # Clients
    "DocumentStoreClient",
    "Document",
    "DocumentList",
    # Error handling
    "SeedError",
    "ConfigurationError",
    "InvalidRangeError",
    "RemoteOperationError",
    "ErrorCategory",
    "ErrorLogger",
    "get_error_logger",
    "map_status_to_category",
    "categorize",
]
