"""
Database connection module - Appwrite document store client management.

Provides the document store client for the seeding scripts.
Seeding runs open it with the get_document_store() context manager,
which closes the connection pool on exit.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from shared.appwrite_client import DocumentStoreClient
from shared.config import Settings, load_settings

logger = logging.getLogger(__name__)


def create_document_store(settings: Settings | None = None) -> DocumentStoreClient:
    """
    Build a document store client from settings.

    Raises:
        ConfigurationError: If endpoint, project id or API key is missing,
            or the environment holds invalid settings
    """
    return DocumentStoreClient.from_settings(settings or load_settings())


@asynccontextmanager
async def get_document_store(
    settings: Settings | None = None,
) -> AsyncGenerator[DocumentStoreClient, None]:
    """
    Async context manager for the document store client.

    Usage:
        async with get_document_store() as store:
            page = await store.list_documents(database_id, collection_id)

    Yields:
        DocumentStoreClient: Client with an open connection pool
    """
    store = create_document_store(settings)
    try:
        yield store
    finally:
        await store.close()


async def check_connection(store: DocumentStoreClient, database_id: str) -> None:
    """
    Verify the configured database is reachable.

    Raises:
        ConfigurationError: If the database cannot be fetched
    """
    database = await store.get_database(database_id)
    logger.info(f"Connected to database {database_id} ({database.get('name', 'unnamed')})")
