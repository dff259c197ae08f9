"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
- An in-memory document store with failure injection
- Seed configuration without rate-limit pauses
- A seeded random generator

Async tests run through pytest-asyncio in auto mode (see pyproject.toml).
"""

import random
from collections import defaultdict
from collections.abc import Callable
from itertools import count
from typing import Any

import pytest

from shared.appwrite_client import UNIQUE_ID, Document, DocumentList
from shared.config import SeedConfig
from shared.errors import ConfigurationError, RemoteOperationError


# =============================================================================
# FAKE DOCUMENT STORE
# =============================================================================

class FakeDocumentStore:
    """
    In-memory stand-in for DocumentStoreClient.

    Failure injection:
    - fail_create: predicate (collection_id, data) -> bool, True raises
    - fail_list: collection ids whose listing raises
    - fail_delete: document ids whose deletion raises
    - unreachable: get_database raises ConfigurationError
    """

    def __init__(self, database_id: str = "db"):
        self.database_id = database_id
        self.collections: dict[str, dict[str, Document]] = defaultdict(dict)
        self.calls: list[tuple[str, str]] = []
        self.fail_create: Callable[[str, dict[str, Any]], bool] | None = None
        self.fail_list: set[str] = set()
        self.fail_delete: set[str] = set()
        self.unreachable = False
        self.closed = False
        self._ids = count(1)

    @staticmethod
    def unique_id() -> str:
        return UNIQUE_ID

    def ids(self, collection_id: str) -> set[str]:
        return set(self.collections[collection_id])

    def documents(self, collection_id: str) -> list[Document]:
        return list(self.collections[collection_id].values())

    def add(self, collection_id: str, **data: Any) -> Document:
        document = Document.model_validate(
            {"$id": f"{collection_id}-{next(self._ids)}", "$collectionId": collection_id, **data}
        )
        self.collections[collection_id][document.id] = document
        return document

    async def get_database(self, database_id: str) -> dict[str, Any]:
        self.calls.append(("get_database", database_id))
        if self.unreachable or database_id != self.database_id:
            raise ConfigurationError(f"Database {database_id!r} is not reachable")
        return {"$id": database_id, "name": "Listings"}

    async def list_documents(
        self,
        database_id: str,
        collection_id: str,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> DocumentList:
        self.calls.append(("list", collection_id))
        if collection_id in self.fail_list:
            raise RemoteOperationError("listing failed", status_code=500)
        documents = self.documents(collection_id)
        return DocumentList(total=len(documents), documents=documents[offset:offset + limit])

    async def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        data: dict[str, Any],
    ) -> Document:
        self.calls.append(("create", collection_id))
        if self.fail_create is not None and self.fail_create(collection_id, data):
            raise RemoteOperationError("Rate limit for the current endpoint has been exceeded", status_code=429)
        assert document_id == UNIQUE_ID
        return self.add(collection_id, **data)

    async def delete_document(self, database_id: str, collection_id: str, document_id: str) -> None:
        self.calls.append(("delete", collection_id))
        if document_id in self.fail_delete:
            raise RemoteOperationError("delete failed", status_code=503)
        del self.collections[collection_id][document_id]

    async def close(self) -> None:
        self.closed = True

    def count_calls(self, operation: str, collection_id: str | None = None) -> int:
        return sum(
            1 for op, target in self.calls
            if op == operation and (collection_id is None or target == collection_id)
        )


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def seed_config() -> SeedConfig:
    """Seed configuration with the default volumes and no pauses."""
    return SeedConfig(
        database_id="db",
        agents_collection_id="agents",
        reviews_collection_id="reviews",
        galleries_collection_id="galleries",
        properties_collection_id="properties",
        delay_seconds=0,
        property_delay_seconds=0,
    )


@pytest.fixture
def make_store() -> type[FakeDocumentStore]:
    """Factory for tests that need more than one independent store."""
    return FakeDocumentStore


@pytest.fixture
def store(make_store) -> FakeDocumentStore:
    return make_store()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240517)
