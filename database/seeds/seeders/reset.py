"""
Property Listing Collection Reset.

Empties the seeded collections before a run. Documents are deleted one by
one with the same pacing as creations, so a large collection takes a while
but stays under the remote rate limit.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from shared.appwrite_client import DEFAULT_PAGE_SIZE, Document, DocumentStoreClient
from shared.config import SeedConfig
from shared.errors import SeedError, categorize, get_error_logger

logger = logging.getLogger(__name__)
error_logger = get_error_logger()


@dataclass
class ResetReport:
    """Documents removed per collection, and collections whose clearing failed."""

    removed: dict[str, int] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)  # collection key -> log_ref

    @property
    def total_removed(self) -> int:
        return sum(self.removed.values())


class CollectionResetter:
    """
    Deletes every document of the configured collections.

    A failed delete is logged and skipped; a failed listing skips the whole
    collection. Neither stops the other collections from being cleared.
    """

    stage = "clearing"

    def __init__(
        self,
        store: DocumentStoreClient,
        config: SeedConfig,
        *,
        delay_seconds: float | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.store = store
        self.config = config
        self.delay_seconds = config.delay_seconds if delay_seconds is None else delay_seconds
        self.page_size = page_size

    async def pause(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def list_all(self, collection_id: str) -> list[Document]:
        """
        Read every page of a collection before anything is deleted.

        Raises:
            RemoteOperationError: If any page cannot be listed
        """
        documents: list[Document] = []
        while True:
            page = await self.store.list_documents(
                self.config.database_id,
                collection_id,
                limit=self.page_size,
                offset=len(documents),
            )
            documents.extend(page.documents)
            if not page.documents or len(documents) >= page.total:
                return documents

    async def clear(self, collection_key: str, collection_id: str | None = None) -> int:
        """
        Delete all documents of one collection.

        Args:
            collection_key: Collection key in SeedConfig.collections (e.g., "AGENT")
            collection_id: Override for the collection id

        Returns:
            Number of documents actually deleted

        Raises:
            RemoteOperationError: If the collection cannot be listed
        """
        collection_id = collection_id or self.config.collections[collection_key]
        documents = await self.list_all(collection_id)
        extra = {"stage": self.stage, "collection": collection_key}
        logger.info(f"Clearing {len(documents)} documents from {collection_key}", extra=extra)

        removed = 0
        for position, document in enumerate(documents, start=1):
            try:
                await self.store.delete_document(self.config.database_id, collection_id, document.id)
                removed += 1
            except SeedError as e:
                error_logger.log_error(
                    error=e,
                    category=categorize(e),
                    collection=collection_key,
                    entity_index=position,
                    context={"operation": "delete document", "document_id": document.id},
                )
            await self.pause()

        logger.info(f"Cleared collection: {collection_key} ({removed} removed)", extra=extra)
        return removed

    async def clear_all(self) -> ResetReport:
        """Clear every configured collection, continuing past failures."""
        report = ResetReport()
        for collection_key, collection_id in self.config.collections.items():
            try:
                report.removed[collection_key] = await self.clear(collection_key, collection_id)
            except SeedError as e:
                report.failed[collection_key] = error_logger.log_error(
                    error=e,
                    category=categorize(e),
                    collection=collection_key,
                    context={"operation": "clear collection", "stage": self.stage},
                )
        logger.info("Cleared all existing data.", extra={"stage": self.stage})
        return report
