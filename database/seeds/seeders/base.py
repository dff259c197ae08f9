"""
Property Listing Base Seeder.

Provides common functionality for all seeders:
- Uniform logging format
- Rate-limited sequential document creation
- Per-record outcomes collected into a stage report
"""

import asyncio
import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from shared.appwrite_client import Document, DocumentStoreClient
from shared.config import SeedConfig
from shared.errors import SeedError, categorize, get_error_logger

logger = logging.getLogger(__name__)
error_logger = get_error_logger()


@dataclass
class SeedOutcome:
    """Result of one record: the created document, or the error that stopped it."""

    index: int
    collection: str
    document: Document | None = None
    error: Exception | None = None
    log_ref: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.document is not None


@dataclass
class StageReport:
    """Outcomes of one seeding stage, in creation order."""

    stage: str
    collection: str
    outcomes: list[SeedOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def documents(self) -> list[Document]:
        return [o.document for o in self.outcomes if o.ok and o.document is not None]

    @property
    def created(self) -> int:
        return len(self.documents)

    @property
    def failures(self) -> list[SeedOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def failed(self) -> int:
        return len(self.failures)


class BaseSeeder:
    """
    Base class for all entity seeders.

    Provides:
    - Consistent logging format
    - Statistics tracking (created, failed)
    - create_many(): one create call at a time, a fixed pause after each call,
      failures logged and skipped without retry
    """

    entity_type = "Entity"
    stage = "seeding"
    # Key in SeedConfig.collections (e.g., "AGENT")
    collection_key = ""

    def __init__(
        self,
        store: DocumentStoreClient,
        config: SeedConfig,
        *,
        rng: random.Random | None = None,
        delay_seconds: float | None = None,
    ):
        """
        Initialize the seeder.

        Args:
            store: The document store client
            config: Seeding configuration
            rng: Random generator shared by the run
            delay_seconds: Pause after each remote call (defaults to default_delay())
        """
        self.store = store
        self.config = config
        self.collection_id = config.collections[self.collection_key]
        self.rng = rng or random.Random()
        self.delay_seconds = self.default_delay() if delay_seconds is None else delay_seconds
        self.stats = {"created": 0, "failed": 0}

    def default_delay(self) -> float:
        return self.config.delay_seconds

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self.stats = {"created": 0, "failed": 0}

    def log_created(self, index: int, document: Document) -> None:
        """Log a created entity."""
        self.stats["created"] += 1
        logger.debug(
            f"  + {self.entity_type} {index}: Created ({document.id})",
            extra=self._log_extra(index),
        )

    def log_failed(self, index: int, error: Exception) -> str:
        """Log a failed entity and return the error reference."""
        self.stats["failed"] += 1
        return error_logger.log_error(
            error=error,
            category=categorize(error),
            collection=self.collection_key,
            entity_index=index,
            context={"operation": f"create {self.entity_type.lower()}", "stage": self.stage},
        )

    def log_summary(self) -> None:
        """Log a summary of operations."""
        logger.info(
            f"Seeded {self.stats['created']} {self.entity_type.lower()} records "
            f"({self.stats['failed']} failed)",
            extra={"stage": self.stage, "collection": self.collection_key},
        )

    def _log_extra(self, index: int) -> dict[str, Any]:
        return {"stage": self.stage, "collection": self.collection_key, "entity_index": index}

    async def pause(self) -> None:
        """Cooperative pause between remote calls to respect the rate limit."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def create_one(self, index: int, build: Callable[[int], dict[str, Any]]) -> SeedOutcome:
        """
        Build and create a single record.

        Args:
            index: 1-based position of the record within the stage
            build: Produces the document attributes for index

        Returns:
            SeedOutcome with the created document or the recorded error
        """
        try:
            data = build(index)
        except SeedError as e:
            log_ref = self.log_failed(index, e)
            return SeedOutcome(index, self.collection_key, error=e, log_ref=log_ref)

        try:
            document = await self.store.create_document(
                self.config.database_id,
                self.collection_id,
                self.store.unique_id(),
                data,
            )
        except SeedError as e:
            log_ref = self.log_failed(index, e)
            outcome = SeedOutcome(index, self.collection_key, error=e, log_ref=log_ref)
        else:
            self.log_created(index, document)
            outcome = SeedOutcome(index, self.collection_key, document=document)

        await self.pause()
        return outcome

    async def create_many(self, count: int, build: Callable[[int], dict[str, Any]]) -> StageReport:
        """
        Create count records sequentially, indices 1..count.

        A failed record never stops the batch.
        """
        self.reset_stats()
        report = StageReport(stage=self.stage, collection=self.collection_key)

        for index in range(1, count + 1):
            report.outcomes.append(await self.create_one(index, build))

        self.log_summary()
        return report
