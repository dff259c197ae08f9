"""
Property Listing Seed - Run all seeds.

Destroys and recreates the sample data of the four listing collections:
1. Clear agents, reviews, galleries and properties
2. Seed agents
3. Seed reviews
4. Seed gallery images
5. Seed properties referencing the documents created in steps 2-4

Run with: python -m database.seeds.run_all_seeds
"""

import asyncio
import logging
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from database.connection import check_connection, get_document_store
from database.seeds.data.assets import GALLERY_IMAGES, PROPERTY_IMAGES
from database.seeds.seeders import (
    AgentSeeder,
    CollectionResetter,
    GallerySeeder,
    PropertySeeder,
    ResetReport,
    ReviewSeeder,
    StageReport,
)
from shared.appwrite_client import DocumentStoreClient
from shared.config import SeedConfig, Settings, load_settings
from shared.errors import ConfigurationError, ErrorCategory, get_error_logger
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)
error_logger = get_error_logger()


class SeedState(str, Enum):
    """Orchestrator states, in the only order they can be visited."""

    IDLE = "idle"
    CLEARING = "clearing"
    SEEDING_AGENTS = "seeding_agents"
    SEEDING_REVIEWS = "seeding_reviews"
    SEEDING_GALLERIES = "seeding_galleries"
    SEEDING_PROPERTIES = "seeding_properties"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class RunReport:
    """Aggregate outcome of a seeding run."""

    state: SeedState = SeedState.IDLE
    reset: ResetReport | None = None
    stages: dict[str, StageReport] = field(default_factory=dict)
    error: str | None = None

    @property
    def completed(self) -> bool:
        return self.state is SeedState.DONE

    def counts(self) -> dict[str, int]:
        """Successfully created records per collection key."""
        return {key: stage.created for key, stage in self.stages.items()}


class SeedOrchestrator:
    """
    Runs the clear-then-create workflow against one database.

    Stages never overlap and always run to the end; record failures only
    show up in the stage reports. The run is aborted only when the
    configuration or the connection is unusable, before anything is touched.
    """

    def __init__(
        self,
        store: DocumentStoreClient,
        config: SeedConfig,
        *,
        rng: random.Random | None = None,
        gallery_images: Sequence[str] = GALLERY_IMAGES,
        property_images: Sequence[str] = PROPERTY_IMAGES,
    ):
        self.store = store
        self.config = config
        self.rng = rng or random.Random(config.random_seed)
        self.gallery_images = gallery_images
        self.property_images = property_images
        self.state = SeedState.IDLE

    def _enter(self, state: SeedState) -> None:
        logger.debug(f"Seeding state: {self.state.value} -> {state.value}")
        self.state = state

    def log_configuration(self) -> None:
        logger.info(f"Database ID: {self.config.database_id}")
        logger.info(f"Agents Collection ID: {self.config.agents_collection_id}")
        logger.info(f"Reviews Collection ID: {self.config.reviews_collection_id}")
        logger.info(f"Galleries Collection ID: {self.config.galleries_collection_id}")
        logger.info(f"Properties Collection ID: {self.config.properties_collection_id}")

    async def preflight(self) -> None:
        """
        Validate identifiers and reach the database.

        Raises:
            ConfigurationError: If an identifier is missing or the database is unreachable
        """
        missing = self.config.missing_fields()
        if missing:
            raise ConfigurationError(f"Missing seed configuration: {', '.join(missing)}")
        await check_connection(self.store, self.config.database_id)

    async def run(self) -> RunReport:
        """Execute every stage and return the aggregated report."""
        report = RunReport()
        logger.info("=" * 70)
        logger.info("Starting data seeding...")
        logger.info("=" * 70)
        self.log_configuration()

        try:
            await self.preflight()
        except ConfigurationError as e:
            error_logger.log_error(error=e, category=ErrorCategory.CONFIGURATION_ERROR)
            self._enter(SeedState.ABORTED)
            report.state = self.state
            report.error = str(e)
            return report

        seeder_kwargs = {"rng": self.rng}

        # 1. Clear existing documents
        logger.info("\n[STEP 1] Clearing collections...")
        self._enter(SeedState.CLEARING)
        report.reset = await CollectionResetter(self.store, self.config).clear_all()

        # 2. Agents
        logger.info("\n[STEP 2] Seeding agents...")
        self._enter(SeedState.SEEDING_AGENTS)
        agents = await AgentSeeder(self.store, self.config, **seeder_kwargs).seed()
        report.stages[AgentSeeder.collection_key] = agents

        # 3. Reviews
        logger.info("\n[STEP 3] Seeding reviews...")
        self._enter(SeedState.SEEDING_REVIEWS)
        reviews = await ReviewSeeder(self.store, self.config, **seeder_kwargs).seed()
        report.stages[ReviewSeeder.collection_key] = reviews

        # 4. Gallery images
        logger.info("\n[STEP 4] Seeding galleries...")
        self._enter(SeedState.SEEDING_GALLERIES)
        galleries = await GallerySeeder(self.store, self.config, **seeder_kwargs).seed(
            self.gallery_images
        )
        report.stages[GallerySeeder.collection_key] = galleries

        # 5. Properties, linked to everything above
        logger.info("\n[STEP 5] Seeding properties...")
        self._enter(SeedState.SEEDING_PROPERTIES)
        property_seeder = PropertySeeder(
            self.store, self.config, images=self.property_images, **seeder_kwargs
        )
        report.stages[PropertySeeder.collection_key] = await property_seeder.seed(
            agents=agents.documents,
            reviews=reviews.documents,
            galleries=galleries.documents,
        )

        self._enter(SeedState.DONE)
        report.state = self.state
        self.log_summary(report)
        return report

    def log_summary(self, report: RunReport) -> None:
        logger.info("\n" + "=" * 70)
        logger.info("SEEDING SUMMARY")
        logger.info("=" * 70)

        if report.reset is not None:
            for key, removed in report.reset.removed.items():
                logger.info(f"  cleared {key}: {removed}")
            for key, log_ref in report.reset.failed.items():
                logger.info(f"  cleared {key}: FAILED ({log_ref})")

        for key, stage in report.stages.items():
            logger.info(f"  {key}: {stage.created}/{stage.attempted} created")

        if any(stage.failed for stage in report.stages.values()) or (
            report.reset is not None and report.reset.failed
        ):
            logger.warning("\nSome records failed. Check logs above for details.")
        logger.info("Data seeding completed.")


async def run_all_seeds(settings: Settings | None = None) -> RunReport:
    """
    Run all seeds with configuration taken from settings.

    Settings rejected by validation or missing credentials end the run in
    ABORTED before any remote call, the same way a failed pre-flight does.
    """
    try:
        settings = settings or load_settings()
        async with get_document_store(settings) as store:
            return await SeedOrchestrator(store, SeedConfig.from_settings(settings)).run()
    except ConfigurationError as e:
        error_logger.log_error(error=e, category=ErrorCategory.CONFIGURATION_ERROR)
        return RunReport(state=SeedState.ABORTED, error=str(e))


def main() -> None:
    configure_logging()
    report = asyncio.run(run_all_seeds())
    sys.exit(0 if report.completed else 1)


if __name__ == "__main__":
    main()
