"""
Property Listing Review Seeder.

Seeds the reviews collection. Each property links a handful of reviews.
"""

import logging

from database.seeds.data.assets import REVIEW_IMAGES
from database.seeds.data.common import RATING_RANGE, ReviewData
from database.seeds.seed_utils import random_choice
from database.seeds.seeders.base import BaseSeeder, StageReport

logger = logging.getLogger(__name__)


class ReviewSeeder(BaseSeeder):
    """Seeder for reviews: templated reviewer and text, random rating and avatar."""

    entity_type = "Review"
    stage = "seeding_reviews"
    collection_key = "REVIEWS"

    def build(self, index: int) -> ReviewData:
        return {
            "name": f"Reviewer {index}",
            "avatar": random_choice(REVIEW_IMAGES, self.rng),
            "review": f"This is a review by Reviewer {index}.",
            "rating": self.rng.randint(*RATING_RANGE),
        }

    async def seed(self, count: int | None = None) -> StageReport:
        """
        Seed reviews.

        Args:
            count: Number of reviews (defaults to config.review_count)

        Returns:
            StageReport with the created reviews
        """
        count = self.config.review_count if count is None else count
        logger.info(f"Seeding {count} reviews", extra={"stage": self.stage})
        return await self.create_many(count, self.build)
