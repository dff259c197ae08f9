"""
Property Listing Property Seeder.

Seeds the properties collection. Every property references documents created
earlier in the same run:
- one agent
- 5 to 7 distinct reviews
- 3 to 8 distinct gallery images

Property images are assigned by index while the index is inside the image
list (checked against len - 1, so position 0 is never assigned directly),
and picked at random past that point.
"""

import logging
import random
from collections.abc import Callable, Sequence
from typing import Any

from database.seeds.data.assets import PROPERTY_IMAGES
from database.seeds.data.common import (
    AREA_RANGE,
    FACILITIES,
    FACILITIES_PER_PROPERTY,
    GALLERY_PER_PROPERTY,
    PRICE_RANGE,
    PROPERTY_TYPES,
    RATING_RANGE,
    REVIEWS_PER_PROPERTY,
    ROOMS_RANGE,
    PropertyData,
)
from database.seeds.seed_utils import random_choice, random_subset
from database.seeds.seeders.base import BaseSeeder, SeedOutcome, StageReport
from shared.appwrite_client import Document

logger = logging.getLogger(__name__)


def image_for_index(
    index: int,
    images: Sequence[str],
    rng: random.Random | None = None,
) -> str:
    """
    Pick the cover image for the property at index.

    Uses images[index] while len(images) - 1 >= index, otherwise a random
    element of images.
    """
    if len(images) - 1 >= index:
        return images[index]
    return random_choice(images, rng)


class PropertySeeder(BaseSeeder):
    """
    Seeder for properties.

    Needs the agents, reviews and gallery documents created by the earlier
    stages; they are only read.
    """

    entity_type = "Property"
    stage = "seeding_properties"
    collection_key = "PROPERTY"

    def __init__(self, *args, images: Sequence[str] = PROPERTY_IMAGES, **kwargs):
        super().__init__(*args, **kwargs)
        self.images = images
        self.agents: Sequence[Document] = ()
        self.reviews: Sequence[Document] = ()
        self.galleries: Sequence[Document] = ()

    def default_delay(self) -> float:
        return self.config.property_delay_seconds

    def build(self, index: int) -> PropertyData:
        """
        Generate the attributes of property index.

        Raises:
            InvalidRangeError: If the earlier stages produced too few agents,
                reviews or gallery images to satisfy the reference counts
        """
        rng = self.rng
        agent = random_choice(self.agents, rng)
        reviews = random_subset(self.reviews, *REVIEWS_PER_PROPERTY, rng=rng)
        galleries = random_subset(self.galleries, *GALLERY_PER_PROPERTY, rng=rng)
        facilities = random_subset(FACILITIES, *FACILITIES_PER_PROPERTY, rng=rng)

        return {
            "name": f"Property {index}",
            "type": random_choice(PROPERTY_TYPES, rng),
            "description": f"This is the description for Property {index}.",
            "address": f"123 Property Street, City {index}",
            "geolocation": f"192.168.1.{index}, 192.168.1.{index}",
            "price": rng.randint(*PRICE_RANGE),
            "area": rng.randint(*AREA_RANGE),
            "bedrooms": rng.randint(*ROOMS_RANGE),
            "bathrooms": rng.randint(*ROOMS_RANGE),
            "rating": rng.randint(*RATING_RANGE),
            "facilities": facilities,
            "image": image_for_index(index, self.images, rng),
            "agent": agent.id,
            "reviews": [review.id for review in reviews],
            "gallery": [gallery.id for gallery in galleries],
        }

    async def create_one(self, index: int, build: Callable[[int], dict[str, Any]]) -> SeedOutcome:
        outcome = await super().create_one(index, build)
        if outcome.ok:
            logger.info(
                f"Seeded property: {outcome.document.get('name', f'Property {index}')}",
                extra=self._log_extra(index),
            )
        return outcome

    async def seed(
        self,
        agents: Sequence[Document],
        reviews: Sequence[Document],
        galleries: Sequence[Document],
        count: int | None = None,
    ) -> StageReport:
        """
        Seed properties linked to the given documents.

        Args:
            agents: Agents created in this run
            reviews: Reviews created in this run
            galleries: Gallery images created in this run
            count: Number of properties (defaults to config.property_count)

        Returns:
            StageReport with the created properties
        """
        count = self.config.property_count if count is None else count
        self.agents = tuple(agents)
        self.reviews = tuple(reviews)
        self.galleries = tuple(galleries)

        logger.info(
            f"Seeding {count} properties from {len(self.agents)} agents, "
            f"{len(self.reviews)} reviews, {len(self.galleries)} gallery images",
            extra={"stage": self.stage},
        )
        return await self.create_many(count, self.build)
