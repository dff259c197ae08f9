"""
Property Listing Gallery Seeder.

Seeds the galleries collection with one document per gallery image URL.
"""

import logging
from collections.abc import Sequence

from database.seeds.data.assets import GALLERY_IMAGES
from database.seeds.data.common import GalleryData
from database.seeds.seeders.base import BaseSeeder, StageReport

logger = logging.getLogger(__name__)


class GallerySeeder(BaseSeeder):
    """Seeder for gallery images. The record count is the image list length."""

    entity_type = "Gallery"
    stage = "seeding_galleries"
    collection_key = "GALLERY"

    async def seed(self, images: Sequence[str] = GALLERY_IMAGES) -> StageReport:
        """
        Seed one gallery document per image.

        Args:
            images: Image URLs, in creation order

        Returns:
            StageReport with the created gallery documents
        """
        logger.info(f"Seeding {len(images)} gallery images", extra={"stage": self.stage})

        def build(index: int) -> GalleryData:
            return {"image": images[index - 1]}

        return await self.create_many(len(images), build)
