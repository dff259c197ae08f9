"""
Property Listing Seeders Module.

Reusable seeding logic separated from data definitions.
"""

from database.seeds.seeders.base import BaseSeeder, SeedOutcome, StageReport
from database.seeds.seeders.reset import CollectionResetter, ResetReport
from database.seeds.seeders.agent import AgentSeeder
from database.seeds.seeders.review import ReviewSeeder
from database.seeds.seeders.gallery import GallerySeeder
from database.seeds.seeders.property import PropertySeeder, image_for_index

__all__ = [
    "BaseSeeder",
    "SeedOutcome",
    "StageReport",
    "CollectionResetter",
    "ResetReport",
    "AgentSeeder",
    "ReviewSeeder",
    "GallerySeeder",
    "PropertySeeder",
    "image_for_index",
]
