"""
Property Listing Seed Data Module.

This module contains all seed data definitions separated from seeding logic:
record types, enumerations, value ranges and static image URLs.
"""

from database.seeds.data.common import (
    AgentData,
    ReviewData,
    GalleryData,
    PropertyData,
    PROPERTY_TYPES,
    FACILITIES,
    RATING_RANGE,
    PRICE_RANGE,
    AREA_RANGE,
    ROOMS_RANGE,
    REVIEWS_PER_PROPERTY,
    GALLERY_PER_PROPERTY,
    FACILITIES_PER_PROPERTY,
)
from database.seeds.data.assets import (
    AGENT_IMAGES,
    REVIEW_IMAGES,
    GALLERY_IMAGES,
    PROPERTY_IMAGES,
)

__all__ = [
    # Type definitions
    "AgentData",
    "ReviewData",
    "GalleryData",
    "PropertyData",
    # Enumerations
    "PROPERTY_TYPES",
    "FACILITIES",
    # Ranges
    "RATING_RANGE",
    "PRICE_RANGE",
    "AREA_RANGE",
    "ROOMS_RANGE",
    "REVIEWS_PER_PROPERTY",
    "GALLERY_PER_PROPERTY",
    "FACILITIES_PER_PROPERTY",
    # Assets
    "AGENT_IMAGES",
    "REVIEW_IMAGES",
    "GALLERY_IMAGES",
    "PROPERTY_IMAGES",
]
