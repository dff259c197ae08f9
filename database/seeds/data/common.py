"""
Property Listing Seed Data - Common Types and Shared Constants.

This module defines TypedDict types for the documents written to each
collection, the enumerations they draw from, and the numeric ranges of the
generated values.
"""

from typing import TypedDict


# =============================================================================
# Type Definitions
# =============================================================================

class AgentData(TypedDict):
    """Agent document attributes."""
    name: str
    email: str
    avatar: str


class ReviewData(TypedDict):
    """Review document attributes."""
    name: str
    avatar: str
    review: str
    rating: int  # 1..5


class GalleryData(TypedDict):
    """Gallery image document attributes."""
    image: str


class PropertyData(TypedDict):
    """Property document attributes. agent/reviews/gallery hold document ids."""
    name: str
    type: str
    description: str
    address: str
    geolocation: str
    price: int
    area: int
    bedrooms: int
    bathrooms: int
    rating: int
    facilities: list[str]
    image: str
    agent: str
    reviews: list[str]
    gallery: list[str]


# =============================================================================
# Enumerations
# =============================================================================

PROPERTY_TYPES: tuple[str, ...] = (
    "House",
    "Townhouse",
    "Condo",
    "Duplex",
    "Studio",
    "Villa",
    "Apartment",
    "other",
)

FACILITIES: tuple[str, ...] = ("Laundry", "Parking", "Gym", "Wifi", "Pet-friendly")


# =============================================================================
# Value Ranges (inclusive)
# =============================================================================

RATING_RANGE = (1, 5)
PRICE_RANGE = (1000, 9999)
AREA_RANGE = (500, 3499)
ROOMS_RANGE = (1, 5)

REVIEWS_PER_PROPERTY = (5, 7)
GALLERY_PER_PROPERTY = (3, 8)
FACILITIES_PER_PROPERTY = (1, len(FACILITIES))
