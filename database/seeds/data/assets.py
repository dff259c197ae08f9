"""
Property Listing Seed Data - Static image URLs.

Avatars come from randomuser.me portraits, listing photos from picsum.photos
seeded URLs (stable image per seed string).
"""

AGENT_IMAGES: list[str] = [
    "https://randomuser.me/api/portraits/men/32.jpg",
    "https://randomuser.me/api/portraits/women/44.jpg",
    "https://randomuser.me/api/portraits/men/46.jpg",
    "https://randomuser.me/api/portraits/women/65.jpg",
    "https://randomuser.me/api/portraits/men/75.jpg",
    "https://randomuser.me/api/portraits/women/79.jpg",
]

REVIEW_IMAGES: list[str] = [
    "https://randomuser.me/api/portraits/women/12.jpg",
    "https://randomuser.me/api/portraits/men/15.jpg",
    "https://randomuser.me/api/portraits/women/21.jpg",
    "https://randomuser.me/api/portraits/men/27.jpg",
    "https://randomuser.me/api/portraits/women/33.jpg",
    "https://randomuser.me/api/portraits/men/52.jpg",
    "https://randomuser.me/api/portraits/women/57.jpg",
    "https://randomuser.me/api/portraits/men/68.jpg",
]

# At least GALLERY_PER_PROPERTY[1] entries, properties pick up to 8 of them
GALLERY_IMAGES: list[str] = [
    f"https://picsum.photos/seed/gallery-{n}/800/600" for n in range(1, 13)
]

PROPERTY_IMAGES: list[str] = [
    f"https://picsum.photos/seed/property-{n}/1200/800" for n in range(1, 16)
]
