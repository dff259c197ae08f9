"""
Property Listing Seed - Database Seed Scripts.

Architecture:
- data/: Seed data definitions (types, enumerations, ranges, image URLs)
- seeders/: Reusable seeding logic (reset, one seeder per collection)
- run_all_seeds: Orchestrates the clear-then-create run

Run all seeds:
    python -m database.seeds.run_all_seeds

Adding a new collection:
    1. Add its id to Settings and SeedConfig.collections
    2. Create a seeder deriving from BaseSeeder with collection_key set
    3. Call it from SeedOrchestrator.run() after the stages it references
"""

from database.seeds.run_all_seeds import (
    RunReport,
    SeedOrchestrator,
    SeedState,
    run_all_seeds,
)

__all__ = [
    "RunReport",
    "SeedOrchestrator",
    "SeedState",
    "run_all_seeds",
]
