"""
Property Listing Agent Seeder.

Seeds the agents collection. Properties reference exactly one agent each.
"""

import logging

from database.seeds.data.assets import AGENT_IMAGES
from database.seeds.data.common import AgentData
from database.seeds.seed_utils import random_choice
from database.seeds.seeders.base import BaseSeeder, StageReport

logger = logging.getLogger(__name__)


class AgentSeeder(BaseSeeder):
    """Seeder for agents: templated name and email, random avatar."""

    entity_type = "Agent"
    stage = "seeding_agents"
    collection_key = "AGENT"

    def build(self, index: int) -> AgentData:
        return {
            "name": f"Agent {index}",
            "email": f"agent{index}@example.com",
            "avatar": random_choice(AGENT_IMAGES, self.rng),
        }

    async def seed(self, count: int | None = None) -> StageReport:
        """
        Seed agents.

        Args:
            count: Number of agents (defaults to config.agent_count)

        Returns:
            StageReport with the created agents
        """
        count = self.config.agent_count if count is None else count
        logger.info(f"Seeding {count} agents", extra={"stage": self.stage})
        return await self.create_many(count, self.build)
