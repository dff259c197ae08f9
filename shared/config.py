"""
Configuration module - Central access point for environment variables.

CRITICAL: Access ALL environment variables through this module.
NEVER use os.getenv() directly in application code.
"""

__all__ = [
    "Settings",
    "SeedConfig",
    "get_settings",
    "load_settings",
]

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from shared.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project
    PROJECT_NAME: str = Field(
        default="Property Listing Seed",
        description="Project name displayed in logs"
    )
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(
        default="json",
        description="Log output format: json or text"
    )

    # Appwrite
    APPWRITE_ENDPOINT: str = Field(
        default="https://cloud.appwrite.io/v1",
        description="Appwrite REST endpoint, including the /v1 suffix"
    )
    APPWRITE_PROJECT_ID: str = Field(default="")
    APPWRITE_API_KEY: str = Field(
        default="",
        description="Server API key with documents.read and documents.write scopes"
    )
    APPWRITE_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    APPWRITE_DATABASE_ID: str = Field(default="")
    APPWRITE_AGENTS_COLLECTION_ID: str = Field(default="")
    APPWRITE_REVIEWS_COLLECTION_ID: str = Field(default="")
    APPWRITE_GALLERIES_COLLECTION_ID: str = Field(default="")
    APPWRITE_PROPERTIES_COLLECTION_ID: str = Field(default="")

    # Seeding
    SEED_DELAY_SECONDS: float = Field(
        default=0.2,
        ge=0,
        description="Pause after each create/delete call to stay under the rate limit"
    )
    SEED_PROPERTY_DELAY_SECONDS: float = Field(
        default=0.3,
        ge=0,
        description="Pause after each property creation"
    )
    SEED_AGENT_COUNT: int = Field(default=5, ge=1)
    SEED_REVIEW_COUNT: int = Field(default=20, ge=0)
    SEED_PROPERTY_COUNT: int = Field(default=20, ge=0)
    SEED_RANDOM_SEED: int | None = Field(
        default=None,
        description="Fix the random generator for reproducible runs"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@dataclass(frozen=True)
class SeedConfig:
    """
    Explicit configuration handed to the seeding orchestrator.

    Holds the database and collection identifiers plus the pacing and
    volume knobs, so the seeding code never reads global settings.
    """

    database_id: str
    agents_collection_id: str
    reviews_collection_id: str
    galleries_collection_id: str
    properties_collection_id: str
    delay_seconds: float = 0.2
    property_delay_seconds: float = 0.3
    agent_count: int = 5
    review_count: int = 20
    property_count: int = 20
    random_seed: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SeedConfig":
        settings = settings or load_settings()
        return cls(
            database_id=settings.APPWRITE_DATABASE_ID,
            agents_collection_id=settings.APPWRITE_AGENTS_COLLECTION_ID,
            reviews_collection_id=settings.APPWRITE_REVIEWS_COLLECTION_ID,
            galleries_collection_id=settings.APPWRITE_GALLERIES_COLLECTION_ID,
            properties_collection_id=settings.APPWRITE_PROPERTIES_COLLECTION_ID,
            delay_seconds=settings.SEED_DELAY_SECONDS,
            property_delay_seconds=settings.SEED_PROPERTY_DELAY_SECONDS,
            agent_count=settings.SEED_AGENT_COUNT,
            review_count=settings.SEED_REVIEW_COUNT,
            property_count=settings.SEED_PROPERTY_COUNT,
            random_seed=settings.SEED_RANDOM_SEED,
        )

    @property
    def collections(self) -> dict[str, str]:
        """Collection keys mapped to ids, in clearing order."""
        return {
            "AGENT": self.agents_collection_id,
            "REVIEWS": self.reviews_collection_id,
            "GALLERY": self.galleries_collection_id,
            "PROPERTY": self.properties_collection_id,
        }

    def missing_fields(self) -> list[str]:
        """Names of identifier fields left empty."""
        required = {
            "database_id": self.database_id,
            "agents_collection_id": self.agents_collection_id,
            "reviews_collection_id": self.reviews_collection_id,
            "galleries_collection_id": self.galleries_collection_id,
            "properties_collection_id": self.properties_collection_id,
        }
        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


def load_settings() -> Settings:
    """
    Get settings, reporting rejected environment values as a configuration error.

    Raises:
        ConfigurationError: If a variable fails validation (e.g. SEED_DELAY_SECONDS=-1)
    """
    try:
        return get_settings()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigurationError(f"Invalid settings: {fields or e}") from e
