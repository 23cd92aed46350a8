"""Configuration settings for the Elo API application."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    db_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the postgres_* components",
    )
    postgres_db: str = Field(default="elo_api_db")
    postgres_user: str = Field(default="elo_api_user")
    postgres_password: str = Field(default="dev_password")
    postgres_host: str = Field(default="postgres")
    postgres_port: int = Field(default=5432)
    create_tables_on_startup: bool = Field(default=True)

    @property
    def database_url(self) -> str:
        """Async database URL, either explicit or composed from components."""
        if self.db_url:
            for scheme in ("postgresql://", "postgres://"):
                if self.db_url.startswith(scheme):
                    return "postgresql+asyncpg://" + self.db_url[len(scheme) :]
            return self.db_url
        return f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    port: int = Field(default=3000)

    # Riot API Configuration
    riot_api_key: str = Field(default="", description="Riot developer API key")
    default_shard: str = Field(default="br1")
    riot_request_timeout: float = Field(default=10.0, gt=0)
    riot_max_retries: int = Field(default=0, ge=0)

    # Cache Configuration
    account_cache_ttl: int = Field(default=3600, gt=0)
    rank_cache_ttl: int = Field(default=60, gt=0)
    cache_reads_enabled: bool = Field(default=True)

    # Aggregation
    rank_lookup_concurrency: int = Field(default=5, ge=1)

    @field_validator("default_shard")
    @classmethod
    def normalize_shard(cls, v: str) -> str:
        """Shard codes are matched lower-case everywhere."""
        return v.strip().lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
