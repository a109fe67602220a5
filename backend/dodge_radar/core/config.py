"""Configuration settings for the Dodge Radar backend."""

from __future__ import annotations

from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: Optional[str] = Field(
        default=None,
        description="Riot API key. When missing every upstream call degrades to a synthetic 500.",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default="DodgeRadar/1.0")

    # Data Dragon (static assets, no credential)
    ddragon_base_url: str = Field(default="https://ddragon.leagueoflegends.com")
    ddragon_fallback_version: str = Field(default="15.21.1")

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # CORS Configuration
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    # Status resolution
    high_risk_threshold_minutes: int = Field(default=15, ge=0)

    # Throttling between players of one batch
    status_check_delay_seconds: float = Field(default=2.0, ge=0)
    radar_check_delay_seconds: float = Field(default=0.5, ge=0)
    throttle_policy: Literal["fixed", "token_bucket"] = Field(default="fixed")
    throttle_rate_per_second: float = Field(
        default=0.5,
        gt=0,
        description="Players per second admitted by the token bucket policy",
    )
    throttle_capacity: int = Field(default=1, ge=1)

    @field_validator("riot_api_key")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty and placeholder keys as not configured."""
        if v is None:
            return None
        v = v.strip()
        if not v or v == "your_riot_api_key_here":
            return None
        return v

    @property
    def has_riot_api_key(self) -> bool:
        """Whether a Riot API key is configured."""
        return self.riot_api_key is not None

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
