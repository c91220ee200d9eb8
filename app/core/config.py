from pathlib import Path
import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins, or "*" for all

    # Credentials are only checked for presence; see app.core.probes
    VAULT_TOKEN: str | None = None
    DIGITALOCEAN_TOKEN: str | None = None

    DIGITALOCEAN_API_URL: str = "https://api.digitalocean.com/v2"
    DIGITALOCEAN_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    DIGITALOCEAN_PAGE_SIZE: int = Field(default=200, ge=1, le=200)

    LIFECYCLE_TAG: str = Field(default="minecraft", min_length=1)

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency; tests swap it out via app.dependency_overrides."""
    return settings
