"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority)
2. Google Cloud Secret Manager (for secrets like OPENAI_API_KEY)
3. .env file (for local development fallback)
"""

import os
from functools import lru_cache
from typing import Any

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_secret_value(key: str) -> str | None:
    """Lazy import to avoid circular dependency."""
    # Only try Secret Manager if we have a project ID
    project_id = os.environ.get("GOOGLE_PROJECT_ID")
    if not project_id:
        return None

    try:
        from src.secret_manager import get_app_secret

        return get_app_secret(key)
    except Exception:
        return None


class Settings(BaseSettings):
    """Application settings with Secret Manager integration.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. Secret Manager (for sensitive values)
    3. .env file (local development fallback)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = "dev"
    log_level: str = "INFO"

    # Language model
    openai_api_key: str = ""
    llm_model: str = "gpt-4"
    llm_temperature: float | None = None

    # Database holding the project_folders table
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "postgres"
    db_user: str = "postgres"
    db_password: str = ""

    # Streamlit page
    api_url: str = "http://localhost:8000"
    my_email: str | None = None
    words_remaining: int = 10000
    total_words: int = 10000

    @model_validator(mode="before")
    @classmethod
    def load_secrets_from_secret_manager(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Load secret values from Secret Manager if not already set.

        Environment variables and .env values always win over Secret Manager.
        """
        secret_fields = ["openai_api_key", "db_password"]

        for field in secret_fields:
            if data.get(field) or os.environ.get(field.upper()):
                continue

            value = _get_secret_value(field)
            if value:
                data[field] = value

        return data

    @property
    def db_connection_string(self) -> str:
        """PostgreSQL connection string (supports Unix socket hosts)."""
        if self.db_host.startswith("/"):
            return (
                f"postgresql://{self.db_user}:{self.db_password}"
                f"@/{self.db_name}?host={self.db_host}"
            )
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()
