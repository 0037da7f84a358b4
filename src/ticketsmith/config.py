"""
Ticketsmith Configuration

Centralized configuration management using Pydantic Settings.
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SQL_COLUMNS = [
    "idempotency_key",
    "channel",
    "sender_email",
    "sender_name",
    "subject",
    "body",
    "status",
    "priority",
    "raw_metadata",
    "created_at",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Ticketsmith"
    app_version: str = "0.1.0"
    debug: bool = False

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug(cls, v: Any) -> bool:
        """Parse debug value, handling non-boolean strings."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "on")
        return bool(v)

    log_level: str = "INFO"
    log_json: bool = False
    environment: str = "development"

    # Generation defaults
    default_ticket_count: int = 20
    default_output_format: str = "json"

    # SQL encoding
    sql_table: str = "tickets"
    sql_columns: Annotated[list[str], NoDecode] = list(DEFAULT_SQL_COLUMNS)
    max_backdate_hours: int = 48

    @field_validator("sql_columns", mode="before")
    @classmethod
    def parse_sql_columns(cls, v: Any) -> list[str]:
        """Accept a comma-separated column list from the environment."""
        if isinstance(v, str):
            return [column.strip() for column in v.split(",") if column.strip()]
        return v

    # Intake webhook (the workflow engine behind the submission form)
    webhook_url: str = ""
    webhook_timeout: float = 30.0
    webhook_source: str = "web_portal"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
