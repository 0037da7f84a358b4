"""
Generator Options

Command-line input parsed once into an explicit value object with defaults.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ticketsmith.config import settings


LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class OutputFormat(str, Enum):
    """Encodings the generator can emit."""

    JSON = "json"
    SQL = "sql"
    WEBHOOK = "webhook"


# Columns the SQL encoding knows how to render
SQL_COLUMN_CHOICES = (
    "idempotency_key",
    "channel",
    "sender_email",
    "sender_name",
    "subject",
    "body",
    "category",
    "sub_category",
    "status",
    "priority",
    "attachments",
    "is_spam",
    "raw_metadata",
    "created_at",
)


def parse_count(value: str | None, default: int | None = None) -> int:
    """
    Parse a ticket count leniently.

    A leading integer is read and anything after it ignored
    ("12.5" is 12, "5abc" is 5). Missing or non-numeric input yields the
    default; negative counts clamp to 0.
    """
    if default is None:
        default = settings.default_ticket_count
    if value is None:
        return default
    match = LEADING_INTEGER.match(str(value))
    if match is None:
        return default
    return max(int(match.group(1)), 0)


def parse_format(value: str | None, default: str | None = None) -> OutputFormat:
    """Parse an output format, falling back to the default when unrecognized."""
    try:
        fallback = OutputFormat((default or settings.default_output_format).lower())
    except ValueError:
        fallback = OutputFormat.JSON
    if value is None:
        return fallback
    try:
        return OutputFormat(value.strip().lower())
    except ValueError:
        return fallback


class GeneratorOptions(BaseModel):
    """Validated configuration for one generation run."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default_factory=lambda: settings.default_ticket_count, ge=0)
    output_format: OutputFormat = OutputFormat.JSON
    sql_columns: tuple[str, ...] = Field(default_factory=lambda: tuple(settings.sql_columns))
    seed: int | None = None

    @field_validator("sql_columns")
    @classmethod
    def check_sql_columns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject column names the SQL encoding cannot render."""
        if not v:
            raise ValueError("at least one SQL column is required")
        unknown = [column for column in v if column not in SQL_COLUMN_CHOICES]
        if unknown:
            raise ValueError(f"unknown SQL column(s): {', '.join(unknown)}")
        if len(set(v)) != len(v):
            raise ValueError("duplicate SQL columns")
        return v

    @classmethod
    def from_args(
        cls,
        count: str | None = None,
        output_format: str | None = None,
        sql_columns: list[str] | None = None,
        seed: int | None = None,
    ) -> "GeneratorOptions":
        """Build options from raw command-line strings with silent fallbacks."""
        values = {
            "count": parse_count(count),
            "output_format": parse_format(output_format),
            "seed": seed,
        }
        if sql_columns:
            values["sql_columns"] = tuple(sql_columns)
        return cls(**values)
