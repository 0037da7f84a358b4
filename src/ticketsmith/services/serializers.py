"""
Output Serializers

Renders a generated batch as JSON records, SQL insert statements, or intake
webhook payloads. Exactly one encoding is produced per call.
"""

import json
import random
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import structlog

from ticketsmith.config import DEFAULT_SQL_COLUMNS, settings
from ticketsmith.models.options import SQL_COLUMN_CHOICES, OutputFormat
from ticketsmith.models.ticket import GeneratedTicket

logger = structlog.get_logger(__name__)

# Free-text columns wrapped in dollar quotes instead of single quotes
DOLLAR_QUOTED_COLUMNS = frozenset({"subject", "body"})


def render_json(tickets: Sequence[GeneratedTicket]) -> str:
    """Every ticket field, as an indented JSON array."""
    return json.dumps([ticket.to_record() for ticket in tickets], indent=2, ensure_ascii=False)


def render_webhook(tickets: Sequence[GeneratedTicket]) -> str:
    """Only the fields the submission endpoint reads."""
    payloads = [ticket.to_webhook_payload().model_dump() for ticket in tickets]
    return json.dumps(payloads, indent=2, ensure_ascii=False)


# =============================================================================
# SQL
# =============================================================================


def quote_literal(value: str) -> str:
    """Single-quote a value, doubling embedded quotes."""
    return "'" + value.replace("'", "''") + "'"


def dollar_quote(value: str, index: int, field: str) -> str:
    """
    Wrap free text in a dollar-quoted string tagged by ticket index and field.

    The tag grows until neither the text nor its last character fused with
    the closing delimiter contains it.
    """
    tag = f"TICKET_{index}_{field.upper()}"
    while f"${tag}$" in f"{value}$":
        tag += "_X"
    return f"${tag}${value}${tag}$"


def backdated_timestamp(hours: int) -> str:
    return f"NOW() - INTERVAL '{hours} hours'"


class SQLInsertRenderer:
    """
    Renders tickets as self-contained INSERT statements for psql.

    The column set is configurable; created_at is backdated by a random
    whole number of hours in [0, max_backdate_hours).
    """

    def __init__(
        self,
        columns: Sequence[str] | None = None,
        table: str | None = None,
        max_backdate_hours: int | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.columns = tuple(columns or settings.sql_columns or DEFAULT_SQL_COLUMNS)
        unknown = [column for column in self.columns if column not in SQL_COLUMN_CHOICES]
        if unknown:
            raise ValueError(f"unknown SQL column(s): {', '.join(unknown)}")

        self.table = table or settings.sql_table
        self.max_backdate_hours = (
            max_backdate_hours if max_backdate_hours is not None else settings.max_backdate_hours
        )
        if self.max_backdate_hours < 1:
            raise ValueError("max_backdate_hours must be at least 1")

        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def backdate_hours(self) -> int:
        return self._rng.randrange(self.max_backdate_hours)

    def render_value(self, ticket: GeneratedTicket, index: int, column: str) -> str:
        if column in DOLLAR_QUOTED_COLUMNS:
            return dollar_quote(getattr(ticket, column), index, column)
        if column == "created_at":
            return backdated_timestamp(self.backdate_hours())
        if column == "raw_metadata":
            metadata = json.dumps(ticket.raw_metadata.model_dump(mode="json"))
            return f"{quote_literal(metadata)}::jsonb"
        if column == "attachments":
            return f"{quote_literal(json.dumps(ticket.attachments))}::jsonb"
        if column == "is_spam":
            return "TRUE" if ticket.is_spam else "FALSE"

        value = getattr(ticket, column)
        if hasattr(value, "value"):
            value = value.value
        return quote_literal(str(value))

    def render_statement(self, ticket: GeneratedTicket, index: int) -> str:
        subject = ticket.subject.replace("\r", " ").replace("\n", " ")
        values = ",\n".join(
            f"  {self.render_value(ticket, index, column)}" for column in self.columns
        )
        return (
            f"-- Ticket {index + 1}: {ticket.category} - {subject}\n"
            f"INSERT INTO {self.table} ({', '.join(self.columns)})\n"
            f"VALUES (\n{values}\n);\n"
        )

    def render(self, tickets: Sequence[GeneratedTicket]) -> str:
        header = (
            "-- Generated Test Tickets\n"
            f"-- Generated at: {self._clock().isoformat()}\n"
        )
        statements = [self.render_statement(ticket, index) for index, ticket in enumerate(tickets)]
        return "\n".join([header, *statements])


def render_sql(
    tickets: Sequence[GeneratedTicket],
    columns: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> str:
    """Render INSERT statements with the configured table and columns."""
    return SQLInsertRenderer(columns=columns, rng=rng).render(tickets)


def render(
    tickets: Sequence[GeneratedTicket],
    output_format: OutputFormat,
    sql_columns: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> str:
    """Render a batch in the selected encoding."""
    logger.debug("Rendering batch", format=output_format.value, count=len(tickets))

    if output_format == OutputFormat.SQL:
        return render_sql(tickets, columns=sql_columns, rng=rng)
    if output_format == OutputFormat.WEBHOOK:
        return render_webhook(tickets)
    return render_json(tickets)
