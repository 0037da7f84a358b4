"""
Ticketsmith Data Models

Pydantic models for templates, generated tickets, webhook payloads and run options.
"""

from ticketsmith.models.options import (
    SQL_COLUMN_CHOICES,
    GeneratorOptions,
    OutputFormat,
)
from ticketsmith.models.ticket import (
    Channel,
    GeneratedTicket,
    SubmissionResult,
    TicketMetadata,
    TicketPriority,
    TicketStatus,
    TicketTemplate,
    WebhookPayload,
    WebhookSubmission,
)

__all__ = [
    # Ticket models
    "Channel",
    "GeneratedTicket",
    "TicketMetadata",
    "TicketPriority",
    "TicketStatus",
    "TicketTemplate",
    # Webhook models
    "WebhookPayload",
    "WebhookSubmission",
    "SubmissionResult",
    # Run options
    "GeneratorOptions",
    "OutputFormat",
    "SQL_COLUMN_CHOICES",
]
