"""
Ticket Data Models

Templates the generator draws from, the tickets it produces, and the payload
shapes it hands to the intake webhook.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Channel(str, Enum):
    """Medium a ticket arrived through."""

    EMAIL = "email"
    SLACK = "slack"
    WEB = "web"
    API = "api"


class TicketStatus(str, Enum):
    """Ticket lifecycle status as stored by the data service."""

    NEW = "new"
    ANALYZING = "analyzing"
    ANALYZED = "analyzed"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    WAITING_CUSTOMER = "waiting_customer"
    RESOLVED = "resolved"
    CLOSED = "closed"
    SPAM = "spam"


class TicketPriority(str, Enum):
    """Ticket priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TicketTemplate(BaseModel):
    """A hand-authored support inquiry the generator can emit."""

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    sub_category: str
    sentiment: str
    intensity: int = Field(..., ge=1, le=10, description="Emotional severity")


class TicketMetadata(BaseModel):
    """Generation details stored in the ticket's raw_metadata column."""

    model_config = ConfigDict(frozen=True)

    source: Channel
    generated: bool = True
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class GeneratedTicket(BaseModel):
    """A synthetic ticket ready to be serialized or submitted."""

    model_config = ConfigDict(frozen=True)

    idempotency_key: str = Field(..., min_length=64, max_length=64)
    channel: Channel
    sender_email: str
    sender_name: str
    subject: str
    body: str
    category: str
    sub_category: str

    # Carried for downstream validation, never submitted as real fields
    expected_sentiment: str
    expected_intensity: int

    status: TicketStatus = TicketStatus.NEW
    priority: TicketPriority = TicketPriority.MEDIUM
    attachments: list[Any] = Field(default_factory=list)
    is_spam: bool = False
    raw_metadata: TicketMetadata

    def to_record(self) -> dict[str, Any]:
        """Plain JSON-compatible dict with every field."""
        return self.model_dump(mode="json")

    def to_webhook_payload(self) -> "WebhookPayload":
        """Reduce to the fields the submission endpoint expects."""
        return WebhookPayload(
            email=self.sender_email,
            name=self.sender_name,
            subject=self.subject,
            message=self.body,
            source=self.channel.value,
        )


class WebhookPayload(BaseModel):
    """Outbound body of the portal's submission form, minus the category."""

    email: str
    name: str
    subject: str
    message: str
    source: str


class WebhookSubmission(WebhookPayload):
    """Full body POSTed to the intake webhook."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "sarah.garcia@startup.io",
                "name": "Sarah Garcia",
                "subject": "Dashboard not loading",
                "message": "When I try to access my dashboard, I just see a blank white screen.",
                "category": "technical",
                "source": "web_portal",
            }
        }
    )

    category: str


class SubmissionResult(BaseModel):
    """Successful webhook response."""

    model_config = ConfigDict(extra="allow")

    ticket_id: str

    @field_validator("ticket_id", mode="before")
    @classmethod
    def coerce_ticket_id(cls, v: Any) -> Any:
        """Workflows may answer with numeric ids."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
