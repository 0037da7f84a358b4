"""
Ticket Generation Service

Synthesizes individual tickets from the template catalog and orchestrates
batches of them for serialization or submission.
"""

import hashlib
import random
from collections import Counter
from collections.abc import Iterator

import structlog
from pydantic import BaseModel, Field

from ticketsmith.models.ticket import (
    Channel,
    GeneratedTicket,
    TicketMetadata,
    TicketPriority,
    TicketStatus,
)
from ticketsmith.services.catalog import TemplateCatalog, get_catalog
from ticketsmith.services.identity import IdentitySynthesizer

logger = structlog.get_logger(__name__)

KEY_SEPARATOR = "::"
KEY_BODY_PREFIX = 200

CHANNELS: tuple[Channel, ...] = (Channel.EMAIL, Channel.SLACK, Channel.WEB, Channel.API)


def compute_idempotency_key(email: str, subject: str, body: str) -> str:
    """
    Digest used by the receiving system to discard duplicate submissions.

    Only the first 200 characters of the body take part, so trailing edits
    to a long message still collide with the original.
    """
    content = KEY_SEPARATOR.join((email, subject, body[:KEY_BODY_PREFIX]))
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


class TicketSynthesizer:
    """Builds one ticket at a time from a catalog, an identity source and a channel draw."""

    def __init__(
        self,
        catalog: TemplateCatalog | None = None,
        rng: random.Random | None = None,
        identities: IdentitySynthesizer | None = None,
    ):
        self._catalog = catalog or get_catalog()
        self._rng = rng or random.Random()
        self._identities = identities or IdentitySynthesizer(rng=self._rng)

    @property
    def catalog(self) -> TemplateCatalog:
        return self._catalog

    def synthesize(self, index: int) -> GeneratedTicket:
        category = self._rng.choice(self._catalog.categories)
        template = self._rng.choice(self._catalog.templates_for(category))
        identity = self._identities.synthesize()
        channel = self._rng.choice(CHANNELS)

        ticket = GeneratedTicket(
            idempotency_key=compute_idempotency_key(
                identity.email, template.subject, template.body
            ),
            channel=channel,
            sender_email=identity.email,
            sender_name=identity.full_name,
            subject=template.subject,
            body=template.body,
            category=category,
            sub_category=template.sub_category,
            expected_sentiment=template.sentiment,
            expected_intensity=template.intensity,
            status=TicketStatus.NEW,
            priority=TicketPriority.MEDIUM,
            attachments=[],
            is_spam=False,
            raw_metadata=TicketMetadata(source=channel),
        )

        logger.debug(
            "Ticket synthesized",
            index=index,
            category=category,
            channel=channel.value,
            idempotency_key=ticket.idempotency_key[:12],
        )
        return ticket


class BatchSummary(BaseModel):
    """Per-category counts reported to the operator."""

    total: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)


def iter_tickets(count: int, synthesizer: TicketSynthesizer) -> Iterator[GeneratedTicket]:
    """Yield tickets 0..count-1 in generation order."""
    for index in range(count):
        yield synthesizer.synthesize(index)


def generate_batch(
    count: int,
    synthesizer: TicketSynthesizer | None = None,
    seed: int | None = None,
) -> list[GeneratedTicket]:
    """
    Generate a batch of tickets.

    Args:
        count: Number of tickets; non-positive values yield an empty batch
        synthesizer: Ticket source, built from a fresh RNG when omitted
        seed: Seed for the fresh RNG, ignored when a synthesizer is given

    Returns:
        Tickets in generation order, duplicates included
    """
    if synthesizer is None:
        synthesizer = TicketSynthesizer(rng=random.Random(seed))

    tickets = list(iter_tickets(max(count, 0), synthesizer))

    logger.info("Ticket batch generated", count=len(tickets), seed=seed)
    return tickets


def summarize_batch(tickets: list[GeneratedTicket]) -> BatchSummary:
    """Count tickets per category, categories in first-seen order."""
    counts = Counter(ticket.category for ticket in tickets)
    return BatchSummary(total=len(tickets), by_category=dict(counts))
