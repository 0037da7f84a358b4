"""
Ticketsmith Services

Template catalog, identity and ticket synthesis, output serializers and the
intake webhook client.
"""

from ticketsmith.services.catalog import TemplateCatalog, get_catalog
from ticketsmith.services.generator import (
    BatchSummary,
    TicketSynthesizer,
    compute_idempotency_key,
    generate_batch,
    summarize_batch,
)
from ticketsmith.services.identity import Identity, IdentitySynthesizer
from ticketsmith.services.serializers import SQLInsertRenderer, render

# The webhook client pulls in httpx; import it directly:
# from ticketsmith.services.webhook import WebhookClient

__all__ = [
    "TemplateCatalog",
    "get_catalog",
    "Identity",
    "IdentitySynthesizer",
    "TicketSynthesizer",
    "BatchSummary",
    "compute_idempotency_key",
    "generate_batch",
    "summarize_batch",
    "SQLInsertRenderer",
    "render",
]
