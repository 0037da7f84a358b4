"""
Ticketsmith - Synthetic Support Ticket Generator

Fabricates plausible customer-support tickets with deterministic idempotency keys
for seeding the support portal's database and exercising its intake webhook.
"""

__version__ = "0.1.0"
__author__ = "Ticketsmith Team"

from ticketsmith.config import settings

__all__ = ["settings", "__version__"]
