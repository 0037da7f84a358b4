"""
Ticketsmith Observability

Structured logging setup for the command-line tools.
"""

from ticketsmith.observability.structured_logging import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
