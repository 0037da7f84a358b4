#!/usr/bin/env python3
"""
Generate synthetic test tickets for seeding the support portal.

Usage:
    python scripts/generate_test_tickets.py [count] [format]

Formats:
    json     - JSON array (default)
    sql      - SQL INSERT statements
    webhook  - Webhook payload format

Tickets go to stdout; the summary and usage banner go to stderr, so output
can be redirected safely:

    python scripts/generate_test_tickets.py 100 sql > test-tickets.sql
"""

import sys

from ticketsmith.cli import err_console, run_generate
from ticketsmith.models.options import GeneratorOptions
from ticketsmith.observability import setup_logging


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    count = args[0] if len(args) > 0 else None
    output_format = args[1] if len(args) > 1 else None

    setup_logging()
    options = GeneratorOptions.from_args(count, output_format)
    run_generate(options, stdout=sys.stdout, diagnostics=err_console, show_usage=not args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
