"""
Ticketsmith CLI

Command-line interface for generating and submitting synthetic tickets.
"""

import asyncio
import random
import sys
from typing import Optional, TextIO

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ticketsmith.config import settings
from ticketsmith.models.options import SQL_COLUMN_CHOICES, GeneratorOptions
from ticketsmith.models.ticket import GeneratedTicket
from ticketsmith.observability import setup_logging
from ticketsmith.services.generator import (
    BatchSummary,
    TicketSynthesizer,
    generate_batch,
    summarize_batch,
)
from ticketsmith.services.serializers import render

app = typer.Typer(
    name="ticketsmith",
    help="Ticketsmith - Synthetic Support Ticket Generator",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

USAGE_BANNER = """\
[bold]Usage:[/bold]
  ticketsmith generate \\[count] \\[format]
  python scripts/generate_test_tickets.py \\[count] \\[format]

[bold]Formats:[/bold]
  json     - JSON array (default)
  sql      - SQL INSERT statements
  webhook  - Webhook payload format

[bold]Examples:[/bold]
  ticketsmith generate 50
  ticketsmith generate 100 sql > test-tickets.sql
  ticketsmith generate 10 webhook"""


@app.callback()
def main():
    """Configure logging before any command runs."""
    setup_logging()


def print_summary(summary: BatchSummary, out: Console) -> None:
    out.print("[bold]Summary:[/bold]")
    out.print(f"Total tickets: {summary.total}")
    for category, count in summary.by_category.items():
        out.print(f"  {category}: {count}")
    out.print()


def print_usage(out: Console) -> None:
    out.print(Panel(USAGE_BANNER, border_style="dim", expand=False))


def run_generate(
    options: GeneratorOptions,
    stdout: TextIO,
    diagnostics: Console,
    show_usage: bool = False,
) -> list[GeneratedTicket]:
    """
    Generate a batch and write it out.

    The summary (and usage banner, if requested) goes to the diagnostics
    console; only the rendered batch is written to stdout.
    """
    rng = random.Random(options.seed)
    synthesizer = TicketSynthesizer(rng=rng)

    diagnostics.print(f"Generating {options.count} test tickets...")
    tickets = generate_batch(options.count, synthesizer=synthesizer, seed=options.seed)
    print_summary(summarize_batch(tickets), diagnostics)

    output = render(
        tickets,
        options.output_format,
        sql_columns=options.sql_columns,
        rng=rng,
    )
    stdout.write(output)
    stdout.write("\n")
    stdout.flush()

    if show_usage:
        print_usage(diagnostics)

    return tickets


@app.command()
def generate(
    count: Optional[str] = typer.Argument(None, help="Number of tickets (default 20)"),
    output_format: Optional[str] = typer.Argument(
        None, metavar="[FORMAT]", help="json, sql or webhook (default json)"
    ),
    columns: Optional[str] = typer.Option(
        None,
        "--columns",
        help=f"Comma-separated SQL columns, from: {', '.join(SQL_COLUMN_CHOICES)}",
    ),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible batch"),
):
    """Generate synthetic tickets and print them to stdout."""
    sql_columns = [c.strip() for c in columns.split(",") if c.strip()] if columns else None

    try:
        options = GeneratorOptions.from_args(
            count, output_format, sql_columns=sql_columns, seed=seed
        )
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"], param_hint="--columns") from e

    run_generate(
        options,
        stdout=sys.stdout,
        diagnostics=err_console,
        show_usage=all(arg is None for arg in (count, output_format, columns, seed)),
    )


@app.command()
def submit(
    count: Optional[str] = typer.Argument(None, help="Number of tickets (default 20)"),
    url: Optional[str] = typer.Option(None, help="Intake webhook URL (default WEBHOOK_URL)"),
    timeout: Optional[float] = typer.Option(None, help="Per-request timeout in seconds"),
    use_channel: bool = typer.Option(
        False, help="Send each ticket's channel as its source instead of the form's"
    ),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible batch"),
):
    """Generate tickets and POST them to the intake webhook."""
    from ticketsmith.services.webhook import WebhookClient

    webhook_url = url or settings.webhook_url
    if not webhook_url.strip():
        err_console.print("[bold red]No webhook URL configured.[/bold red] Pass --url or set WEBHOOK_URL.")
        raise typer.Exit(code=2)

    try:
        options = GeneratorOptions.from_args(count, seed=seed)
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"], param_hint="SQL_COLUMNS") from e
    tickets = generate_batch(options.count, seed=options.seed)

    async def run_submission():
        async with WebhookClient(
            url=webhook_url, timeout=timeout, use_ticket_channel=use_channel
        ) as client:
            return await client.submit_batch(tickets)

    err_console.print(f"Submitting {len(tickets)} tickets to {webhook_url}...")
    report = asyncio.run(run_submission())

    table = Table(title="Webhook Submission")
    table.add_column("#", style="dim")
    table.add_column("Idempotency Key", style="cyan")
    table.add_column("Result")

    for item in report.submitted:
        table.add_row(str(item.index + 1), item.idempotency_key[:12], f"[green]{item.ticket_id}[/green]")
    for item in report.failed:
        table.add_row(str(item.index + 1), item.idempotency_key[:12], f"[red]{escape(item.error)}[/red]")

    err_console.print(table)
    err_console.print(
        f"Submitted: [green]{len(report.submitted)}[/green]  Failed: [red]{len(report.failed)}[/red]"
    )

    if not report.all_succeeded:
        raise typer.Exit(code=1)


@app.command()
def categories():
    """Show the built-in ticket templates."""
    from ticketsmith.services.catalog import get_catalog

    catalog = get_catalog()

    table = Table(title="Ticket Templates")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Sub-category", style="magenta", no_wrap=True)
    table.add_column("Sentiment")
    table.add_column("Intensity", justify="right")
    table.add_column("Subject", style="green")

    for category in catalog.categories:
        for template in catalog.templates_for(category):
            table.add_row(
                category,
                template.sub_category,
                template.sentiment,
                str(template.intensity),
                template.subject,
            )

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from ticketsmith import __version__

    console.print(f"Ticketsmith v{__version__}")


if __name__ == "__main__":
    app()
