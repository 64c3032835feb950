"""CLI command for the vehicle rental demo."""

from __future__ import annotations

import click

from polydemo.application.quote_fleet import QuoteFleetHandler
from polydemo.infrastructure.bootstrap import DEFAULT_RENTAL_DAYS, demo_fleet


@click.command("rental")
@click.option(
    "--days",
    default=DEFAULT_RENTAL_DAYS,
    show_default=True,
    type=int,
    help="Number of rental days to quote.",
)
def rental(days: int) -> None:
    """Display each demo vehicle and its rental cost."""
    handler = QuoteFleetHandler(demo_fleet())

    for quote in handler.handle(days):
        for line in quote.lines:
            click.echo(line)
        click.echo(quote.cost_line)
