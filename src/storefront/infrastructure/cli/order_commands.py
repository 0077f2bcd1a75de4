"""CLI commands for order processing."""

from __future__ import annotations

import click

from storefront.application.process_order import POLICIES, ProcessOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import status_reporter
from storefront.infrastructure.cli._items import parse_items


@click.command("process")
@click.option(
    "--policy",
    type=click.Choice(sorted(POLICIES), case_sensitive=False),
    default="retail",
    show_default=True,
    help="Order policy.",
)
@click.option(
    "--item",
    "items",
    multiple=True,
    help="Item as 'Name:Price' or 'Name:Price:Model'. Repeatable.",
)
def order_process(policy: str, items: tuple[str, ...]) -> None:
    """Validate, total, discount and finalize an order."""
    specs = parse_items(items)
    handler = ProcessOrderHandler(reporter=status_reporter())

    try:
        handler.handle(policy=policy, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))
