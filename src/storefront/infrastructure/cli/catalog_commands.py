"""CLI commands for the catalog tree."""

from __future__ import annotations

import click

from storefront.application.build_catalog import BuildCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli._items import parse_items


@click.command("total")
@click.option("--name", default="Catalog", show_default=True, help="Group name.")
@click.option(
    "--item",
    "items",
    multiple=True,
    help="Item as 'Name:Price' or 'Name:Price:Model'. Repeatable.",
)
def catalog_total(name: str, items: tuple[str, ...]) -> None:
    """Show a group of items and its total price."""
    specs = parse_items(items)
    handler = BuildCatalogHandler()

    try:
        dto = handler.handle(name=name, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.details, nl=False)
    click.echo(f"Total price of {dto.name}: ${dto.total}")
