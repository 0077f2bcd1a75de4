import click

from storefront.infrastructure.cli.catalog_commands import catalog_total
from storefront.infrastructure.cli.demo_commands import demo
from storefront.infrastructure.cli.order_commands import order_process


@click.group()
def cli() -> None:
    """Storefront: prototype, composite and template-method walkthrough"""


@cli.group()
def order() -> None:
    """Process orders."""


@cli.group()
def catalog() -> None:
    """Price groups of items."""


# Register subcommands
cli.add_command(demo)
order.add_command(order_process)
catalog.add_command(catalog_total)
