"""CLI command running the catalog walkthrough."""

from __future__ import annotations

import click

from storefront.application.run_demo import RunDemoHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import status_reporter


@click.command("demo")
def demo() -> None:
    """Clone, group and order a few phones."""
    handler = RunDemoHandler(reporter=status_reporter())

    try:
        handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
