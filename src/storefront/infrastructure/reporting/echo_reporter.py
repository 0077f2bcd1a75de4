"""StatusReporter that writes each status line to standard output."""

from __future__ import annotations

import click

from storefront.domain.reporting import StatusReporter


class EchoStatusReporter(StatusReporter):

    def report(self, message: str) -> None:
        click.echo(message)
