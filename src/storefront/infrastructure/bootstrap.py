"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.reporting.echo_reporter import EchoStatusReporter


def status_reporter() -> EchoStatusReporter:
    return EchoStatusReporter()
