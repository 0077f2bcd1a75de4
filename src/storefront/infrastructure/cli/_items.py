"""Parsing of ``--item`` option values shared by several commands."""

from __future__ import annotations

import click

from storefront.application.dto import ItemSpec


def parse_items(raw_items: tuple[str, ...]) -> list[ItemSpec]:
    """Parse 'Name:Price[:Model]' values into ItemSpec list."""
    specs: list[ItemSpec] = []
    for raw in raw_items:
        parts = [part.strip() for part in raw.split(":")]
        if len(parts) not in (2, 3) or not parts[0]:
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'Name:Price' or 'Name:Price:Model'.",
                param_hint="--item",
            )
        model = parts[2] if len(parts) == 3 and parts[2] else None
        specs.append(ItemSpec(name=parts[0], price=parts[1], model=model))
    return specs
