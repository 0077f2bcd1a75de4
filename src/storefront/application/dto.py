"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: one item as given by the user (price still unparsed)."""

    name: str
    price: str
    model: str | None = None


@dataclass(frozen=True)
class CatalogDTO:
    """Output: a priced group as displayed to the user."""

    name: str
    item_count: int
    details: str
    total: float
