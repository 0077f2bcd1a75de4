"""Application service: Build Catalog use case."""

from __future__ import annotations

from storefront.application.dto import CatalogDTO, ItemSpec
from storefront.application.item_factory import make_leaves
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.price_component import Group


class BuildCatalogHandler:

    def handle(self, name: str, item_specs: list[ItemSpec]) -> CatalogDTO:
        """Group the given items under *name* and price the group."""
        if not name or not name.strip():
            raise ValidationError("Catalog name is required")

        group = Group(name.strip())
        for leaf in make_leaves(item_specs):
            group.add(leaf)

        return CatalogDTO(
            name=group.name,
            item_count=len(group.children),
            details=group.details(),
            total=group.total_price(),
        )
