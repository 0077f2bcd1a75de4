"""Integration tests for the BuildCatalog use case."""

import pytest

from storefront.application.build_catalog import BuildCatalogHandler
from storefront.application.dto import ItemSpec
from storefront.domain.exceptions import ValidationError


class TestBuildCatalog:

    def test_details_and_total(self):
        dto = BuildCatalogHandler().handle("Phones", [
            ItemSpec("iPhone 13", "999.99", "A14"),
            ItemSpec("Case", "19.0"),
        ])
        assert dto.name == "Phones"
        assert dto.item_count == 2
        assert dto.details == (
            "Phones contains:\n"
            "  - iPhone 13 ($999.99), Model: A14\n"
            "  - Case ($19.0)\n"
        )
        assert dto.total == pytest.approx(1018.99)

    def test_empty_catalog(self):
        dto = BuildCatalogHandler().handle("Empty", [])
        assert dto.item_count == 0
        assert dto.total == 0.0

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Catalog name is required"):
            BuildCatalogHandler().handle(" ", [])
