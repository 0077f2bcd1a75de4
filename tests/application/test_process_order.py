"""Integration tests for the ProcessOrder use case.

Uses an in-memory fake reporter, no console output.
"""

import pytest

from storefront.application.dto import ItemSpec
from storefront.application.process_order import ProcessOrderHandler
from storefront.domain.exceptions import InvalidOrder, ValidationError
from tests.fakes import FakeStatusReporter


def _setup() -> tuple[ProcessOrderHandler, FakeStatusReporter]:
    reporter = FakeStatusReporter()
    return ProcessOrderHandler(reporter), reporter


PHONES = [
    ItemSpec("iPhone 13", "999.99", "A14"),
    ItemSpec("iPhone 13", "949.99", "A14"),
]


class TestProcessOrderHappyPath:

    def test_retail(self):
        handler, reporter = _setup()
        handler.handle("retail", PHONES)
        assert reporter.messages[0] == "Validating retail order..."
        assert reporter.messages[-1] == "Order finalized."

    def test_wholesale(self):
        handler, reporter = _setup()
        handler.handle("wholesale", [*PHONES, ItemSpec("Google Pixel", "699.99", "Tensor")])
        assert reporter.messages[2] == "Applying 15% wholesale discount."

    def test_policy_name_is_case_insensitive(self):
        handler, reporter = _setup()
        handler.handle("Retail", PHONES)
        assert reporter.messages[0] == "Validating retail order..."

    def test_items_without_model(self):
        handler, reporter = _setup()
        handler.handle("retail", [ItemSpec("Cable", "9.5")])
        assert reporter.messages[1] == "Total price: $9.5"


class TestProcessOrderValidation:

    def test_unknown_policy_rejected(self):
        handler, reporter = _setup()
        with pytest.raises(ValidationError, match="Unknown order policy"):
            handler.handle("vip", PHONES)
        assert reporter.messages == []

    def test_invalid_price_rejected_before_output(self):
        handler, reporter = _setup()
        with pytest.raises(ValidationError, match="Invalid price"):
            handler.handle("retail", [ItemSpec("Cable", "cheap")])
        assert reporter.messages == []

    def test_non_finite_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be finite"):
            handler.handle("retail", [ItemSpec("Cable", "inf")])

    def test_blank_name_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            handler.handle("retail", [ItemSpec("  ", "1.0")])

    def test_wholesale_minimum_propagates(self):
        handler, reporter = _setup()
        with pytest.raises(InvalidOrder, match="insufficient items"):
            handler.handle("wholesale", PHONES)
        assert reporter.messages == []

    def test_empty_retail_order_propagates(self):
        handler, _ = _setup()
        with pytest.raises(InvalidOrder, match="empty order"):
            handler.handle("retail", [])
