"""Domain service: order processing workflow.

Every order goes through the same four steps, in the same order:

  1. validate: policy hook, may reject the order
  2. compute total: sum of every item's total price
  3. apply discount: policy hook, reports the discount
  4. finalize

Policies only decide *how* to validate and *which* discount applies;
they cannot reorder or skip steps.  The discount is reported, not
deducted from the total.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from storefront.domain.exceptions import InvalidOrder
from storefront.domain.model.price_component import PriceComponent
from storefront.domain.reporting import StatusReporter

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
RETAIL_DISCOUNT_PERCENT = 5
WHOLESALE_DISCOUNT_PERCENT = 15
MIN_WHOLESALE_ITEMS = 3


class OrderPolicy(ABC):
    """Validation and discount hooks for one kind of order."""

    name: str

    @abstractmethod
    def validate(self, items: Sequence[PriceComponent]) -> None:
        """Raise InvalidOrder if the items are not acceptable."""

    @abstractmethod
    def discount_message(self) -> str:
        """Describe the discount granted by this policy."""

    def progress_message(self) -> str:
        return f"Validating {self.name} order..."


class RetailPolicy(OrderPolicy):

    name = "retail"

    def validate(self, items: Sequence[PriceComponent]) -> None:
        if not items:
            raise InvalidOrder(
                "empty order: a retail order must contain at least one item"
            )

    def discount_message(self) -> str:
        return f"Applying {RETAIL_DISCOUNT_PERCENT}% retail discount."


class WholesalePolicy(OrderPolicy):

    name = "wholesale"

    def validate(self, items: Sequence[PriceComponent]) -> None:
        if len(items) < MIN_WHOLESALE_ITEMS:
            raise InvalidOrder(
                f"insufficient items: a wholesale order must contain at least "
                f"{MIN_WHOLESALE_ITEMS} items, got {len(items)}"
            )

    def discount_message(self) -> str:
        return f"Applying {WHOLESALE_DISCOUNT_PERCENT}% wholesale discount."


class OrderProcessor:
    """Runs the fixed order workflow under a given policy.

    Holds no per-order state, so one instance can process any number of
    orders.
    """

    def __init__(self, policy: OrderPolicy, reporter: StatusReporter) -> None:
        self._policy = policy
        self._reporter = reporter

    @property
    def policy(self) -> OrderPolicy:
        return self._policy

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def retail(reporter: StatusReporter) -> OrderProcessor:
        return RetailOrderProcessor(reporter)

    @staticmethod
    def wholesale(reporter: StatusReporter) -> OrderProcessor:
        return WholesaleOrderProcessor(reporter)

    # --- Workflow -------------------------------------------------------------

    def process_order(self, items: Sequence[PriceComponent]) -> None:
        """Validate, total, discount and finalize an order.

        Raises InvalidOrder before anything is reported when the policy
        rejects the items.
        """
        self.validate(items)
        self.compute_total(items)
        self.apply_discount()
        self.finalize()

    def validate(self, items: Sequence[PriceComponent]) -> None:
        self._policy.validate(items)
        self._reporter.report(self._policy.progress_message())

    def compute_total(self, items: Sequence[PriceComponent]) -> float:
        total = 0.0
        for item in items:
            total += item.total_price()
        self._reporter.report(f"Total price: ${total}")
        return total

    def apply_discount(self) -> None:
        self._reporter.report(self._policy.discount_message())

    def finalize(self) -> None:
        self._reporter.report("Order finalized.")


class RetailOrderProcessor(OrderProcessor):

    def __init__(self, reporter: StatusReporter) -> None:
        super().__init__(RetailPolicy(), reporter)


class WholesaleOrderProcessor(OrderProcessor):

    def __init__(self, reporter: StatusReporter) -> None:
        super().__init__(WholesalePolicy(), reporter)
