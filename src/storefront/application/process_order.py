"""Application service: Process Order use case.

Wraps each requested item in a leaf and hands the order to the workflow
of the requested policy.
"""

from __future__ import annotations

from storefront.application.dto import ItemSpec
from storefront.application.item_factory import make_leaves
from storefront.domain.exceptions import ValidationError
from storefront.domain.reporting import StatusReporter
from storefront.domain.service.order_processor import (
    OrderProcessor,
    RetailOrderProcessor,
    WholesaleOrderProcessor,
)

POLICIES: dict[str, type[OrderProcessor]] = {
    "retail": RetailOrderProcessor,
    "wholesale": WholesaleOrderProcessor,
}


class ProcessOrderHandler:

    def __init__(self, reporter: StatusReporter) -> None:
        self._reporter = reporter

    def handle(self, policy: str, item_specs: list[ItemSpec]) -> None:
        """Run the order workflow for *policy* over the given items.

        Item specs are fully parsed before the workflow starts, so a bad
        price never produces partial output.  InvalidOrder from the
        workflow propagates to the caller.
        """
        processor_cls = POLICIES.get(policy.lower())
        if processor_cls is None:
            raise ValidationError(
                f"Unknown order policy '{policy}' "
                f"(expected one of: {', '.join(sorted(POLICIES))})"
            )

        leaves = make_leaves(item_specs)
        processor_cls(self._reporter).process_order(leaves)
