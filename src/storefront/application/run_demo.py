"""Application service: the catalog walkthrough.

Clones a phone, arranges phones into a nested category tree, prices the
tree, then pushes the same phones through a retail and a wholesale order.
"""

from __future__ import annotations

from storefront.domain.model.price_component import Group, Leaf, PriceComponent
from storefront.domain.model.product import Smartphone
from storefront.domain.reporting import StatusReporter
from storefront.domain.service.order_processor import OrderProcessor


class RunDemoHandler:

    def __init__(self, reporter: StatusReporter) -> None:
        self._reporter = reporter

    def handle(self) -> None:
        report = self._reporter.report

        # Prototype
        phone1 = Smartphone("iPhone 13", 999.99, "A14")
        phone2 = phone1.clone()
        phone2.update_price(949.99)
        report(f"Original: {phone1}")
        report(f"Cloned: {phone2}")

        # Composite
        electronics = Group("Electronics")
        phones = Group("Phones")
        phones.add(Leaf(phone1))
        phones.add(Leaf(phone2))
        electronics.add(phones)
        electronics.add(Leaf(Smartphone("Samsung S21", 799.99, "Exynos")))
        report(electronics.details())
        report(f"Total price of Electronics: ${electronics.total_price()}")

        # Template method
        order_items: list[PriceComponent] = [Leaf(phone1), Leaf(phone2)]
        OrderProcessor.retail(self._reporter).process_order(order_items)

        order_items.append(Leaf(Smartphone("Google Pixel", 699.99, "Tensor")))
        OrderProcessor.wholesale(self._reporter).process_order(order_items)
