"""Composite pricing tree.

A tree is built from two kinds of node: a ``Leaf`` wrapping a single
product and a ``Group`` holding an ordered list of child components.
Both answer the same questions (total price, description), so callers
never need to know which one they hold.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.exceptions import UnsupportedOperation
from storefront.domain.model.product import Product


class PriceComponent(ABC):

    @abstractmethod
    def add(self, component: PriceComponent) -> None:
        """Append a child component."""

    @abstractmethod
    def remove(self, component: PriceComponent) -> None:
        """Remove a child component."""

    @abstractmethod
    def total_price(self) -> float:
        """Return the price of this component including all descendants."""

    @abstractmethod
    def details(self) -> str:
        """Return a human-readable description."""


class Leaf(PriceComponent):
    """Terminal node wrapping exactly one product."""

    def __init__(self, product: Product) -> None:
        self._product = product

    @property
    def product(self) -> Product:
        return self._product

    def add(self, component: PriceComponent) -> None:
        raise UnsupportedOperation("Cannot add to a leaf")

    def remove(self, component: PriceComponent) -> None:
        raise UnsupportedOperation("Cannot remove from a leaf")

    def total_price(self) -> float:
        return self._product.price

    def details(self) -> str:
        return f"  - {self._product}"

    def __repr__(self) -> str:
        return f"Leaf({self._product!r})"


class Group(PriceComponent):
    """Named node aggregating an ordered sequence of children.

    The total is recomputed on every call, never cached, so it always
    reflects the current children and their current prices.  Each child
    is expected to belong to a single group; cycles are not detected.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._children: list[PriceComponent] = []

    @property
    def children(self) -> tuple[PriceComponent, ...]:
        return tuple(self._children)

    def add(self, component: PriceComponent) -> None:
        self._children.append(component)

    def remove(self, component: PriceComponent) -> None:
        """Remove the first child that *is* ``component``.

        Removing a component that is not a child does nothing.
        """
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                return

    def total_price(self) -> float:
        total = 0.0
        for child in self._children:
            total += child.total_price()
        return total

    def details(self) -> str:
        lines = [f"{self.name} contains:\n"]
        for child in self._children:
            lines.append(child.details() + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Group({self.name!r}, children={len(self._children)})"
