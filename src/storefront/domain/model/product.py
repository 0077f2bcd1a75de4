"""Product prototypes.

Products are cloned rather than rebuilt: a clone starts with the same field
values and is then adjusted independently of its original.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass

from storefront.domain.exceptions import CloneFailure


@dataclass
class Product:
    """A priced item in the catalog.

    The price is a raw float and is not validated; zero and negative
    prices are accepted.
    """

    name: str
    price: float

    def clone(self) -> Product:
        """Return an independent copy of this product.

        A field-by-field copy is enough while every field is an immutable
        value. A subclass that adds mutable state must override this.
        """
        try:
            return copy.copy(self)
        except (TypeError, copy.Error) as exc:
            raise CloneFailure(f"Cloning failed for {self.name!r}") from exc

    def update_price(self, new_price: float) -> None:
        self.price = new_price

    def __str__(self) -> str:
        return f"{self.name} (${self.price})"


@dataclass
class Smartphone(Product):
    model: str

    def __str__(self) -> str:
        return f"{super().__str__()}, Model: {self.model}"
