"""Turns user-supplied item specs into catalog leaves."""

from __future__ import annotations

import math

from storefront.application.dto import ItemSpec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.price_component import Leaf
from storefront.domain.model.product import Product, Smartphone


def parse_price(raw: str) -> float:
    try:
        price = float(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid price: {raw!r}") from exc
    if not math.isfinite(price):
        raise ValidationError(f"Price must be finite, got {raw!r}")
    return price


def make_product(spec: ItemSpec) -> Product:
    if not spec.name or not spec.name.strip():
        raise ValidationError("Item name is required")
    price = parse_price(spec.price)
    if spec.model:
        return Smartphone(name=spec.name.strip(), price=price, model=spec.model)
    return Product(name=spec.name.strip(), price=price)


def make_leaves(specs: list[ItemSpec]) -> list[Leaf]:
    return [Leaf(make_product(spec)) for spec in specs]
