from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Mapping

from craftstore.domain.catalog import Product
from craftstore.domain.customization import CustomizationValue, format_customizations
from craftstore.domain.errors import ValidationError

FREE_SHIPPING_THRESHOLD = Decimal("100.00")
FLAT_SHIPPING_RATE = Decimal("10.00")
ZERO = Decimal("0.00")


@dataclass(frozen=True, slots=True)
class Cart:
    id: int
    created_at: str  # ISO-8601, UTC
    updated_at: str
    user_id: int | None = None  # None for anonymous carts


@dataclass(frozen=True, slots=True)
class CartItem:
    id: int
    cart_id: int
    product_id: int
    quantity: int
    customizations: Mapping[str, CustomizationValue] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CartLine:
    """A cart item joined with its product (None if the product is gone)."""

    item: CartItem
    product: Product | None

    @property
    def line_total(self) -> Decimal:
        if self.product is None:
            return ZERO
        return self.product.price * self.item.quantity

    @property
    def customization_label(self) -> str:
        return format_customizations(self.item.customizations)


@dataclass(frozen=True, slots=True)
class CartTotals:
    subtotal: Decimal
    item_count: int
    shipping: Decimal
    total: Decimal


def validate_quantity(quantity: Any, field_name: str = "quantity") -> None:
    """
    Raises:
        ValidationError: If quantity is not an integer >= 1
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            errors=[{"field": field_name, "message": "Must be an integer", "code": "INVALID_TYPE"}]
        )
    if quantity < 1:
        raise ValidationError(
            errors=[{"field": field_name, "message": "Must be >= 1", "code": "INVALID_RANGE"}]
        )


def cart_total(lines: Iterable[CartLine]) -> Decimal:
    """Sum of price * quantity; lines without a product contribute nothing."""
    return sum((line.line_total for line in lines), ZERO)


def cart_item_count(lines: Iterable[CartLine]) -> int:
    return sum(line.item.quantity for line in lines)


def shipping_for(subtotal: Decimal, item_count: int) -> Decimal:
    if item_count == 0 or subtotal >= FREE_SHIPPING_THRESHOLD:
        return ZERO
    return FLAT_SHIPPING_RATE


def summarize_cart(lines: Iterable[CartLine]) -> CartTotals:
    """
    Order summary shown on the cart and checkout pages.

    Shipping is free from FREE_SHIPPING_THRESHOLD upwards (inclusive) and
    for an empty cart, otherwise FLAT_SHIPPING_RATE.
    """
    lines = list(lines)
    subtotal = cart_total(lines)
    item_count = cart_item_count(lines)
    shipping = shipping_for(subtotal, item_count)

    return CartTotals(
        subtotal=subtotal,
        item_count=item_count,
        shipping=shipping,
        total=subtotal + shipping,
    )
