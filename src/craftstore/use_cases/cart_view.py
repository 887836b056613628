from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.cart import Cart, CartItem, CartLine, CartTotals, summarize_cart
from craftstore.ports.cart_repository import CartRepository
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class CartView:
    """A cart with its items joined to products, plus the order summary."""

    cart: Cart
    lines: list[CartLine]
    totals: CartTotals


def join_product(item: CartItem, catalog_repository: CatalogRepository) -> CartLine:
    return CartLine(item=item, product=catalog_repository.get_product(item.product_id))


def build_cart_view(
    cart: Cart,
    cart_repository: CartRepository,
    catalog_repository: CatalogRepository,
) -> CartView:
    lines = [join_product(item, catalog_repository) for item in cart_repository.list_items(cart.id)]
    return CartView(cart=cart, lines=lines, totals=summarize_cart(lines))
