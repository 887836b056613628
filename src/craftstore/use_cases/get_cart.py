"""Get cart with items use case."""

from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository
from craftstore.ports.catalog_repository import CatalogRepository
from craftstore.use_cases.cart_view import CartView, build_cart_view


@dataclass(frozen=True, slots=True)
class GetCartRequest:
    cart_id: int | str


class GetCart:
    """
    Use case for reading a cart with its items and totals.

    Items whose product no longer resolves are returned with product=None
    and count zero towards the subtotal.

    Raises:
        ValidationError: If cart_id is not a positive integer
        NotFoundError: If the cart doesn't exist
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        catalog_repository: CatalogRepository,
    ) -> None:
        self._carts = cart_repository
        self._catalog = catalog_repository

    def execute(self, request: GetCartRequest) -> CartView:
        cart_id = parse_entity_id(request.cart_id, "cart_id")

        cart = self._carts.get_cart(cart_id)
        if cart is None:
            raise NotFoundError(resource="Cart", identifier=cart_id)

        return build_cart_view(cart, self._carts, self._catalog)
