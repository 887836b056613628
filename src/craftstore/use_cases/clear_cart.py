from __future__ import annotations

import logging
from dataclasses import dataclass

from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClearCartRequest:
    cart_id: int | str


@dataclass(frozen=True, slots=True)
class ClearCartResponse:
    removed_count: int


class ClearCart:
    """Remove every item from an existing cart. The cart itself is kept."""

    def __init__(self, cart_repository: CartRepository) -> None:
        self._carts = cart_repository

    def execute(self, request: ClearCartRequest) -> ClearCartResponse:
        cart_id = parse_entity_id(request.cart_id, "cart_id")

        if self._carts.get_cart(cart_id) is None:
            raise NotFoundError(resource="Cart", identifier=cart_id)

        removed_count = self._carts.remove_items_for_cart(cart_id)

        logger.info("Cart cleared", extra={"cart_id": cart_id, "removed_count": removed_count})
        return ClearCartResponse(removed_count=removed_count)
