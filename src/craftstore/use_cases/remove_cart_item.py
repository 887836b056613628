from __future__ import annotations

import logging
from dataclasses import dataclass

from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemoveCartItemRequest:
    cart_item_id: int | str


@dataclass(frozen=True, slots=True)
class RemoveCartItemResponse:
    removed: bool  # False when there was no such item


class RemoveCartItem:
    """Delete a cart item. Removing the same id twice reports False the second time."""

    def __init__(self, cart_repository: CartRepository) -> None:
        self._carts = cart_repository

    def execute(self, request: RemoveCartItemRequest) -> RemoveCartItemResponse:
        cart_item_id = parse_entity_id(request.cart_item_id, "cart_item_id")

        removed = self._carts.remove_item(cart_item_id)

        logger.info("Cart item removal", extra={"cart_item_id": cart_item_id, "removed": removed})
        return RemoveCartItemResponse(removed=removed)
