from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from craftstore.domain.cart import CartLine, validate_quantity
from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository
from craftstore.ports.catalog_repository import CatalogRepository
from craftstore.use_cases.cart_view import join_product

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateCartItemQuantityRequest:
    cart_item_id: int | str
    quantity: Any


class UpdateCartItemQuantity:
    """
    Replace the quantity of an existing cart item.

    The owning cart is not re-validated.

    Raises:
        ValidationError: If the id or quantity is malformed
        NotFoundError: If the cart item doesn't exist
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        catalog_repository: CatalogRepository,
    ) -> None:
        self._carts = cart_repository
        self._catalog = catalog_repository

    def execute(self, request: UpdateCartItemQuantityRequest) -> CartLine:
        cart_item_id = parse_entity_id(request.cart_item_id, "cart_item_id")
        validate_quantity(request.quantity)

        item = self._carts.update_item_quantity(cart_item_id, request.quantity)
        if item is None:
            raise NotFoundError(resource="CartItem", identifier=cart_item_id)

        logger.info(
            "Cart item quantity updated",
            extra={"cart_item_id": cart_item_id, "quantity": item.quantity},
        )
        return join_product(item, self._catalog)
