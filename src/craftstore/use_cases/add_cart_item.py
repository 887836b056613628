"""Add item to cart use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from craftstore.domain.cart import CartLine, validate_quantity
from craftstore.domain.customization import unknown_customization_keys, validate_customizations
from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository, NewCartItem
from craftstore.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddCartItemRequest:
    cart_id: int | str
    product_id: int | str
    quantity: Any = 1
    customizations: Mapping[str, Any] = field(default_factory=dict)


class AddCartItem:
    """
    Put a product, with its customization choices, into a cart.

    Order of checks (nothing is stored unless all pass):
    1. ids, quantity and customization values are well-formed (ValidationError)
    2. the cart exists, then the product exists (NotFoundError)

    Customization keys that don't name a known customization type are
    logged as a warning and stored anyway.
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        catalog_repository: CatalogRepository,
    ) -> None:
        self._carts = cart_repository
        self._catalog = catalog_repository

    def execute(self, request: AddCartItemRequest) -> CartLine:
        """
        Returns:
            The created item joined with its product

        Raises:
            ValidationError: If any input is malformed
            NotFoundError: If the cart or the product doesn't exist
        """
        cart_id = parse_entity_id(request.cart_id, "cart_id")
        product_id = parse_entity_id(request.product_id, "product_id")
        validate_quantity(request.quantity)
        validate_customizations(request.customizations)

        if self._carts.get_cart(cart_id) is None:
            raise NotFoundError(resource="Cart", identifier=cart_id)

        product = self._catalog.get_product(product_id)
        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)

        known_names = [t.name for t in self._catalog.list_customization_types()]
        unknown = unknown_customization_keys(request.customizations, known_names)
        if unknown:
            logger.warning(
                "Unrecognized customization keys",
                extra={"cart_id": cart_id, "product_id": product_id, "keys": unknown},
            )

        item = self._carts.add_item(
            NewCartItem(
                cart_id=cart_id,
                product_id=product_id,
                quantity=request.quantity,
                customizations=dict(request.customizations),
            )
        )

        logger.info(
            "Cart item added",
            extra={"cart_id": cart_id, "cart_item_id": item.id, "quantity": item.quantity},
        )
        return CartLine(item=item, product=product)
