from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping

from craftstore.domain.cart import Cart, CartItem
from craftstore.domain.customization import CustomizationValue


@dataclass(frozen=True, slots=True)
class NewCartItem:
    cart_id: int
    product_id: int
    quantity: int = 1
    customizations: Mapping[str, CustomizationValue] = field(default_factory=dict)


class CartRepository(ABC):
    """
    Port for cart and cart item storage.

    Contract (Preconditions):
        - Inputs are validated by the calling use case, including the
          existence of the referenced cart and product on add_item
        - Implementations trust inputs and do not re-validate
        - A cart's items are the CartItems whose cart_id matches, in id order
        - Deleting an item is permanent; carts are never deleted
    """

    @abstractmethod
    def create_cart(self, user_id: int | None, created_at: str) -> Cart:
        """Create a cart whose created_at and updated_at are both `created_at`."""
        ...

    @abstractmethod
    def get_cart(self, cart_id: int) -> Cart | None: ...

    @abstractmethod
    def get_cart_by_user(self, user_id: int) -> Cart | None:
        """First cart (lowest id) owned by the user, if any."""
        ...

    @abstractmethod
    def list_items(self, cart_id: int) -> list[CartItem]: ...

    @abstractmethod
    def get_item(self, item_id: int) -> CartItem | None: ...

    @abstractmethod
    def add_item(self, data: NewCartItem) -> CartItem: ...

    @abstractmethod
    def update_item_quantity(self, item_id: int, quantity: int) -> CartItem | None:
        """Returns the updated item, or None when no item has that id."""
        ...

    @abstractmethod
    def remove_item(self, item_id: int) -> bool:
        """Returns True when an item was deleted, False when none existed."""
        ...

    @abstractmethod
    def remove_items_for_cart(self, cart_id: int) -> int:
        """Delete every item of the cart; returns how many were deleted."""
        ...
