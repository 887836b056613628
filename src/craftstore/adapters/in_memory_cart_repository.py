from __future__ import annotations

from dataclasses import replace
from itertools import count
from threading import Lock

from craftstore.domain.cart import Cart, CartItem
from craftstore.ports.cart_repository import CartRepository, NewCartItem


class InMemoryCartRepository(CartRepository):
    """
    Canonical contract implementation for carts.

    - Carts and items live in insertion-ordered dicts keyed by id
    - The lock only protects id assignment and map writes; two requests
      updating the same item still race (last write wins)
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._carts: dict[int, Cart] = {}
        self._items: dict[int, CartItem] = {}
        self._cart_ids = count(1)
        self._item_ids = count(1)

    def create_cart(self, user_id: int | None, created_at: str) -> Cart:
        with self._lock:
            cart = Cart(
                id=next(self._cart_ids),
                user_id=user_id,
                created_at=created_at,
                updated_at=created_at,
            )
            self._carts[cart.id] = cart
        return cart

    def get_cart(self, cart_id: int) -> Cart | None:
        return self._carts.get(cart_id)

    def get_cart_by_user(self, user_id: int) -> Cart | None:
        return next((cart for cart in self._carts.values() if cart.user_id == user_id), None)

    def list_items(self, cart_id: int) -> list[CartItem]:
        return [item for item in self._items.values() if item.cart_id == cart_id]

    def get_item(self, item_id: int) -> CartItem | None:
        return self._items.get(item_id)

    def add_item(self, data: NewCartItem) -> CartItem:
        with self._lock:
            item = CartItem(
                id=next(self._item_ids),
                cart_id=data.cart_id,
                product_id=data.product_id,
                quantity=data.quantity,
                customizations=dict(data.customizations),
            )
            self._items[item.id] = item
        return item

    def update_item_quantity(self, item_id: int, quantity: int) -> CartItem | None:
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                return None
            updated = replace(item, quantity=quantity)
            self._items[item_id] = updated
        return updated

    def remove_item(self, item_id: int) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def remove_items_for_cart(self, cart_id: int) -> int:
        with self._lock:
            doomed = [item_id for item_id, item in self._items.items() if item.cart_id == cart_id]
            for item_id in doomed:
                del self._items[item_id]
        return len(doomed)
