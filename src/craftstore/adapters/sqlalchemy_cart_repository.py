"""SQLAlchemy implementation of CartRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from craftstore.adapters.sqlalchemy_errors import translate_store_errors
from craftstore.domain.cart import Cart, CartItem
from craftstore.infra.db.models.cart import CartItemRow, CartRow
from craftstore.ports.cart_repository import CartRepository, NewCartItem


class SqlAlchemyCartRepository(CartRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def create_cart(self, user_id: int | None, created_at: str) -> Cart:
        with translate_store_errors("create_cart"):
            row = CartRow(user_id=user_id, created_at=created_at, updated_at=created_at)
            self._session.add(row)
            self._session.flush()
            return self._cart_to_domain(row)

    def get_cart(self, cart_id: int) -> Cart | None:
        with translate_store_errors("get_cart"):
            row = self._session.get(CartRow, cart_id)
            return self._cart_to_domain(row) if row else None

    def get_cart_by_user(self, user_id: int) -> Cart | None:
        with translate_store_errors("get_cart_by_user"):
            query = select(CartRow).where(CartRow.user_id == user_id).order_by(CartRow.id).limit(1)
            row = self._session.execute(query).scalar_one_or_none()
            return self._cart_to_domain(row) if row else None

    def list_items(self, cart_id: int) -> list[CartItem]:
        with translate_store_errors("list_items"):
            query = select(CartItemRow).where(CartItemRow.cart_id == cart_id).order_by(CartItemRow.id)
            return [self._item_to_domain(row) for row in self._session.execute(query).scalars()]

    def get_item(self, item_id: int) -> CartItem | None:
        with translate_store_errors("get_item"):
            row = self._session.get(CartItemRow, item_id)
            return self._item_to_domain(row) if row else None

    def add_item(self, data: NewCartItem) -> CartItem:
        with translate_store_errors("add_item"):
            row = CartItemRow(
                cart_id=data.cart_id,
                product_id=data.product_id,
                quantity=data.quantity,
                customizations=dict(data.customizations),
            )
            self._session.add(row)
            self._session.flush()
            return self._item_to_domain(row)

    def update_item_quantity(self, item_id: int, quantity: int) -> CartItem | None:
        with translate_store_errors("update_item_quantity"):
            row = self._session.get(CartItemRow, item_id)
            if row is None:
                return None
            row.quantity = quantity
            self._session.flush()
            return self._item_to_domain(row)

    def remove_item(self, item_id: int) -> bool:
        with translate_store_errors("remove_item"):
            row = self._session.get(CartItemRow, item_id)
            if row is None:
                return False
            self._session.delete(row)
            self._session.flush()
            return True

    def remove_items_for_cart(self, cart_id: int) -> int:
        with translate_store_errors("remove_items_for_cart"):
            result = self._session.execute(
                delete(CartItemRow).where(CartItemRow.cart_id == cart_id)
            )
            return result.rowcount or 0

    def _cart_to_domain(self, row: CartRow) -> Cart:
        return Cart(
            id=row.id,
            user_id=row.user_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _item_to_domain(self, row: CartItemRow) -> CartItem:
        return CartItem(
            id=row.id,
            cart_id=row.cart_id,
            product_id=row.product_id,
            quantity=row.quantity,
            customizations=dict(row.customizations),
        )
