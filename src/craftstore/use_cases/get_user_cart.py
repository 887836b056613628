from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository
from craftstore.ports.catalog_repository import CatalogRepository
from craftstore.ports.user_repository import UserRepository
from craftstore.use_cases.cart_view import CartView, build_cart_view


@dataclass(frozen=True, slots=True)
class GetUserCartRequest:
    user_id: int | str


class GetUserCart:
    """
    The first cart owned by a user, with items and totals.

    Raises:
        ValidationError: If user_id is not a positive integer
        NotFoundError: If the user doesn't exist or owns no cart
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        catalog_repository: CatalogRepository,
        user_repository: UserRepository,
    ) -> None:
        self._carts = cart_repository
        self._catalog = catalog_repository
        self._users = user_repository

    def execute(self, request: GetUserCartRequest) -> CartView:
        user_id = parse_entity_id(request.user_id, "user_id")

        if self._users.get_user(user_id) is None:
            raise NotFoundError(resource="User", identifier=user_id)

        cart = self._carts.get_cart_by_user(user_id)
        if cart is None:
            raise NotFoundError(resource="Cart", identifier=None, user_id=user_id)

        return build_cart_view(cart, self._carts, self._catalog)
