from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from craftstore.domain.cart import Cart
from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.cart_repository import CartRepository
from craftstore.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class CreateCartRequest:
    user_id: int | str | None = None  # None for an anonymous cart


@dataclass(frozen=True, slots=True)
class CreateCartResponse:
    cart: Cart


class CreateCart:
    """
    Create an empty cart, optionally owned by a registered user.

    The client keeps the returned id for the rest of the browsing session.

    Raises:
        ValidationError: If user_id is given but not a positive integer
        NotFoundError: If user_id is given but no such user exists
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        user_repository: UserRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._carts = cart_repository
        self._users = user_repository
        self._clock = clock

    def execute(self, request: CreateCartRequest) -> CreateCartResponse:
        user_id: int | None = None
        if request.user_id is not None:
            user_id = parse_entity_id(request.user_id, "user_id")
            if self._users.get_user(user_id) is None:
                raise NotFoundError(resource="User", identifier=user_id)

        cart = self._carts.create_cart(user_id=user_id, created_at=self._clock().isoformat())

        logger.info("Cart created", extra={"cart_id": cart.id, "user_id": user_id})
        return CreateCartResponse(cart=cart)
