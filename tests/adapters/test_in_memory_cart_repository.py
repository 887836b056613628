"""Tests for the in-memory cart repository."""

from __future__ import annotations

import pytest

from craftstore.adapters.in_memory_cart_repository import InMemoryCartRepository
from craftstore.ports.cart_repository import NewCartItem

CREATED_AT = "2026-01-01T00:00:00+00:00"


@pytest.fixture
def repository() -> InMemoryCartRepository:
    return InMemoryCartRepository()


def test_create_cart(repository: InMemoryCartRepository) -> None:
    cart = repository.create_cart(user_id=None, created_at=CREATED_AT)

    assert cart.id == 1
    assert cart.user_id is None
    assert cart.created_at == cart.updated_at == CREATED_AT
    assert repository.get_cart(1) == cart
    assert repository.get_cart(2) is None


def test_get_cart_by_user_returns_first_cart(repository: InMemoryCartRepository) -> None:
    repository.create_cart(user_id=None, created_at=CREATED_AT)
    first = repository.create_cart(user_id=7, created_at=CREATED_AT)
    repository.create_cart(user_id=7, created_at=CREATED_AT)

    assert repository.get_cart_by_user(7) == first
    assert repository.get_cart_by_user(8) is None


def test_items_belong_to_their_cart(repository: InMemoryCartRepository) -> None:
    cart_a = repository.create_cart(user_id=None, created_at=CREATED_AT)
    cart_b = repository.create_cart(user_id=None, created_at=CREATED_AT)

    first = repository.add_item(NewCartItem(cart_id=cart_a.id, product_id=1, quantity=2))
    repository.add_item(NewCartItem(cart_id=cart_b.id, product_id=2))
    third = repository.add_item(
        NewCartItem(cart_id=cart_a.id, product_id=3, customizations={"color": "red"})
    )

    assert repository.list_items(cart_a.id) == [first, third]
    assert third.customizations == {"color": "red"}
    assert repository.list_items(99) == []


def test_add_item_copies_customizations(repository: InMemoryCartRepository) -> None:
    customizations = {"engraving": "AB"}
    item = repository.add_item(NewCartItem(cart_id=1, product_id=1, customizations=customizations))

    customizations["engraving"] = "changed"

    assert repository.get_item(item.id).customizations == {"engraving": "AB"}


def test_update_item_quantity(repository: InMemoryCartRepository) -> None:
    item = repository.add_item(NewCartItem(cart_id=1, product_id=1, quantity=1))

    updated = repository.update_item_quantity(item.id, 5)

    assert updated is not None
    assert updated.quantity == 5
    assert repository.get_item(item.id).quantity == 5


def test_update_missing_item_returns_none(repository: InMemoryCartRepository) -> None:
    assert repository.update_item_quantity(42, 3) is None


def test_remove_item_twice(repository: InMemoryCartRepository) -> None:
    item = repository.add_item(NewCartItem(cart_id=1, product_id=1))

    assert repository.remove_item(item.id) is True
    assert repository.remove_item(item.id) is False
    assert repository.get_item(item.id) is None


def test_item_ids_are_not_reused(repository: InMemoryCartRepository) -> None:
    first = repository.add_item(NewCartItem(cart_id=1, product_id=1))
    repository.remove_item(first.id)

    second = repository.add_item(NewCartItem(cart_id=1, product_id=1))

    assert second.id == 2


def test_remove_items_for_cart(repository: InMemoryCartRepository) -> None:
    repository.add_item(NewCartItem(cart_id=1, product_id=1))
    repository.add_item(NewCartItem(cart_id=1, product_id=2))
    kept = repository.add_item(NewCartItem(cart_id=2, product_id=1))

    assert repository.remove_items_for_cart(1) == 2
    assert repository.list_items(1) == []
    assert repository.list_items(2) == [kept]
    assert repository.remove_items_for_cart(1) == 0
