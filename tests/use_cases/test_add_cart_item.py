"""Tests for the AddCartItem use case."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from craftstore.adapters.in_memory_cart_repository import InMemoryCartRepository
from craftstore.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from craftstore.domain.errors import NotFoundError, ValidationError
from craftstore.infra.seed import seed_catalog
from craftstore.use_cases.add_cart_item import AddCartItem, AddCartItemRequest

CREATED_AT = "2026-01-01T00:00:00+00:00"


@pytest.fixture()
def carts() -> InMemoryCartRepository:
    return InMemoryCartRepository()


@pytest.fixture()
def catalog() -> InMemoryCatalogRepository:
    repository = InMemoryCatalogRepository()
    seed_catalog(repository)
    return repository


@pytest.fixture()
def use_case(carts: InMemoryCartRepository, catalog: InMemoryCatalogRepository) -> AddCartItem:
    return AddCartItem(cart_repository=carts, catalog_repository=catalog)


@pytest.fixture()
def cart_id(carts: InMemoryCartRepository) -> int:
    return carts.create_cart(user_id=None, created_at=CREATED_AT).id


# ==============================================================================
# Happy Path
# ==============================================================================


def test_adds_item_with_product(use_case: AddCartItem, cart_id: int, carts: InMemoryCartRepository) -> None:
    line = use_case.execute(
        AddCartItemRequest(
            cart_id=cart_id,
            product_id=1,
            quantity=2,
            customizations={"engraving": "AB"},
        )
    )

    assert line.item.id == 1
    assert line.item.quantity == 2
    assert line.item.customizations == {"engraving": "AB"}
    assert line.product is not None
    assert line.product.name == "Leather Journal"
    assert line.line_total == Decimal("159.98")
    assert carts.list_items(cart_id) == [line.item]


def test_defaults_to_one_uncustomized_item(use_case: AddCartItem, cart_id: int) -> None:
    line = use_case.execute(AddCartItemRequest(cart_id=cart_id, product_id="3"))

    assert line.item.quantity == 1
    assert line.customization_label == "No customization"


def test_same_product_twice_creates_two_items(
    use_case: AddCartItem, cart_id: int, carts: InMemoryCartRepository
) -> None:
    use_case.execute(AddCartItemRequest(cart_id=cart_id, product_id=1, customizations={"color": "red"}))
    use_case.execute(AddCartItemRequest(cart_id=cart_id, product_id=1, customizations={"color": "blue"}))

    assert len(carts.list_items(cart_id)) == 2


def test_unknown_customization_keys_are_stored_and_logged(
    use_case: AddCartItem, cart_id: int, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="craftstore.use_cases.add_cart_item"):
        line = use_case.execute(
            AddCartItemRequest(
                cart_id=cart_id,
                product_id=1,
                customizations={"engraving": "AB", "color": "brown"},
            )
        )

    assert line.item.customizations == {"engraving": "AB", "color": "brown"}
    assert "Unrecognized customization keys" in caplog.text


# ==============================================================================
# Referential checks
# ==============================================================================


def test_missing_cart_is_not_found_and_nothing_is_stored(
    use_case: AddCartItem, carts: InMemoryCartRepository
) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(AddCartItemRequest(cart_id=99, product_id=1, quantity=1))

    assert exc_info.value.context["resource"] == "Cart"
    assert carts.list_items(99) == []
    assert carts.get_item(1) is None


def test_missing_product_is_not_found(
    use_case: AddCartItem, cart_id: int, carts: InMemoryCartRepository
) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(AddCartItemRequest(cart_id=cart_id, product_id=999))

    assert exc_info.value.context["resource"] == "Product"
    assert carts.list_items(cart_id) == []


# ==============================================================================
# Validation
# ==============================================================================


@pytest.mark.parametrize("quantity", [0, -2, 1.5, "3", True])
def test_invalid_quantity(use_case: AddCartItem, cart_id: int, quantity: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(AddCartItemRequest(cart_id=cart_id, product_id=1, quantity=quantity))

    assert exc_info.value.errors[0]["field"] == "quantity"


def test_invalid_ids_are_validation_errors(use_case: AddCartItem) -> None:
    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(AddCartItemRequest(cart_id="abc", product_id=1))

    assert exc_info.value.errors[0]["field"] == "cart_id"


def test_validation_runs_before_existence_checks(use_case: AddCartItem) -> None:
    """A bad quantity on a missing cart is reported as a validation error."""
    with pytest.raises(ValidationError):
        use_case.execute(AddCartItemRequest(cart_id=99, product_id=1, quantity=0))


def test_nested_customization_value_is_rejected(
    use_case: AddCartItem, cart_id: int, carts: InMemoryCartRepository
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(
            AddCartItemRequest(cart_id=cart_id, product_id=1, customizations={"color": {"r": 1}})
        )

    assert exc_info.value.errors[0]["field"] == "customizations.color"
    assert carts.list_items(cart_id) == []
