"""
Test suite for the cart routes (/v1/carts and /v1/cart-items).

Use cases are replaced through dependency_overrides; these tests cover
request parsing, status codes and the response contract.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from craftstore.domain.cart import Cart, CartItem, CartLine, summarize_cart
from craftstore.domain.catalog import Product
from craftstore.domain.errors import NotFoundError, ValidationError
from craftstore.entrypoints.http.dependencies import (
    get_add_cart_item_use_case,
    get_cart_use_case,
    get_clear_cart_use_case,
    get_create_cart_use_case,
    get_remove_cart_item_use_case,
    get_update_cart_item_quantity_use_case,
)
from craftstore.entrypoints.http.exception_handlers import register_exception_handlers
from craftstore.entrypoints.http.routes.carts import router
from craftstore.use_cases.cart_view import CartView
from craftstore.use_cases.clear_cart import ClearCartResponse
from craftstore.use_cases.create_cart import CreateCartRequest, CreateCartResponse
from craftstore.use_cases.remove_cart_item import RemoveCartItemResponse

CREATED_AT = "2026-01-01T00:00:00+00:00"


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


@pytest.fixture
def cart() -> Cart:
    return Cart(id=1, created_at=CREATED_AT, updated_at=CREATED_AT)


@pytest.fixture
def product() -> Product:
    return Product(
        id=1,
        name="Leather Journal",
        description="Handmade journal",
        short_description="Customizable cover & pages",
        price=Decimal("79.99"),
        category_id=1,
        rating=4.9,
        image="https://img.example.com/1.jpg",
    )


@pytest.fixture
def line(product: Product) -> CartLine:
    item = CartItem(
        id=3,
        cart_id=1,
        product_id=1,
        quantity=2,
        customizations={"color": "brown", "engraving_text": "Hi"},
    )
    return CartLine(item=item, product=product)


# ==============================================================================
# POST /v1/carts
# ==============================================================================


def test_create_cart_without_body(
    app: FastAPI, client: TestClient, mock_use_case: Mock, cart: Cart
) -> None:
    mock_use_case.execute.return_value = CreateCartResponse(cart=cart)
    app.dependency_overrides[get_create_cart_use_case] = lambda: mock_use_case

    response = client.post("/v1/carts")

    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "user_id": None,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    mock_use_case.execute.assert_called_once_with(CreateCartRequest(user_id=None))


def test_create_cart_for_user(
    app: FastAPI, client: TestClient, mock_use_case: Mock, cart: Cart
) -> None:
    mock_use_case.execute.return_value = CreateCartResponse(cart=cart)
    app.dependency_overrides[get_create_cart_use_case] = lambda: mock_use_case

    response = client.post("/v1/carts", json={"user_id": 4})

    assert response.status_code == 201
    mock_use_case.execute.assert_called_once_with(CreateCartRequest(user_id=4))


def test_create_cart_unknown_user(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = NotFoundError(resource="User", identifier=4)
    app.dependency_overrides[get_create_cart_use_case] = lambda: mock_use_case

    response = client.post("/v1/carts", json={"user_id": 4})

    assert response.status_code == 404


def test_create_cart_rejects_boolean_user_id(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    app.dependency_overrides[get_create_cart_use_case] = lambda: mock_use_case

    response = client.post("/v1/carts", json={"user_id": True})

    assert response.status_code == 422
    mock_use_case.execute.assert_not_called()


# ==============================================================================
# GET /v1/carts/{cart_id}
# ==============================================================================


def test_get_cart_with_items(
    app: FastAPI, client: TestClient, mock_use_case: Mock, cart: Cart, line: CartLine
) -> None:
    mock_use_case.execute.return_value = CartView(
        cart=cart, lines=[line], totals=summarize_cart([line])
    )
    app.dependency_overrides[get_cart_use_case] = lambda: mock_use_case

    response = client.get("/v1/carts/1")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["items"][0]["id"] == 3
    assert data["items"][0]["quantity"] == 2
    assert data["items"][0]["customizations"] == {"color": "brown", "engraving_text": "Hi"}
    assert data["items"][0]["customization_label"] == "Color: Brown, Engraving Text: Hi"
    assert data["items"][0]["line_total"] == "159.98"
    assert data["items"][0]["product"]["name"] == "Leather Journal"
    assert data["totals"] == {
        "subtotal": "159.98",
        "item_count": 2,
        "shipping": "0.00",
        "total": "159.98",
    }


def test_get_cart_not_found(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = NotFoundError(resource="Cart", identifier=9)
    app.dependency_overrides[get_cart_use_case] = lambda: mock_use_case

    response = client.get("/v1/carts/9")

    assert response.status_code == 404
    assert response.json()["detail"] == "Cart with identifier '9' not found"


def test_clear_cart(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = ClearCartResponse(removed_count=3)
    app.dependency_overrides[get_clear_cart_use_case] = lambda: mock_use_case

    response = client.delete("/v1/carts/1/items")

    assert response.status_code == 200
    assert response.json() == {"removed_count": 3}


# ==============================================================================
# POST /v1/cart-items
# ==============================================================================


def test_add_cart_item(
    app: FastAPI, client: TestClient, mock_use_case: Mock, line: CartLine
) -> None:
    mock_use_case.execute.return_value = line
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    response = client.post(
        "/v1/cart-items",
        json={
            "cart_id": 1,
            "product_id": 1,
            "quantity": 2,
            "customizations": {"color": "brown", "engraving_text": "Hi"},
        },
    )

    assert response.status_code == 201
    assert response.json()["line_total"] == "159.98"

    request = mock_use_case.execute.call_args[0][0]
    assert request.cart_id == 1
    assert request.product_id == 1
    assert request.quantity == 2
    assert request.customizations == {"color": "brown", "engraving_text": "Hi"}


def test_add_cart_item_defaults(
    app: FastAPI, client: TestClient, mock_use_case: Mock, line: CartLine
) -> None:
    mock_use_case.execute.return_value = line
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    client.post("/v1/cart-items", json={"cart_id": 1, "product_id": 1})

    request = mock_use_case.execute.call_args[0][0]
    assert request.quantity == 1
    assert request.customizations == {}


def test_add_cart_item_keeps_boolean_customizations(
    app: FastAPI, client: TestClient, mock_use_case: Mock, line: CartLine
) -> None:
    mock_use_case.execute.return_value = line
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    client.post(
        "/v1/cart-items",
        json={"cart_id": 1, "product_id": 1, "customizations": {"gift_wrap": True, "size": 3}},
    )

    request = mock_use_case.execute.call_args[0][0]
    assert request.customizations["gift_wrap"] is True
    assert request.customizations["size"] == 3


def test_add_cart_item_nested_customization(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    response = client.post(
        "/v1/cart-items",
        json={"cart_id": 1, "product_id": 1, "customizations": {"color": {"r": 1}}},
    )

    assert response.status_code == 422
    mock_use_case.execute.assert_not_called()


def test_add_cart_item_missing_cart(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = NotFoundError(resource="Cart", identifier=99)
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    response = client.post("/v1/cart-items", json={"cart_id": 99, "product_id": 1})

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_add_cart_item_quantity_error(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = ValidationError(
        errors=[{"field": "quantity", "message": "Must be >= 1", "code": "INVALID_RANGE"}]
    )
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    response = client.post("/v1/cart-items", json={"cart_id": 1, "product_id": 1, "quantity": 0})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "quantity"


@pytest.mark.parametrize("quantity", [True, "2", 2.0])
def test_add_cart_item_rejects_non_integer_quantity(
    app: FastAPI, client: TestClient, mock_use_case: Mock, quantity: object
) -> None:
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case

    response = client.post(
        "/v1/cart-items", json={"cart_id": 1, "product_id": 1, "quantity": quantity}
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "quantity"
    mock_use_case.execute.assert_not_called()


@pytest.mark.parametrize("field", ["cart_id", "product_id"])
def test_add_cart_item_rejects_boolean_ids(
    app: FastAPI, client: TestClient, mock_use_case: Mock, field: str
) -> None:
    app.dependency_overrides[get_add_cart_item_use_case] = lambda: mock_use_case
    payload = {"cart_id": 1, "product_id": 1, field: True}

    response = client.post("/v1/cart-items", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == field
    mock_use_case.execute.assert_not_called()


# ==============================================================================
# PATCH / DELETE /v1/cart-items/{cart_item_id}
# ==============================================================================


def test_update_quantity(
    app: FastAPI, client: TestClient, mock_use_case: Mock, line: CartLine
) -> None:
    mock_use_case.execute.return_value = line
    app.dependency_overrides[get_update_cart_item_quantity_use_case] = lambda: mock_use_case

    response = client.patch("/v1/cart-items/3", json={"quantity": 2})

    assert response.status_code == 200
    request = mock_use_case.execute.call_args[0][0]
    assert request.cart_item_id == "3"
    assert request.quantity == 2


def test_update_quantity_missing_item(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = NotFoundError(resource="CartItem", identifier=3)
    app.dependency_overrides[get_update_cart_item_quantity_use_case] = lambda: mock_use_case

    response = client.patch("/v1/cart-items/3", json={"quantity": 2})

    assert response.status_code == 404


def test_update_quantity_requires_body(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    app.dependency_overrides[get_update_cart_item_quantity_use_case] = lambda: mock_use_case

    response = client.patch("/v1/cart-items/3", json={})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "quantity"


@pytest.mark.parametrize("quantity", [True, "2"])
def test_update_quantity_rejects_non_integer(
    app: FastAPI, client: TestClient, mock_use_case: Mock, quantity: object
) -> None:
    app.dependency_overrides[get_update_cart_item_quantity_use_case] = lambda: mock_use_case

    response = client.patch("/v1/cart-items/3", json={"quantity": quantity})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "quantity"
    mock_use_case.execute.assert_not_called()


def test_remove_cart_item(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = RemoveCartItemResponse(removed=True)
    app.dependency_overrides[get_remove_cart_item_use_case] = lambda: mock_use_case

    response = client.delete("/v1/cart-items/3")

    assert response.status_code == 204
    assert response.content == b""


def test_remove_missing_cart_item(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = RemoveCartItemResponse(removed=False)
    app.dependency_overrides[get_remove_cart_item_use_case] = lambda: mock_use_case

    response = client.delete("/v1/cart-items/3")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "CartItem with identifier '3' not found",
        "code": "NOT_FOUND",
    }
