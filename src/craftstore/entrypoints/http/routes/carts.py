from fastapi import APIRouter, Body, Depends, Response, status

from craftstore.domain.errors import NotFoundError
from craftstore.entrypoints.http.dependencies import (
    get_add_cart_item_use_case,
    get_cart_use_case,
    get_clear_cart_use_case,
    get_create_cart_use_case,
    get_remove_cart_item_use_case,
    get_update_cart_item_quantity_use_case,
)
from craftstore.entrypoints.http.dtos.cart import (
    AddCartItemRequestDTO,
    CartItemResponseDTO,
    CartResponseDTO,
    CartWithItemsResponseDTO,
    ClearCartResponseDTO,
    CreateCartRequestDTO,
    UpdateCartItemQuantityRequestDTO,
)
from craftstore.entrypoints.http.error_responses import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from craftstore.entrypoints.http.mappers.cart_mapper import CartMapper
from craftstore.use_cases.add_cart_item import AddCartItem
from craftstore.use_cases.clear_cart import ClearCart, ClearCartRequest
from craftstore.use_cases.create_cart import CreateCart, CreateCartRequest
from craftstore.use_cases.get_cart import GetCart, GetCartRequest
from craftstore.use_cases.remove_cart_item import RemoveCartItem, RemoveCartItemRequest
from craftstore.use_cases.update_cart_item_quantity import (
    UpdateCartItemQuantity,
    UpdateCartItemQuantityRequest,
)

router = APIRouter(tags=["Carts"])


@router.post(
    "/carts",
    response_model=CartResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create cart",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def create_cart(
    payload: CreateCartRequestDTO | None = Body(default=None),
    use_case: CreateCart = Depends(get_create_cart_use_case),
) -> CartResponseDTO:
    user_id = payload.user_id if payload is not None else None
    result = use_case.execute(CreateCartRequest(user_id=user_id))
    return CartMapper.to_cart_response(result.cart)


@router.get(
    "/carts/{cart_id}",
    response_model=CartWithItemsResponseDTO,
    summary="Get cart with items and totals",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def get_cart(
    cart_id: str,
    use_case: GetCart = Depends(get_cart_use_case),
) -> CartWithItemsResponseDTO:
    view = use_case.execute(GetCartRequest(cart_id=cart_id))
    return CartMapper.to_cart_view_response(view)


@router.delete(
    "/carts/{cart_id}/items",
    response_model=ClearCartResponseDTO,
    summary="Remove every item from a cart",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def clear_cart(
    cart_id: str,
    use_case: ClearCart = Depends(get_clear_cart_use_case),
) -> ClearCartResponseDTO:
    result = use_case.execute(ClearCartRequest(cart_id=cart_id))
    return ClearCartResponseDTO(removed_count=result.removed_count)


@router.post(
    "/cart-items",
    response_model=CartItemResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add item to cart",
    description="""
    Add a product to a cart. Cart and product must exist (404 otherwise).

    ## Customizations
    A flat object of string keys to string/number/boolean values, stored as sent.
    Keys that don't match a customization type name are accepted and logged.

    ## Example
    ```
    POST /v1/cart-items
    {
        "cart_id": 1,
        "product_id": 1,
        "quantity": 2,
        "customizations": {"color": "brown", "engraving_text": "ABC"}
    }
    ```
    """,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def add_cart_item(
    payload: AddCartItemRequestDTO,
    use_case: AddCartItem = Depends(get_add_cart_item_use_case),
) -> CartItemResponseDTO:
    line = use_case.execute(CartMapper.to_add_item_request(payload))
    return CartMapper.to_item_response(line)


@router.patch(
    "/cart-items/{cart_item_id}",
    response_model=CartItemResponseDTO,
    summary="Update cart item quantity",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_cart_item_quantity(
    cart_item_id: str,
    payload: UpdateCartItemQuantityRequestDTO,
    use_case: UpdateCartItemQuantity = Depends(get_update_cart_item_quantity_use_case),
) -> CartItemResponseDTO:
    line = use_case.execute(
        UpdateCartItemQuantityRequest(cart_item_id=cart_item_id, quantity=payload.quantity)
    )
    return CartMapper.to_item_response(line)


@router.delete(
    "/cart-items/{cart_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove cart item",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def remove_cart_item(
    cart_item_id: str,
    use_case: RemoveCartItem = Depends(get_remove_cart_item_use_case),
) -> Response:
    result = use_case.execute(RemoveCartItemRequest(cart_item_id=cart_item_id))

    if not result.removed:
        raise NotFoundError(resource="CartItem", identifier=cart_item_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
