from fastapi import APIRouter, Depends, status

from craftstore.entrypoints.http.dependencies import (
    get_register_user_use_case,
    get_user_cart_use_case,
)
from craftstore.entrypoints.http.dtos.cart import CartWithItemsResponseDTO
from craftstore.entrypoints.http.dtos.user import RegisterUserRequestDTO, UserResponseDTO
from craftstore.entrypoints.http.error_responses import (
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
    ErrorResponse,
)
from craftstore.entrypoints.http.mappers.cart_mapper import CartMapper
from craftstore.entrypoints.http.mappers.user_mapper import UserMapper
from craftstore.use_cases.get_user_cart import GetUserCart, GetUserCartRequest
from craftstore.use_cases.register_user import RegisterUser

router = APIRouter(tags=["Users"])


@router.post(
    "/users",
    response_model=UserResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    responses={
        409: {"model": ErrorResponse, "description": "Username or email taken"},
        **VALIDATION_RESPONSE,
    },
)
def register_user(
    payload: RegisterUserRequestDTO,
    use_case: RegisterUser = Depends(get_register_user_use_case),
) -> UserResponseDTO:
    result = use_case.execute(UserMapper.to_register_request(payload))
    return UserMapper.to_user_response(result.user)


@router.get(
    "/users/{user_id}/cart",
    response_model=CartWithItemsResponseDTO,
    summary="Get a user's cart",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def get_user_cart(
    user_id: str,
    use_case: GetUserCart = Depends(get_user_cart_use_case),
) -> CartWithItemsResponseDTO:
    view = use_case.execute(GetUserCartRequest(user_id=user_id))
    return CartMapper.to_cart_view_response(view)
