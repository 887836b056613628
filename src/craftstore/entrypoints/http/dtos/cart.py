from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from craftstore.entrypoints.http.dtos.catalog import ProductResponseDTO

# Bool first so JSON true/false is not coerced into 1/0
CustomizationValueDTO = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class CreateCartRequestDTO(BaseModel):
    """Request payload for creating a cart. An empty body creates an anonymous cart."""

    user_id: StrictInt | None = Field(default=None, examples=[1])


class CartResponseDTO(BaseModel):
    id: int
    user_id: int | None
    created_at: str
    updated_at: str


class CartItemResponseDTO(BaseModel):
    id: int
    cart_id: int
    product_id: int
    quantity: int
    customizations: dict[str, CustomizationValueDTO]
    customization_label: str = Field(examples=["Color: Brown, Engraving Text: Hi"])
    line_total: str = Field(description="price * quantity as decimal string", examples=["159.98"])
    product: ProductResponseDTO | None


class CartTotalsResponseDTO(BaseModel):
    subtotal: str = Field(examples=["159.98"])
    item_count: int = Field(examples=[2])
    shipping: str = Field(examples=["0.00"])
    total: str = Field(examples=["159.98"])


class CartWithItemsResponseDTO(CartResponseDTO):
    items: list[CartItemResponseDTO]
    totals: CartTotalsResponseDTO


class AddCartItemRequestDTO(BaseModel):
    """Request payload for adding a product to a cart."""

    cart_id: StrictInt = Field(examples=[1])
    product_id: StrictInt = Field(examples=[1])
    quantity: StrictInt = Field(default=1, examples=[2])
    customizations: dict[str, CustomizationValueDTO] = Field(
        default_factory=dict,
        examples=[{"color": "brown", "engraving_text": "ABC"}],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cart_id": 1,
                "product_id": 1,
                "quantity": 2,
                "customizations": {"color": "brown", "engraving_text": "ABC"},
            }
        }
    )


class UpdateCartItemQuantityRequestDTO(BaseModel):
    quantity: StrictInt = Field(examples=[3])


class ClearCartResponseDTO(BaseModel):
    removed_count: int
