from pydantic import BaseModel, ConfigDict, Field

from craftstore.domain.catalog import SortKey

PRICE_PATTERN = r"^\d+(\.\d{1,2})?$"


class CategoryResponseDTO(BaseModel):
    id: int
    name: str
    description: str
    image: str
    product_count: int


class CustomizationTypeResponseDTO(BaseModel):
    id: int
    name: str
    display_name: str
    color_hex: str


class ProductResponseDTO(BaseModel):
    id: int
    name: str
    description: str
    short_description: str
    price: str = Field(description="Decimal as string", examples=["79.99"])
    category_id: int
    rating: float
    image: str
    images: list[str]
    is_bestseller: bool
    is_new: bool
    customization_options: list[int]
    features: list[str]


class ProductsQueryDTO(BaseModel):
    """Query parameters for listing products."""

    category_id: int | None = Field(
        default=None,
        description="Only products of this category",
        examples=[1],
    )
    min_price: str | None = Field(
        default=None,
        description="Minimum price (inclusive, decimal as string)",
        examples=["50.00"],
        pattern=PRICE_PATTERN,
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["150.00"],
        pattern=PRICE_PATTERN,
    )
    customization_types: str | None = Field(
        default=None,
        description="Comma-separated customization type ids; a product matches if it supports any of them",
        examples=["1,3"],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of name, description or short description",
        examples=["leather"],
    )
    min_rating: float | None = Field(
        default=None,
        description="Minimum rating (inclusive, 0 to 5)",
        examples=[4.5],
    )
    sort: SortKey | None = Field(
        default=None,
        description="popular | newest | price-asc | price-desc | rating",
        examples=["price-asc"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "category_id": 1,
                "min_price": "50.00",
                "max_price": "150.00",
                "customization_types": "1,3",
                "search": "leather",
                "min_rating": 4.5,
                "sort": "price-asc",
            }
        }
    )


class FeaturedProductsQueryDTO(BaseModel):
    limit: int | None = Field(
        default=None,
        description="Maximum number of products; 0 or less returns none",
        examples=[4],
    )


class ProductListResponseDTO(BaseModel):
    products: list[ProductResponseDTO]
    total: int


class CategoryProductsResponseDTO(BaseModel):
    category: CategoryResponseDTO
    products: list[ProductResponseDTO]
    total: int
