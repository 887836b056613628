from __future__ import annotations

from decimal import Decimal

from craftstore.domain.catalog import (
    Category,
    CustomizationType,
    PriceRange,
    Product,
    ProductFilters,
)
from craftstore.domain.errors import ValidationError
from craftstore.entrypoints.http.dtos.catalog import (
    CategoryResponseDTO,
    CustomizationTypeResponseDTO,
    ProductListResponseDTO,
    ProductResponseDTO,
    ProductsQueryDTO,
)
from craftstore.use_cases.search_products import SearchProductsRequest


class CatalogMapper:
    """Maps between REST DTOs and domain models for the catalog."""

    @staticmethod
    def parse_customization_types(raw: str | None) -> tuple[int, ...] | None:
        """
        Parse a comma-separated id list ("1,3").

        Blank entries are ignored, so "" and "1," are accepted.

        Raises:
            ValidationError: If an entry is not an integer
        """
        if raw is None:
            return None

        ids: list[int] = []
        for part in raw.split(","):
            part = part.strip()
            if not part:
                continue
            if not (part.isascii() and part.isdigit()):
                raise ValidationError(
                    errors=[
                        {
                            "field": "customization_types",
                            "message": f"Must be comma-separated integer ids: {raw}",
                            "code": "INVALID_ID",
                        }
                    ]
                )
            ids.append(int(part))

        return tuple(ids)

    @staticmethod
    def to_domain_filters(dto: ProductsQueryDTO) -> ProductFilters:
        """
        Converts query params to domain filters, handling Decimal conversion.

        Only parameters actually sent become criteria; zero values are kept.
        """
        price_range = None
        if dto.min_price is not None or dto.max_price is not None:
            price_range = PriceRange(
                min=Decimal(dto.min_price) if dto.min_price is not None else None,
                max=Decimal(dto.max_price) if dto.max_price is not None else None,
            )

        return ProductFilters(
            category_id=dto.category_id,
            price_range=price_range,
            customization_types=CatalogMapper.parse_customization_types(dto.customization_types),
            search=dto.search,
            min_rating=dto.min_rating,
        )

    @staticmethod
    def to_search_request(dto: ProductsQueryDTO) -> SearchProductsRequest:
        return SearchProductsRequest(
            filters=CatalogMapper.to_domain_filters(dto),
            sort=dto.sort,
        )

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """Handles Decimal -> str conversion at the boundary."""
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            short_description=product.short_description,
            price=str(product.price),
            category_id=product.category_id,
            rating=product.rating,
            image=product.image,
            images=list(product.images),
            is_bestseller=product.is_bestseller,
            is_new=product.is_new,
            customization_options=list(product.customization_options),
            features=list(product.features),
        )

    @staticmethod
    def to_product_list_response(products: list[Product]) -> ProductListResponseDTO:
        return ProductListResponseDTO(
            products=[CatalogMapper.to_product_response(p) for p in products],
            total=len(products),
        )

    @staticmethod
    def to_category_response(category: Category) -> CategoryResponseDTO:
        return CategoryResponseDTO(
            id=category.id,
            name=category.name,
            description=category.description,
            image=category.image,
            product_count=category.product_count,
        )

    @staticmethod
    def to_customization_type_response(
        customization_type: CustomizationType,
    ) -> CustomizationTypeResponseDTO:
        return CustomizationTypeResponseDTO(
            id=customization_type.id,
            name=customization_type.name,
            display_name=customization_type.display_name,
            color_hex=customization_type.color_hex,
        )
