from __future__ import annotations

from dataclasses import dataclass, field

from craftstore.domain.catalog import (
    Product,
    ProductFilters,
    SortKey,
    filter_products,
    sort_products,
)
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class SearchProductsRequest:
    filters: ProductFilters = field(default_factory=ProductFilters)
    sort: SortKey | None = None


@dataclass(frozen=True, slots=True)
class SearchProductsResponse:
    products: list[Product]


class SearchProducts:
    """
    Product listing with filters and an optional sort order.

    The repository only supplies the product collection; filtering and
    ordering are domain functions, so every storage backend behaves the same.
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: SearchProductsRequest) -> SearchProductsResponse:
        """
        Execute product search.

        Args:
            request: Filter criteria (AND semantics) and sort key

        Returns:
            Response containing the matching products, ordered

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()

        matches = filter_products(self._repository.list_products(), request.filters)

        return SearchProductsResponse(products=sort_products(matches, request.sort))
