from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.catalog import Product, rank_featured
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class ListFeaturedProductsRequest:
    limit: int | None = None  # None: no limit, <= 0: nothing


@dataclass(frozen=True, slots=True)
class ListFeaturedProductsResponse:
    products: list[Product]


class ListFeaturedProducts:
    """Homepage highlights: bestsellers, then new products, then by rating."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: ListFeaturedProductsRequest) -> ListFeaturedProductsResponse:
        products = rank_featured(self._repository.list_products(), limit=request.limit)
        return ListFeaturedProductsResponse(products=products)
