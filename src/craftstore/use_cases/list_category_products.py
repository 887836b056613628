from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.catalog import Category, Product, ProductFilters, filter_products
from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class ListCategoryProductsRequest:
    category_id: int | str


@dataclass(frozen=True, slots=True)
class ListCategoryProductsResponse:
    category: Category
    products: list[Product]


class ListCategoryProducts:
    """Products of one existing category, in insertion order."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: ListCategoryProductsRequest) -> ListCategoryProductsResponse:
        category_id = parse_entity_id(request.category_id, "category_id")

        category = self._repository.get_category(category_id)
        if category is None:
            raise NotFoundError(resource="Category", identifier=category_id)

        products = filter_products(
            self._repository.list_products(),
            ProductFilters(category_id=category_id),
        )
        return ListCategoryProductsResponse(category=category, products=products)
