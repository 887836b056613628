from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.catalog import Category
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class ListCategoriesResponse:
    categories: list[Category]


class ListCategories:
    """All categories in insertion order."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self) -> ListCategoriesResponse:
        return ListCategoriesResponse(categories=self._repository.list_categories())
