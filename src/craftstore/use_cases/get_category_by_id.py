"""Get category by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.catalog import Category
from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class GetCategoryByIdRequest:
    category_id: int | str


@dataclass(frozen=True, slots=True)
class GetCategoryByIdResponse:
    category: Category


class GetCategoryById:
    """
    Use case for retrieving a single category.

    Raises:
        ValidationError: If category_id is not a positive integer
        NotFoundError: If no category has that id
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: GetCategoryByIdRequest) -> GetCategoryByIdResponse:
        category_id = parse_entity_id(request.category_id, "category_id")

        category = self._repository.get_category(category_id)
        if category is None:
            raise NotFoundError(resource="Category", identifier=category_id)

        return GetCategoryByIdResponse(category=category)
