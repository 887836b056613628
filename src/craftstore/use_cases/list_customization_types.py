from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.catalog import CustomizationType
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class ListCustomizationTypesResponse:
    customization_types: list[CustomizationType]


class ListCustomizationTypes:
    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self) -> ListCustomizationTypesResponse:
        return ListCustomizationTypesResponse(
            customization_types=self._repository.list_customization_types()
        )
