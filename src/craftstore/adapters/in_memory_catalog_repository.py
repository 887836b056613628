from __future__ import annotations

from dataclasses import asdict
from itertools import count
from threading import Lock

from craftstore.domain.catalog import Category, CustomizationType, Product
from craftstore.ports.catalog_repository import (
    CatalogRepository,
    NewCategory,
    NewCustomizationType,
    NewProduct,
)


class InMemoryCatalogRepository(CatalogRepository):
    """
    Canonical contract implementation, and the default store.

    - Stores entities in insertion order (dicts keyed by id)
    - One id counter per entity type, starting at 1
    - Process-wide state, lost on restart
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._categories: dict[int, Category] = {}
        self._products: dict[int, Product] = {}
        self._customization_types: dict[int, CustomizationType] = {}
        self._category_ids = count(1)
        self._product_ids = count(1)
        self._customization_type_ids = count(1)

    # Categories

    def list_categories(self) -> list[Category]:
        return list(self._categories.values())

    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def create_category(self, data: NewCategory) -> Category:
        with self._lock:
            category = Category(id=next(self._category_ids), **asdict(data))
            self._categories[category.id] = category
        return category

    # Products

    def list_products(self) -> list[Product]:
        return list(self._products.values())

    def get_product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def create_product(self, data: NewProduct) -> Product:
        with self._lock:
            product = Product(
                id=next(self._product_ids),
                name=data.name,
                description=data.description,
                short_description=data.short_description,
                price=data.price,
                category_id=data.category_id,
                rating=data.rating,
                image=data.image,
                images=tuple(data.images),
                is_bestseller=data.is_bestseller,
                is_new=data.is_new,
                customization_options=tuple(data.customization_options),
                features=tuple(data.features),
            )
            self._products[product.id] = product
        return product

    # Customization types

    def list_customization_types(self) -> list[CustomizationType]:
        return list(self._customization_types.values())

    def get_customization_type(self, type_id: int) -> CustomizationType | None:
        return self._customization_types.get(type_id)

    def create_customization_type(self, data: NewCustomizationType) -> CustomizationType:
        with self._lock:
            customization_type = CustomizationType(
                id=next(self._customization_type_ids), **asdict(data)
            )
            self._customization_types[customization_type.id] = customization_type
        return customization_type
