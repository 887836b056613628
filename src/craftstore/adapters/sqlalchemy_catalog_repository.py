"""SQLAlchemy implementation of CatalogRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from craftstore.adapters.sqlalchemy_errors import translate_store_errors
from craftstore.domain.catalog import Category, CustomizationType, Product
from craftstore.infra.db.models.catalog import CategoryRow, CustomizationTypeRow, ProductRow
from craftstore.ports.catalog_repository import (
    CatalogRepository,
    NewCategory,
    NewCustomizationType,
    NewProduct,
)


class SqlAlchemyCatalogRepository(CatalogRepository):
    """
    Catalog storage on any SQLAlchemy-supported database.

    - Rows are returned ordered by primary key (insertion order)
    - Converts *Row models (infrastructure) to domain dataclasses
    - Commits are left to the session owner (one session per request)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # Categories

    def list_categories(self) -> list[Category]:
        with translate_store_errors("list_categories"):
            rows = self._session.execute(select(CategoryRow).order_by(CategoryRow.id)).scalars()
            return [self._category_to_domain(row) for row in rows]

    def get_category(self, category_id: int) -> Category | None:
        with translate_store_errors("get_category"):
            row = self._session.get(CategoryRow, category_id)
            return self._category_to_domain(row) if row else None

    def create_category(self, data: NewCategory) -> Category:
        with translate_store_errors("create_category"):
            row = CategoryRow(
                name=data.name,
                description=data.description,
                image=data.image,
                product_count=data.product_count,
            )
            self._session.add(row)
            self._session.flush()
            return self._category_to_domain(row)

    # Products

    def list_products(self) -> list[Product]:
        with translate_store_errors("list_products"):
            rows = self._session.execute(select(ProductRow).order_by(ProductRow.id)).scalars()
            return [self._product_to_domain(row) for row in rows]

    def get_product(self, product_id: int) -> Product | None:
        with translate_store_errors("get_product"):
            row = self._session.get(ProductRow, product_id)
            return self._product_to_domain(row) if row else None

    def create_product(self, data: NewProduct) -> Product:
        with translate_store_errors("create_product"):
            row = ProductRow(
                name=data.name,
                description=data.description,
                short_description=data.short_description,
                price=data.price,
                category_id=data.category_id,
                rating=data.rating,
                image=data.image,
                images=list(data.images),
                is_bestseller=data.is_bestseller,
                is_new=data.is_new,
                customization_options=list(data.customization_options),
                features=list(data.features),
            )
            self._session.add(row)
            self._session.flush()
            return self._product_to_domain(row)

    # Customization types

    def list_customization_types(self) -> list[CustomizationType]:
        with translate_store_errors("list_customization_types"):
            query = select(CustomizationTypeRow).order_by(CustomizationTypeRow.id)
            rows = self._session.execute(query).scalars()
            return [self._customization_type_to_domain(row) for row in rows]

    def get_customization_type(self, type_id: int) -> CustomizationType | None:
        with translate_store_errors("get_customization_type"):
            row = self._session.get(CustomizationTypeRow, type_id)
            return self._customization_type_to_domain(row) if row else None

    def create_customization_type(self, data: NewCustomizationType) -> CustomizationType:
        with translate_store_errors("create_customization_type"):
            row = CustomizationTypeRow(
                name=data.name,
                display_name=data.display_name,
                color_hex=data.color_hex,
            )
            self._session.add(row)
            self._session.flush()
            return self._customization_type_to_domain(row)

    # Row -> domain

    def _category_to_domain(self, row: CategoryRow) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            description=row.description,
            image=row.image,
            product_count=row.product_count,
        )

    def _customization_type_to_domain(self, row: CustomizationTypeRow) -> CustomizationType:
        return CustomizationType(
            id=row.id,
            name=row.name,
            display_name=row.display_name,
            color_hex=row.color_hex,
        )

    def _product_to_domain(self, row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            short_description=row.short_description,
            price=row.price,  # Already Decimal from NUMERIC column
            category_id=row.category_id,
            rating=row.rating,
            image=row.image,
            images=tuple(row.images),
            is_bestseller=row.is_bestseller,
            is_new=row.is_new,
            customization_options=tuple(row.customization_options),
            features=tuple(row.features),
        )
