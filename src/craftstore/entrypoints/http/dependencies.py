"""
Dependency injection for FastAPI routes.

Repositories come from the configured storage backend:
- memory: the process-wide in-memory store
- sql: SQLAlchemy repositories sharing one session per request

Use cases are built per request and hold no state of their own.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from craftstore.adapters.sqlalchemy_cart_repository import SqlAlchemyCartRepository
from craftstore.adapters.sqlalchemy_catalog_repository import SqlAlchemyCatalogRepository
from craftstore.adapters.sqlalchemy_user_repository import SqlAlchemyUserRepository
from craftstore.infra.config import storage_backend
from craftstore.infra.db.session import get_session
from craftstore.infra.storage import get_memory_store
from craftstore.ports.cart_repository import CartRepository
from craftstore.ports.catalog_repository import CatalogRepository
from craftstore.ports.user_repository import UserRepository
from craftstore.use_cases.add_cart_item import AddCartItem
from craftstore.use_cases.clear_cart import ClearCart
from craftstore.use_cases.create_cart import CreateCart
from craftstore.use_cases.get_cart import GetCart
from craftstore.use_cases.get_category_by_id import GetCategoryById
from craftstore.use_cases.get_product_by_id import GetProductById
from craftstore.use_cases.get_user_cart import GetUserCart
from craftstore.use_cases.list_categories import ListCategories
from craftstore.use_cases.list_category_products import ListCategoryProducts
from craftstore.use_cases.list_customization_types import ListCustomizationTypes
from craftstore.use_cases.list_featured_products import ListFeaturedProducts
from craftstore.use_cases.register_user import RegisterUser
from craftstore.use_cases.remove_cart_item import RemoveCartItem
from craftstore.use_cases.search_products import SearchProducts
from craftstore.use_cases.update_cart_item_quantity import UpdateCartItemQuantity


# ==============================================================================
# Storage
# ==============================================================================


def get_db() -> Generator[Session | None, None, None]:
    """
    Provides a database session for a single request, or None for the
    in-memory backend.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.
    """
    if storage_backend() != "sql":
        yield None
        return

    with get_session() as session:
        yield session


def get_catalog_repository(db: Session | None = Depends(get_db)) -> CatalogRepository:
    if db is None:
        return get_memory_store().catalog
    return SqlAlchemyCatalogRepository(session=db)


def get_cart_repository(db: Session | None = Depends(get_db)) -> CartRepository:
    if db is None:
        return get_memory_store().carts
    return SqlAlchemyCartRepository(session=db)


def get_user_repository(db: Session | None = Depends(get_db)) -> UserRepository:
    if db is None:
        return get_memory_store().users
    return SqlAlchemyUserRepository(session=db)


# ==============================================================================
# Catalog use cases
# ==============================================================================


def get_list_categories_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> ListCategories:
    return ListCategories(catalog_repository=catalog)


def get_category_by_id_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> GetCategoryById:
    return GetCategoryById(catalog_repository=catalog)


def get_list_category_products_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> ListCategoryProducts:
    return ListCategoryProducts(catalog_repository=catalog)


def get_search_products_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> SearchProducts:
    return SearchProducts(catalog_repository=catalog)


def get_product_by_id_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> GetProductById:
    return GetProductById(catalog_repository=catalog)


def get_list_featured_products_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> ListFeaturedProducts:
    return ListFeaturedProducts(catalog_repository=catalog)


def get_list_customization_types_use_case(
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> ListCustomizationTypes:
    return ListCustomizationTypes(catalog_repository=catalog)


# ==============================================================================
# Cart use cases
# ==============================================================================


def get_create_cart_use_case(
    carts: CartRepository = Depends(get_cart_repository),
    users: UserRepository = Depends(get_user_repository),
) -> CreateCart:
    return CreateCart(cart_repository=carts, user_repository=users)


def get_cart_use_case(
    carts: CartRepository = Depends(get_cart_repository),
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> GetCart:
    return GetCart(cart_repository=carts, catalog_repository=catalog)


def get_clear_cart_use_case(
    carts: CartRepository = Depends(get_cart_repository),
) -> ClearCart:
    return ClearCart(cart_repository=carts)


def get_add_cart_item_use_case(
    carts: CartRepository = Depends(get_cart_repository),
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> AddCartItem:
    return AddCartItem(cart_repository=carts, catalog_repository=catalog)


def get_update_cart_item_quantity_use_case(
    carts: CartRepository = Depends(get_cart_repository),
    catalog: CatalogRepository = Depends(get_catalog_repository),
) -> UpdateCartItemQuantity:
    return UpdateCartItemQuantity(cart_repository=carts, catalog_repository=catalog)


def get_remove_cart_item_use_case(
    carts: CartRepository = Depends(get_cart_repository),
) -> RemoveCartItem:
    return RemoveCartItem(cart_repository=carts)


# ==============================================================================
# User use cases
# ==============================================================================


def get_register_user_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> RegisterUser:
    return RegisterUser(user_repository=users)


def get_user_cart_use_case(
    carts: CartRepository = Depends(get_cart_repository),
    catalog: CatalogRepository = Depends(get_catalog_repository),
    users: UserRepository = Depends(get_user_repository),
) -> GetUserCart:
    return GetUserCart(cart_repository=carts, catalog_repository=catalog, user_repository=users)
