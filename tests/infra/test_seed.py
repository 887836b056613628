"""Tests for the reference catalog seed."""

from __future__ import annotations

from decimal import Decimal

from craftstore.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from craftstore.infra.seed import CATEGORIES, CUSTOMIZATION_TYPES, seed_catalog


def test_seed_populates_empty_catalog() -> None:
    repository = InMemoryCatalogRepository()

    assert seed_catalog(repository) is True

    assert len(repository.list_customization_types()) == len(CUSTOMIZATION_TYPES) == 5
    assert len(repository.list_categories()) == len(CATEGORIES) == 4
    assert len(repository.list_products()) == 8


def test_seed_is_idempotent() -> None:
    repository = InMemoryCatalogRepository()
    seed_catalog(repository)

    assert seed_catalog(repository) is False
    assert len(repository.list_products()) == 8


def test_seeded_products_reference_existing_rows() -> None:
    repository = InMemoryCatalogRepository()
    seed_catalog(repository)

    category_ids = {c.id for c in repository.list_categories()}
    type_ids = {t.id for t in repository.list_customization_types()}

    for product in repository.list_products():
        assert product.category_id in category_ids
        assert set(product.customization_options) <= type_ids
        assert isinstance(product.price, Decimal)
        assert 0 <= product.rating <= 5


def test_seeded_reference_product() -> None:
    repository = InMemoryCatalogRepository()
    seed_catalog(repository)

    journal = repository.get_product(1)

    assert journal is not None
    assert journal.name == "Leather Journal"
    assert journal.price == Decimal("79.99")
    assert journal.is_bestseller is True
    assert journal.customization_options == (1, 3)
