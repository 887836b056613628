from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal

from craftstore.domain.catalog import Category, CustomizationType, Product


@dataclass(frozen=True, slots=True)
class NewCategory:
    name: str
    description: str
    image: str
    product_count: int = 0


@dataclass(frozen=True, slots=True)
class NewCustomizationType:
    name: str
    display_name: str
    color_hex: str


@dataclass(frozen=True, slots=True)
class NewProduct:
    name: str
    description: str
    short_description: str
    price: Decimal
    category_id: int
    image: str
    rating: float = 5.0
    images: tuple[str, ...] = field(default_factory=tuple)
    is_bestseller: bool = False
    is_new: bool = False
    customization_options: tuple[int, ...] = field(default_factory=tuple)
    features: tuple[str, ...] = field(default_factory=tuple)


class CatalogRepository(ABC):
    """
    Port for catalog data access (categories, products, customization types).

    Contract:
        - Listing methods return entities in insertion (id) order
        - Identifiers are assigned sequentially from 1, per entity type
        - Lookups return None for unknown ids; callers raise NotFoundError
        - No filtering or ordering beyond insertion order happens here; the
          domain functions in craftstore.domain.catalog own that logic
    """

    @abstractmethod
    def list_categories(self) -> list[Category]: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Category | None: ...

    @abstractmethod
    def create_category(self, data: NewCategory) -> Category: ...

    @abstractmethod
    def list_products(self) -> list[Product]: ...

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None: ...

    @abstractmethod
    def create_product(self, data: NewProduct) -> Product: ...

    @abstractmethod
    def list_customization_types(self) -> list[CustomizationType]: ...

    @abstractmethod
    def get_customization_type(self, type_id: int) -> CustomizationType | None: ...

    @abstractmethod
    def create_customization_type(self, data: NewCustomizationType) -> CustomizationType: ...
