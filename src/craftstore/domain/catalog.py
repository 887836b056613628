from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, Sequence

from craftstore.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when product filter parameters are invalid."""

    pass


MAX_RATING = 5.0


@dataclass(frozen=True, slots=True)
class Category:
    id: int
    name: str
    description: str
    image: str
    product_count: int = 0  # Informational only, never recomputed


@dataclass(frozen=True, slots=True)
class CustomizationType:
    id: int
    name: str  # Machine key, e.g. "engraving"
    display_name: str
    color_hex: str


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    description: str
    short_description: str
    price: Decimal
    category_id: int
    rating: float
    image: str
    images: tuple[str, ...] = ()
    is_bestseller: bool = False
    is_new: bool = False
    customization_options: tuple[int, ...] = ()
    features: tuple[str, ...] = ()


class SortKey(str, Enum):
    POPULAR = "popular"
    NEWEST = "newest"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING = "rating"


@dataclass(frozen=True, slots=True)
class PriceRange:
    min: Decimal | None = None
    max: Decimal | None = None


@dataclass(frozen=True, slots=True)
class ProductFilters:
    """
    Optional product criteria, combined with AND semantics.

    None means "no constraint" for every field. A present value is always
    a constraint, so min_rating=0 filters out negative ratings and
    category_id is matched even when falsy.
    """

    category_id: int | None = None
    price_range: PriceRange | None = None
    customization_types: tuple[int, ...] | None = None
    search: str | None = None
    min_rating: float | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        errors: list[dict[str, str]] = []

        if self.price_range is not None:
            for field, bound in (("min_price", self.price_range.min), ("max_price", self.price_range.max)):
                if bound is None:
                    continue
                # Guardrails: prevent float leakage past boundary
                if not isinstance(bound, Decimal):
                    errors.append(
                        {
                            "field": field,
                            "message": "Must be Decimal or None (no floats past the boundary)",
                            "code": "INVALID_DECIMAL",
                        }
                    )
                elif bound < 0:
                    errors.append(
                        {"field": field, "message": "Must be >= 0", "code": "INVALID_RANGE"}
                    )

            low, high = self.price_range.min, self.price_range.max
            if (
                not errors
                and low is not None
                and high is not None
                and low > high
            ):
                errors.append(
                    {
                        "field": "min_price",
                        "message": "Must be less than or equal to max_price",
                        "code": "INVALID_RANGE",
                    }
                )

        if self.min_rating is not None and not 0 <= self.min_rating <= MAX_RATING:
            errors.append(
                {
                    "field": "min_rating",
                    "message": f"Must be between 0 and {MAX_RATING:g}",
                    "code": "INVALID_RANGE",
                }
            )

        if self.customization_types is not None and any(
            isinstance(type_id, bool) or not isinstance(type_id, int) or type_id < 1
            for type_id in self.customization_types
        ):
            errors.append(
                {
                    "field": "customization_types",
                    "message": "Must contain positive integer ids only",
                    "code": "INVALID_ID",
                }
            )

        if errors:
            raise FilterValidationError(errors=errors)


# ==============================================================================
# Filtering
# ==============================================================================


def filter_products(products: Iterable[Product], filters: ProductFilters) -> list[Product]:
    """Return the products matching every present criterion, in input order."""
    return [product for product in products if _matches(product, filters)]


def _matches(product: Product, filters: ProductFilters) -> bool:
    if filters.category_id is not None and product.category_id != filters.category_id:
        return False

    if filters.price_range is not None:
        if filters.price_range.min is not None and product.price < filters.price_range.min:
            return False
        if filters.price_range.max is not None and product.price > filters.price_range.max:
            return False

    # OR within the list: any shared customization type is enough
    if filters.customization_types and not set(filters.customization_types).intersection(
        product.customization_options
    ):
        return False

    if filters.search is not None:
        needle = filters.search.lower()
        haystacks = (product.name, product.description, product.short_description)
        if not any(needle in text.lower() for text in haystacks):
            return False

    if filters.min_rating is not None and product.rating < filters.min_rating:
        return False

    return True


# ==============================================================================
# Ordering
# ==============================================================================


def sort_products(products: Sequence[Product], sort: SortKey | None) -> list[Product]:
    """
    Return a new list ordered by the given strategy.

    Sorting is stable: ties keep their incoming (insertion) order.
    """
    if sort is None:
        return list(products)

    if sort in (SortKey.POPULAR, SortKey.RATING):
        return sorted(products, key=lambda p: p.rating, reverse=True)
    if sort is SortKey.NEWEST:
        return sorted(products, key=lambda p: not p.is_new)
    if sort is SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort is SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)

    raise ValueError(f"Unsupported sort key: {sort!r}")


def rank_featured(products: Sequence[Product], limit: int | None = None) -> list[Product]:
    """
    Homepage ordering: bestsellers first, then new products, then by rating.

    limit=None returns every product, limit <= 0 returns nothing.
    """
    if limit is not None and limit <= 0:
        return []

    ranked = sorted(
        products,
        key=lambda p: (not p.is_bestseller, not p.is_new, -p.rating),
    )

    if limit is not None:
        return ranked[:limit]
    return ranked
