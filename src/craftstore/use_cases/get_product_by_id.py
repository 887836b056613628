"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from craftstore.domain.catalog import Product
from craftstore.domain.errors import NotFoundError
from craftstore.domain.ids import parse_entity_id
from craftstore.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: int | str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product by ID.

    Responsibilities:
    - Validate product_id format (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if product doesn't exist
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            catalog_repository: Repository for catalog data access
        """
        self._repository = catalog_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Execute the get product by ID use case.

        Args:
            request: Request containing product_id

        Returns:
            GetProductByIdResponse with the product

        Raises:
            ValidationError: If product_id is not a positive integer
            NotFoundError: If product with given ID doesn't exist
        """
        product_id = parse_entity_id(request.product_id, "product_id")

        product = self._repository.get_product(product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)

        return GetProductByIdResponse(product=product)
