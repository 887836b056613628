from fastapi import APIRouter, Depends

from craftstore.entrypoints.http.dependencies import (
    get_list_customization_types_use_case,
    get_list_featured_products_use_case,
    get_product_by_id_use_case,
    get_search_products_use_case,
)
from craftstore.entrypoints.http.dtos.catalog import (
    CustomizationTypeResponseDTO,
    FeaturedProductsQueryDTO,
    ProductListResponseDTO,
    ProductResponseDTO,
    ProductsQueryDTO,
)
from craftstore.entrypoints.http.error_responses import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from craftstore.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from craftstore.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from craftstore.use_cases.list_customization_types import ListCustomizationTypes
from craftstore.use_cases.list_featured_products import (
    ListFeaturedProducts,
    ListFeaturedProductsRequest,
)
from craftstore.use_cases.search_products import SearchProducts

router = APIRouter(tags=["Products"])


@router.get(
    "/products",
    response_model=ProductListResponseDTO,
    summary="Search products",
    description="""
    List products with optional filters and sort order.

    ## Filters
    - All filters use AND semantics; only parameters that are sent apply
    - category_id: exact match
    - min_price/max_price: inclusive, decimal strings
    - customization_types: comma-separated ids, product must support any of them
    - search: case-insensitive substring of name or descriptions
    - min_rating: inclusive (0 is a real threshold)

    ## Sort
    popular | newest | price-asc | price-desc | rating

    ## Example
    ```
    GET /v1/products?customization_types=1,3&max_price=150.00&sort=price-asc
    ```
    """,
    responses=VALIDATION_RESPONSE,
)
def search_products(
    query: ProductsQueryDTO = Depends(),
    use_case: SearchProducts = Depends(get_search_products_use_case),
) -> ProductListResponseDTO:
    """Search products endpoint following parse -> execute -> map -> return pattern."""
    request = CatalogMapper.to_search_request(query)

    result = use_case.execute(request)

    return CatalogMapper.to_product_list_response(result.products)


@router.get(
    "/products/{product_id}",
    response_model=ProductResponseDTO,
    summary="Get product",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_product_by_id_use_case),
) -> ProductResponseDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))
    return CatalogMapper.to_product_response(result.product)


@router.get(
    "/featured-products",
    response_model=ProductListResponseDTO,
    summary="Featured products",
    description="Bestsellers first, then new products, then highest rated.",
)
def list_featured_products(
    query: FeaturedProductsQueryDTO = Depends(),
    use_case: ListFeaturedProducts = Depends(get_list_featured_products_use_case),
) -> ProductListResponseDTO:
    result = use_case.execute(ListFeaturedProductsRequest(limit=query.limit))
    return CatalogMapper.to_product_list_response(result.products)


@router.get(
    "/customization-types",
    response_model=list[CustomizationTypeResponseDTO],
    summary="List customization types",
)
def list_customization_types(
    use_case: ListCustomizationTypes = Depends(get_list_customization_types_use_case),
) -> list[CustomizationTypeResponseDTO]:
    result = use_case.execute()
    return [CatalogMapper.to_customization_type_response(t) for t in result.customization_types]
