from fastapi import APIRouter, Depends

from craftstore.entrypoints.http.dependencies import (
    get_category_by_id_use_case,
    get_list_categories_use_case,
    get_list_category_products_use_case,
)
from craftstore.entrypoints.http.dtos.catalog import (
    CategoryProductsResponseDTO,
    CategoryResponseDTO,
)
from craftstore.entrypoints.http.error_responses import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from craftstore.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from craftstore.use_cases.get_category_by_id import GetCategoryById, GetCategoryByIdRequest
from craftstore.use_cases.list_categories import ListCategories
from craftstore.use_cases.list_category_products import (
    ListCategoryProducts,
    ListCategoryProductsRequest,
)

router = APIRouter(tags=["Categories"])


@router.get(
    "/categories",
    response_model=list[CategoryResponseDTO],
    summary="List categories",
)
def list_categories(
    use_case: ListCategories = Depends(get_list_categories_use_case),
) -> list[CategoryResponseDTO]:
    result = use_case.execute()
    return [CatalogMapper.to_category_response(c) for c in result.categories]


@router.get(
    "/categories/{category_id}",
    response_model=CategoryResponseDTO,
    summary="Get category",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def get_category(
    category_id: str,
    use_case: GetCategoryById = Depends(get_category_by_id_use_case),
) -> CategoryResponseDTO:
    """category_id arrives as text so malformed ids get a domain ValidationError (422)."""
    result = use_case.execute(GetCategoryByIdRequest(category_id=category_id))
    return CatalogMapper.to_category_response(result.category)


@router.get(
    "/categories/{category_id}/products",
    response_model=CategoryProductsResponseDTO,
    summary="List products of a category",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def list_category_products(
    category_id: str,
    use_case: ListCategoryProducts = Depends(get_list_category_products_use_case),
) -> CategoryProductsResponseDTO:
    result = use_case.execute(ListCategoryProductsRequest(category_id=category_id))
    return CategoryProductsResponseDTO(
        category=CatalogMapper.to_category_response(result.category),
        products=[CatalogMapper.to_product_response(p) for p in result.products],
        total=len(result.products),
    )
