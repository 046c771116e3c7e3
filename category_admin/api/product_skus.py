"""Product enrichment (SKU) API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from category_admin.api.deps import get_store
from category_admin.api.schemas import (
    ErrorResponse,
    ProductSKUCreateRequest,
    ProductSKUListResponse,
    ProductSKUSchema,
    ProductSKUUpdateRequest,
)
from category_admin.application.product_sku_service import ProductSKUService
from category_admin.application.sku_query import SKUFilter, SKUQuery, SortOrder
from category_admin.domain.updates import ProductSKUUpdate
from category_admin.infrastructure.config import settings
from category_admin.infrastructure.store import RecordStore

router = APIRouter(prefix="/api/product-skus", tags=["Product SKUs"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(store: Annotated[RecordStore, Depends(get_store)]) -> ProductSKUService:
    """Get product SKU service."""
    return ProductSKUService(store)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductSKUListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List product SKUs",
)
async def list_product_skus(
    service: Annotated[ProductSKUService, Depends(get_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = settings.default_page_size,
    sort_by: Annotated[str, Query(alias="sortBy")] = "dateUploaded",
    sort_order: Annotated[SortOrder, Query(alias="sortOrder")] = SortOrder.DESC,
    seller: Annotated[str | None, Query()] = None,
    brand: Annotated[str | None, Query()] = None,
    category: Annotated[str | None, Query()] = None,
    sku_status: Annotated[str | None, Query(alias="status")] = None,
    available_on_brand_website: Annotated[
        str | None, Query(alias="availableOnBrandWebsite")
    ] = None,
) -> ProductSKUListResponse:
    """List SKUs with filtering, sorting and pagination.

    Args:
        page: Page number (1-based).
        limit: Items per page.
        sort_by: Field to sort by (camelCase name).
        sort_order: Sort order (asc, desc).
        seller: Seller substring.
        brand: Brand substring.
        category: Category substring.
        sku_status: Exact review status.
        available_on_brand_website: Exact availability flag.

    Returns:
        Page of SKUs and the filtered total.
    """
    query = SKUQuery(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        filters=SKUFilter(
            seller=seller,
            brand=brand,
            category=category,
            status=sku_status,
            available_on_brand_website=available_on_brand_website,
        ),
    )
    result = service.list_skus(query)

    return ProductSKUListResponse(
        data=[ProductSKUSchema.model_validate(sku) for sku in result.data],
        total=result.total,
        page=result.page,
        limit=result.limit,
        has_more=result.has_more,
    )


@router.post(
    "",
    response_model=ProductSKUSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product SKU",
)
async def create_product_sku(
    request: ProductSKUCreateRequest,
    service: Annotated[ProductSKUService, Depends(get_service)],
) -> ProductSKUSchema:
    """Create a SKU; the upload time is set by the server."""
    sku = service.create_sku(
        mpn=request.mpn,
        product_name=request.product_name,
        seller=request.seller,
        brand=request.brand,
        category=request.category,
        status=request.status,
        available_on_brand_website=request.available_on_brand_website,
    )
    return ProductSKUSchema.model_validate(sku)


@router.patch(
    "/{sku_id}",
    response_model=ProductSKUSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product SKU",
)
async def update_product_sku(
    sku_id: int,
    request: ProductSKUUpdateRequest,
    service: Annotated[ProductSKUService, Depends(get_service)],
) -> ProductSKUSchema:
    """Apply a partial update to a SKU.

    Args:
        sku_id: SKU identifier.
        request: Fields to change.
        service: Product SKU service.

    Returns:
        Updated SKU.
    """
    update = ProductSKUUpdate(**request.model_dump(exclude_unset=True, exclude_none=True))
    sku = service.update_sku(sku_id, update)
    return ProductSKUSchema.model_validate(sku)
