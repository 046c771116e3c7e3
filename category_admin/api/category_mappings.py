"""Category mapping API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from category_admin.api.deps import get_store
from category_admin.api.schemas import (
    CategoryMappingSchema,
    CategoryMappingUpdateRequest,
    ErrorResponse,
    MessageResponse,
)
from category_admin.application.category_mapping_service import CategoryMappingService
from category_admin.infrastructure.store import RecordStore

router = APIRouter(prefix="/api/category-mappings", tags=["Category Mappings"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(store: Annotated[RecordStore, Depends(get_store)]) -> CategoryMappingService:
    """Get category mapping service."""
    return CategoryMappingService(store)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[CategoryMappingSchema],
    summary="List category mappings",
)
async def list_category_mappings(
    service: Annotated[CategoryMappingService, Depends(get_service)],
) -> list[CategoryMappingSchema]:
    """List all category mappings."""
    return [CategoryMappingSchema.model_validate(m) for m in service.list_mappings()]


@router.patch(
    "/{mapping_id}",
    response_model=CategoryMappingSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update selected categories",
)
async def update_category_mapping(
    mapping_id: int,
    request: CategoryMappingUpdateRequest,
    service: Annotated[CategoryMappingService, Depends(get_service)],
) -> CategoryMappingSchema:
    """Replace the selected categories of a mapping.

    Args:
        mapping_id: Mapping identifier.
        request: New category selection.
        service: Category mapping service.

    Returns:
        Updated mapping.
    """
    mapping = service.update_selected_category(mapping_id, request.selected_category)
    return CategoryMappingSchema.model_validate(mapping)


@router.post(
    "/approve",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Approve category mappings",
)
async def approve_category_mappings(
    service: Annotated[CategoryMappingService, Depends(get_service)],
) -> MessageResponse:
    """Approve the current category mappings."""
    service.approve_mappings()
    return MessageResponse(message="Category mappings approved successfully")
