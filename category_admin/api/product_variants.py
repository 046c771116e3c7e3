"""Product variant grouping API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from category_admin.api.deps import get_store
from category_admin.api.schemas import (
    CreateGroupRequest,
    ErrorResponse,
    MessageResponse,
    ProductTagSchema,
    ProductVariantSchema,
    ProductVariantUpdateRequest,
)
from category_admin.application.product_variant_service import ProductVariantService
from category_admin.domain.entities import ProductTag
from category_admin.infrastructure.store import RecordStore

router = APIRouter(prefix="/api/product-variants", tags=["Product Variants"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(store: Annotated[RecordStore, Depends(get_store)]) -> ProductVariantService:
    """Get product variant service."""
    return ProductVariantService(store)


# ============================================================================
# Converters
# ============================================================================


def tag_from_schema(tag: ProductTagSchema) -> ProductTag:
    """Convert a tag schema to the domain tag."""
    return ProductTag(text=tag.text, type=tag.type, color=tag.color)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductVariantSchema],
    summary="List product variant groups",
)
async def list_product_variants(
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> list[ProductVariantSchema]:
    """List all product variant groups."""
    return [ProductVariantSchema.model_validate(v) for v in service.list_variants()]


@router.patch(
    "/{variant_id}",
    response_model=ProductVariantSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Replace group tags",
    description="Replace the tags of a group. An empty tag list deletes the group "
    "and echoes the deleted record.",
)
async def update_product_variant(
    variant_id: int,
    request: ProductVariantUpdateRequest,
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> ProductVariantSchema:
    """Replace the tags of a product variant group.

    Args:
        variant_id: Group identifier.
        request: New tag list.
        service: Product variant service.

    Returns:
        Updated group, or the deleted group when no tags remain.
    """
    variant = service.update_tags(
        variant_id, [tag_from_schema(tag) for tag in request.product_tags]
    )
    return ProductVariantSchema.model_validate(variant)


@router.post(
    "/create-group",
    response_model=ProductVariantSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Split a tag into a new group",
)
async def create_group(
    request: CreateGroupRequest,
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> ProductVariantSchema:
    """Move a tag out of its group into a new single-tag group.

    Args:
        request: Source group and tag text.
        service: Product variant service.

    Returns:
        The new group.
    """
    variant = service.split_tag(request.source_variant_id, request.tag_text)
    return ProductVariantSchema.model_validate(variant)


@router.post(
    "/approve",
    response_model=MessageResponse,
    summary="Approve product groupings",
)
async def approve_product_groupings(
    service: Annotated[ProductVariantService, Depends(get_service)],
) -> MessageResponse:
    """Approve the current product groupings."""
    service.approve_groupings()
    return MessageResponse(message="Product groupings approved successfully")
