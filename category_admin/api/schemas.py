"""API schemas for the category admin dashboard.

Pydantic models for request/response validation and serialization.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from category_admin.domain.entities import SKUStatus, TagColor, TagType, TeamRole


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, readable from domain dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(CamelModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(CamelModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    errors: list[ErrorDetail] = Field(
        default_factory=list, description="Field-level validation problems"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


# ============================================================================
# Category Mapping Schemas
# ============================================================================


class CategoryMappingSchema(CamelModel):
    """Category mapping row."""

    id: int
    serial_number: int
    product_name: str
    incoming_seller_category: list[str]
    ml_suggested_category: list[str]
    selected_category: list[str]


class CategoryMappingUpdateRequest(CamelModel):
    """Replace the selected categories of a mapping."""

    selected_category: list[str] = Field(
        ..., description="New category selection (replaces the old one)"
    )


# ============================================================================
# Product Variant Schemas
# ============================================================================


class ProductTagSchema(CamelModel):
    """Tag inside a variant group."""

    text: str = Field(..., min_length=1)
    type: TagType = TagType.PRODUCT
    color: TagColor = TagColor.BLUE


class ProductVariantSchema(CamelModel):
    """Product variant group."""

    id: int
    serial_number: int
    seller: str
    ee_category: str
    brand: str
    product_tags: list[ProductTagSchema]
    grouping_logic: str


class ProductVariantUpdateRequest(CamelModel):
    """Replace the tags of a group. An empty list deletes the group."""

    product_tags: list[ProductTagSchema]


class CreateGroupRequest(CamelModel):
    """Move a tag into a new group."""

    source_variant_id: int = Field(..., description="Group the tag is taken from")
    tag_text: str = Field(..., min_length=1, description="Literal text of the tag")


# ============================================================================
# Product SKU Schemas
# ============================================================================


class ProductSKUSchema(CamelModel):
    """Product SKU under enrichment review."""

    id: int
    mpn: str
    product_name: str
    date_uploaded: datetime
    seller: str
    brand: str
    category: str
    status: SKUStatus
    available_on_brand_website: bool


class ProductSKUCreateRequest(CamelModel):
    """New SKU. ``id`` and ``dateUploaded`` are assigned by the server."""

    mpn: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    seller: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    status: SKUStatus = Field(default=SKUStatus.SAVED)
    available_on_brand_website: bool = Field(default=False)


class ProductSKUUpdateRequest(CamelModel):
    """Partial SKU update; omitted fields keep their value."""

    mpn: str | None = Field(default=None, min_length=1)
    product_name: str | None = Field(default=None, min_length=1)
    seller: str | None = Field(default=None, min_length=1)
    brand: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    status: SKUStatus | None = None
    available_on_brand_website: bool | None = None


class ProductSKUListResponse(CamelModel):
    """One page of SKUs."""

    data: list[ProductSKUSchema] = Field(..., description="SKUs on this page")
    total: int = Field(..., description="Number of SKUs matching the filters")
    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    has_more: bool = Field(..., description="Whether there are more pages")


# ============================================================================
# Team Member Schemas
# ============================================================================


class TeamMemberSchema(CamelModel):
    """Team member with granted roles."""

    id: int
    email: str
    name: str
    roles: list[TeamRole]


class TeamMemberCreateRequest(CamelModel):
    """Invite a team member."""

    email: EmailStr = Field(..., description="Member email address")
    name: str = Field(..., min_length=1, description="Display name")
    roles: list[TeamRole] = Field(..., min_length=1, description="Granted roles")
