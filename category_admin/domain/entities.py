"""Domain entities for the category admin dashboard.

Plain dataclasses owned by the record store. Relationships between
records are expressed through shared field values (a variant group is
identified by seller, category and brand), never through references.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


# ============================================================================
# Enums
# ============================================================================


class TagType(str, Enum):
    """Kind of entry inside a product variant group."""

    GROUP = "group"
    PRODUCT = "product"


class TagColor(str, Enum):
    """Tag color; signals how confident the grouping suggestion is."""

    BLUE = "blue"
    RED = "red"


class SKUStatus(str, Enum):
    """Enrichment review status of a product SKU."""

    SAVED = "Saved"
    TO_BE_REVIEWED = "To be reviewed"
    UNDER_REVIEW = "Under review"
    REVIEWED = "Reviewed"


class TeamRole(str, Enum):
    """Roles that can be granted to a team member."""

    ADMIN = "admin"
    PRODUCT_ENRICHMENT = "product_enrichment"
    PRODUCT_GROUPING = "product_grouping"
    CATEGORY_MAPPING = "category_mapping"


# ============================================================================
# Category Mapping
# ============================================================================


@dataclass
class CategoryMapping:
    """Seller category path mapped to platform categories.

    Attributes:
        id: Store-assigned identifier.
        serial_number: Row number shown in the dashboard.
        product_name: Product the mapping was derived from.
        incoming_seller_category: Category path as sent by the seller.
        ml_suggested_category: Categories proposed by the upstream model.
        selected_category: Categories chosen by the reviewer.
    """

    id: int
    serial_number: int
    product_name: str
    incoming_seller_category: list[str] = field(default_factory=list)
    ml_suggested_category: list[str] = field(default_factory=list)
    selected_category: list[str] = field(default_factory=list)


# ============================================================================
# Product Variants
# ============================================================================


@dataclass
class ProductTag:
    """Single labelled product reference inside a variant group."""

    text: str
    type: TagType = TagType.PRODUCT
    color: TagColor = TagColor.BLUE


@dataclass
class ProductVariant:
    """Group of product tags sharing seller, category and brand."""

    id: int
    serial_number: int
    seller: str
    ee_category: str
    brand: str
    product_tags: list[ProductTag] = field(default_factory=list)
    grouping_logic: str = ""


# ============================================================================
# Product SKUs
# ============================================================================


@dataclass
class ProductSKU:
    """Sellable product record under enrichment review.

    ``date_uploaded`` is set once at creation and never patched.
    """

    id: int
    mpn: str
    product_name: str
    seller: str
    brand: str
    category: str
    status: SKUStatus = SKUStatus.SAVED
    available_on_brand_website: bool = False
    date_uploaded: datetime = field(default_factory=utc_now)


# ============================================================================
# Access Control
# ============================================================================


@dataclass
class TeamMember:
    """Dashboard user with one or more roles."""

    id: int
    email: str
    name: str
    roles: list[TeamRole] = field(default_factory=list)


@dataclass
class User:
    """Authentication profile as delivered by the identity provider."""

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
