"""Domain layer.

Entities, enums, update structures and the error taxonomy.
"""

from category_admin.domain.entities import (
    CategoryMapping,
    ProductSKU,
    ProductTag,
    ProductVariant,
    SKUStatus,
    TagColor,
    TagType,
    TeamMember,
    TeamRole,
    User,
    utc_now,
)
from category_admin.domain.exceptions import (
    DomainError,
    NotFoundError,
    ValidationFailedError,
)
from category_admin.domain.updates import (
    UNSET,
    CategoryMappingUpdate,
    Patch,
    ProductSKUUpdate,
    ProductVariantUpdate,
    Unset,
)

__all__ = [
    # Entities
    "CategoryMapping",
    "ProductSKU",
    "ProductTag",
    "ProductVariant",
    "TeamMember",
    "User",
    "utc_now",
    # Enums
    "SKUStatus",
    "TagColor",
    "TagType",
    "TeamRole",
    # Updates
    "UNSET",
    "Unset",
    "Patch",
    "CategoryMappingUpdate",
    "ProductSKUUpdate",
    "ProductVariantUpdate",
    # Errors
    "DomainError",
    "NotFoundError",
    "ValidationFailedError",
]
