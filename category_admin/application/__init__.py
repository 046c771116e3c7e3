"""Application layer module.

Contains application services (use cases) that orchestrate the record
store, the SKU query engine and the variant regrouping logic.
"""

from category_admin.application.category_mapping_service import CategoryMappingService
from category_admin.application.product_sku_service import ProductSKUService
from category_admin.application.product_variant_service import ProductVariantService
from category_admin.application.regrouping import create_new_group
from category_admin.application.sku_query import (
    PaginatedResult,
    SKUFilter,
    SKUQuery,
    SortOrder,
    query_product_skus,
)
from category_admin.application.team_service import TeamService

__all__ = [
    "CategoryMappingService",
    "ProductSKUService",
    "ProductVariantService",
    "TeamService",
    "create_new_group",
    "PaginatedResult",
    "SKUFilter",
    "SKUQuery",
    "SortOrder",
    "query_product_skus",
]
