"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from category_admin.api.category_mappings import router as category_mappings_router
from category_admin.api.health import router as health_router
from category_admin.api.product_skus import router as product_skus_router
from category_admin.api.product_variants import router as product_variants_router
from category_admin.api.team_members import router as team_members_router

__all__ = [
    "category_mappings_router",
    "health_router",
    "product_skus_router",
    "product_variants_router",
    "team_members_router",
]
