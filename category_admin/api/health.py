"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from category_admin.api.deps import get_store
from category_admin.infrastructure.config import settings
from category_admin.infrastructure.store import RecordStore

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class StatsResponse(BaseModel):
    """Record counts per collection."""

    category_mappings: int
    product_variants: int
    product_skus: int
    team_members: int
    users: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="category-admin-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(request: Request) -> dict[str, str]:
    """Ready once the lifespan has built the record store."""
    store = getattr(request.app.state, "store", None)
    return {"status": "ready" if store is not None else "starting"}


@router.get("/stats", response_model=StatsResponse)
async def get_stats(store: Annotated[RecordStore, Depends(get_store)]) -> StatsResponse:
    """Get record counts."""
    return StatsResponse(**store.counts())
