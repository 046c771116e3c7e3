"""Shared API dependencies."""

from fastapi import Request

from category_admin.infrastructure.store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Record store created by the application lifespan."""
    return request.app.state.store
