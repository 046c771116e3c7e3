"""Access control API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from category_admin.api.deps import get_store
from category_admin.api.schemas import (
    ErrorResponse,
    MessageResponse,
    TeamMemberCreateRequest,
    TeamMemberSchema,
)
from category_admin.application.team_service import TeamService
from category_admin.infrastructure.store import RecordStore

router = APIRouter(prefix="/api/team-members", tags=["Team Members"])


def get_service(store: Annotated[RecordStore, Depends(get_store)]) -> TeamService:
    """Get team service."""
    return TeamService(store)


@router.get("", response_model=list[TeamMemberSchema], summary="List team members")
async def list_team_members(
    service: Annotated[TeamService, Depends(get_service)],
) -> list[TeamMemberSchema]:
    """List all team members."""
    return [TeamMemberSchema.model_validate(m) for m in service.list_members()]


@router.post(
    "",
    response_model=TeamMemberSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Add team member",
)
async def add_team_member(
    request: TeamMemberCreateRequest,
    service: Annotated[TeamService, Depends(get_service)],
) -> TeamMemberSchema:
    """Add a team member with at least one role."""
    member = service.add_member(email=str(request.email), name=request.name, roles=request.roles)
    return TeamMemberSchema.model_validate(member)


@router.delete(
    "/{member_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Remove team member",
)
async def remove_team_member(
    member_id: int,
    service: Annotated[TeamService, Depends(get_service)],
) -> MessageResponse:
    """Remove a team member. Removing an unknown id still succeeds."""
    service.remove_member(member_id)
    return MessageResponse(message="Team member removed successfully")
