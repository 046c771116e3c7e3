"""Access control application service: team members and user profiles."""

from datetime import datetime
from uuid import uuid4

import structlog

from category_admin.domain.entities import TeamMember, TeamRole, User, utc_now
from category_admin.domain.exceptions import ValidationFailedError
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()


class TeamService:
    """Use cases for the access control tab."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Team members
    # ------------------------------------------------------------------

    def list_members(self) -> list[TeamMember]:
        """All team members in insertion order."""
        return self.store.team_members.all()

    def add_member(self, email: str, name: str, roles: list[TeamRole]) -> TeamMember:
        """Add a team member.

        Email format is checked at the API boundary. Emails are not required
        to be unique. Repeated roles are collapsed, first occurrence wins.

        Raises:
            ValidationFailedError: If no role or a blank name is given.
        """
        unique_roles = list(dict.fromkeys(TeamRole(role) for role in roles))
        if not unique_roles:
            raise ValidationFailedError.for_field("roles", "At least one role is required")
        if not name.strip():
            raise ValidationFailedError.for_field("name", "name must not be empty")

        member = self.store.team_members.insert(email=email, name=name, roles=unique_roles)
        logger.info(
            "Team member added",
            member_id=member.id,
            roles=[role.value for role in member.roles],
        )
        return member

    def remove_member(self, member_id: int) -> None:
        """Remove a team member. Unknown ids are ignored."""
        removed = self.store.team_members.delete(member_id)
        logger.info("Team member removed", member_id=member_id, existed=removed)

    # ------------------------------------------------------------------
    # User profiles
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> User | None:
        """Get a user profile by id."""
        return self.store.users.get(user_id)

    def upsert_user(
        self,
        user_id: str | None = None,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
        created_at: datetime | None = None,
    ) -> User:
        """Insert or replace a user profile.

        ``created_at`` survives replacement; ``updated_at`` is always now.
        """
        user_id = user_id or str(uuid4())
        existing = self.store.users.get(user_id)
        now = utc_now()

        user = User(
            id=user_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            created_at=existing.created_at if existing else (created_at or now),
            updated_at=now,
        )
        stored = self.store.users.put(user)
        logger.info("User upserted", user_id=user_id, created=existing is None)
        return stored
