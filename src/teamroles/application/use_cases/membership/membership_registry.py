"""Membership registry - assign roles to user/team pairs and resolve them."""

from uuid import UUID

import structlog

from teamroles.application.use_cases.role.role_catalog import RoleCatalog
from teamroles.domain.entities import Membership, Role
from teamroles.domain.exceptions import (
    InvalidArgument,
    ResourceExists,
    ResourceNotFound,
)

logger = structlog.get_logger(__name__)


class MembershipRegistry:
    """Create and resolve user-team-role associations."""

    def __init__(self, unit_of_work_factory: type, role_catalog: RoleCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._role_catalog = role_catalog

    async def assign(self, membership: Membership) -> Membership:
        """Assign role to user on team.

        Checks run before any write, in order: role reference present,
        (user, team) pair free, role exists. The unique index on the pair
        still rejects a concurrent duplicate at insert time.
        """
        if membership.role_id is None:
            raise InvalidArgument("role")

        async with self._uow_factory() as uow:
            existing = await uow.memberships.get_by_user_and_team(
                membership.user_id, membership.team_id
            )
            if existing:
                logger.warning(
                    "membership_exists",
                    user_id=str(membership.user_id),
                    team_id=str(membership.team_id),
                )
                raise ResourceExists("Membership")

        await self._role_catalog.get_by_id(membership.role_id)

        async with self._uow_factory() as uow:
            created = await uow.memberships.create(
                Membership(
                    id=None,
                    user_id=membership.user_id,
                    team_id=membership.team_id,
                    role_id=membership.role_id,
                )
            )

        logger.info(
            "membership_assigned",
            membership_id=str(created.id),
            user_id=str(created.user_id),
            team_id=str(created.team_id),
            role_id=str(created.role_id),
        )
        return created

    async def get_memberships(self, role_id: UUID) -> list[Membership]:
        """List memberships holding role. Empty list when none."""
        async with self._uow_factory() as uow:
            return await uow.memberships.list_by_role(role_id)

    async def resolve_role(self, user_id: UUID, team_id: UUID) -> Role:
        """Get role held by user on team as a detached snapshot."""
        async with self._uow_factory() as uow:
            membership = await uow.memberships.get_by_user_and_team(user_id, team_id)
            if not membership:
                raise ResourceNotFound("Membership", f"{user_id}/{team_id}")
            role = await uow.roles.get_by_id(membership.role_id)
            if not role:
                raise ResourceNotFound("Role", membership.role_id)
        return Role(id=role.id, name=role.name)
