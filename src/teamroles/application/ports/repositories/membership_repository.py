"""Membership repository port."""

from typing import Protocol
from uuid import UUID

from teamroles.domain.entities import Membership


class MembershipRepository(Protocol):
    """Port for membership persistence."""

    async def get_by_user_and_team(
        self, user_id: UUID, team_id: UUID
    ) -> Membership | None: ...

    async def list_by_role(self, role_id: UUID) -> list[Membership]: ...

    async def create(self, membership: Membership) -> Membership: ...
