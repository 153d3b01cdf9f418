"""PostgreSQL membership repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from teamroles.domain.entities import Membership
from teamroles.domain.exceptions import ResourceExists

_COLUMNS = "id, user_id, team_id, role_id, created_at"


def _row_to_membership(r: tuple) -> Membership:
    return Membership(
        id=r[0],
        user_id=r[1],
        team_id=r[2],
        role_id=r[3],
        created_at=r[4],
    )


class PostgresMembershipRepository:
    """Membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_user_and_team(
        self, user_id: UUID, team_id: UUID
    ) -> Membership | None:
        """Get membership of user on team."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM membership WHERE user_id = %s AND team_id = %s",
            (user_id, team_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_membership(r)

    async def list_by_role(self, role_id: UUID) -> list[Membership]:
        """List memberships holding role."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM membership WHERE role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_membership(r) for r in rows]

    async def create(self, membership: Membership) -> Membership:
        """Insert membership; id and created_at are generated by the database.

        The unique index on (user_id, team_id) is the final guard against
        concurrent duplicates.
        """
        try:
            cur = await self._conn.execute(
                "INSERT INTO membership (user_id, team_id, role_id) "
                f"VALUES (%s, %s, %s) RETURNING {_COLUMNS}",
                (membership.user_id, membership.team_id, membership.role_id),
            )
        except UniqueViolation as e:
            raise ResourceExists("Membership") from e
        r = await cur.fetchone()
        return _row_to_membership(r)
