"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from teamroles.domain.entities import Role
from teamroles.domain.exceptions import ResourceExists


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            "SELECT id, name FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Role(id=r[0], name=r[1])

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            "SELECT id, name FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Role(id=r[0], name=r[1])

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute("SELECT id, name FROM role")
        rows = await cur.fetchall()
        return [Role(id=r[0], name=r[1]) for r in rows]

    async def create(self, role: Role) -> Role:
        """Insert role; id is generated by the database."""
        try:
            cur = await self._conn.execute(
                "INSERT INTO role (name) VALUES (%s) RETURNING id, name",
                (role.name,),
            )
        except UniqueViolation as e:
            raise ResourceExists("Role") from e
        r = await cur.fetchone()
        return Role(id=r[0], name=r[1])
