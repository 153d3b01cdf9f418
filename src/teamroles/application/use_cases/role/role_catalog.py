"""Role catalog - role identity and lookup."""

from uuid import UUID

import structlog

from teamroles.domain.entities import Role
from teamroles.domain.exceptions import (
    ConfigurationError,
    InvalidArgument,
    ResourceExists,
    ResourceNotFound,
)

logger = structlog.get_logger(__name__)

# Matches role.name VARCHAR(255)
MAX_ROLE_NAME_LENGTH = 255


class RoleCatalog:
    """Create, look up and list roles; resolve the configured default role."""

    def __init__(self, unit_of_work_factory: type, default_role_name: str) -> None:
        self._uow_factory = unit_of_work_factory
        self._default_role_name = default_role_name

    @property
    def default_role_name(self) -> str:
        return self._default_role_name

    async def create(self, role: Role) -> Role:
        """Create role. Name must be a non-blank string, at most 255 chars, unique."""
        if role.name is not None and not isinstance(role.name, str):
            raise InvalidArgument("name")
        name = (role.name or "").strip()
        if not name or len(name) > MAX_ROLE_NAME_LENGTH:
            raise InvalidArgument("name")

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise ResourceExists("Role")
            created = await uow.roles.create(Role(id=None, name=name))

        logger.info("role_created", role_id=str(created.id), name=created.name)
        return created

    async def get_by_id(self, role_id: UUID) -> Role:
        """Get role by id or raise ResourceNotFound."""
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
        if not role:
            raise ResourceNotFound("Role", role_id)
        return role

    async def list_roles(self) -> list[Role]:
        """List all roles, in store order."""
        async with self._uow_factory() as uow:
            return await uow.roles.list_all()

    async def get_default(self) -> Role:
        """Get the configured default role.

        A missing default role is a deployment defect, so it raises
        ConfigurationError rather than ResourceNotFound.
        """
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(self._default_role_name)
        if not role:
            raise ConfigurationError(
                f"Default role '{self._default_role_name}' is not configured"
            )
        return role

    async def ensure_default(self) -> Role:
        """Startup check - fail fast when the default role is missing."""
        role = await self.get_default()
        logger.info("default_role_resolved", role_id=str(role.id), name=role.name)
        return role
