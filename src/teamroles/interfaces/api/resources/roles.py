"""Role API resources."""

from uuid import UUID

import falcon.asgi

from teamroles.application.use_cases.membership.membership_registry import (
    MembershipRegistry,
)
from teamroles.application.use_cases.role.role_catalog import RoleCatalog
from teamroles.domain.entities import Role
from teamroles.domain.exceptions import InvalidArgument, ResourceExists, ResourceNotFound
from teamroles.interfaces.api.resources.serializers import role_to_dict


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(self, role_catalog: RoleCatalog) -> None:
        self._catalog = role_catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles."""
        roles = await self._catalog.list_roles()
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role."""
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return

        try:
            role = await self._catalog.create(Role(id=None, name=body.get("name") or ""))
            resp.media = role_to_dict(role)
            resp.status = falcon.HTTP_201
        except InvalidArgument as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except ResourceExists as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}


class RoleResource:
    """GET /v1/roles/{role_id} - get role."""

    def __init__(self, role_catalog: RoleCatalog) -> None:
        self._catalog = role_catalog

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        """Get role by id."""
        try:
            rid = UUID(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        try:
            role = await self._catalog.get_by_id(rid)
            resp.media = role_to_dict(role)
            resp.status = falcon.HTTP_200
        except ResourceNotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class DefaultRoleResource:
    """GET /v1/roles/default - configured default role.

    ConfigurationError is not caught here; the app error handler turns it
    into a 500.
    """

    def __init__(self, role_catalog: RoleCatalog) -> None:
        self._catalog = role_catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        role = await self._catalog.get_default()
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200


class RoleSearchResource:
    """GET /v1/roles/search?teamMemberId=&teamId= - role of user on team."""

    def __init__(self, membership_registry: MembershipRegistry) -> None:
        self._registry = membership_registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Resolve role held by team member on team."""
        try:
            user_id = UUID(req.get_param("teamMemberId", required=True))
            team_id = UUID(req.get_param("teamId", required=True))
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            role = await self._registry.resolve_role(user_id, team_id)
            resp.media = role_to_dict(role)
            resp.status = falcon.HTTP_200
        except ResourceNotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
