"""Membership API resources."""

from uuid import UUID

import falcon.asgi

from teamroles.application.use_cases.membership.membership_registry import (
    MembershipRegistry,
)
from teamroles.domain.entities import Membership
from teamroles.domain.exceptions import InvalidArgument, ResourceExists, ResourceNotFound
from teamroles.interfaces.api.resources.serializers import membership_to_dict


class MembershipsResource:
    """POST /v1/roles/memberships - assign role to user on team."""

    def __init__(self, membership_registry: MembershipRegistry) -> None:
        self._registry = membership_registry

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Assign role. roleId may be omitted; the registry rejects it."""
        try:
            body = await req.get_media()
            user_id = UUID(body["userId"])
            team_id = UUID(body["teamId"])
            role_id = UUID(body["roleId"]) if body.get("roleId") else None
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, ValueError, AttributeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            membership = await self._registry.assign(
                Membership(id=None, user_id=user_id, team_id=team_id, role_id=role_id)
            )
            resp.media = membership_to_dict(membership)
            resp.status = falcon.HTTP_201
        except InvalidArgument as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except ResourceExists as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
        except ResourceNotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class MembershipSearchResource:
    """GET /v1/roles/memberships/search?roleId= - memberships holding role."""

    def __init__(self, membership_registry: MembershipRegistry) -> None:
        self._registry = membership_registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            role_id = UUID(req.get_param("roleId", required=True))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        memberships = await self._registry.get_memberships(role_id)
        resp.media = {"items": [membership_to_dict(m) for m in memberships]}
        resp.status = falcon.HTTP_200
