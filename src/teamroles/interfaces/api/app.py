"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from teamroles.interfaces.api.resources.health import HealthResource
from teamroles.interfaces.api.resources.memberships import (
    MembershipSearchResource,
    MembershipsResource,
)
from teamroles.interfaces.api.resources.roles import (
    DefaultRoleResource,
    RoleResource,
    RoleSearchResource,
    RolesResource,
)

logger = structlog.get_logger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer 500."""
    logger.exception("unhandled_error", method=req.method, path=req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    roles_resource: RolesResource,
    role_resource: RoleResource,
    default_role_resource: DefaultRoleResource,
    role_search_resource: RoleSearchResource,
    memberships_resource: MembershipsResource,
    membership_search_resource: MembershipSearchResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/default", default_role_resource)
    app.add_route("/v1/roles/search", role_search_resource)
    app.add_route("/v1/roles/memberships", memberships_resource)
    app.add_route("/v1/roles/memberships/search", membership_search_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)
    return app
