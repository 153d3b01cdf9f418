"""Application entry point and composition root."""

import logging

import structlog

from teamroles import __version__
from teamroles.application.use_cases.membership.membership_registry import (
    MembershipRegistry,
)
from teamroles.application.use_cases.role.role_catalog import RoleCatalog
from teamroles.config import Settings, get_settings
from teamroles.infrastructure.persistence.postgres.connection import create_pool
from teamroles.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from teamroles.interfaces.api.app import create_app
from teamroles.interfaces.api.middleware.cors import CORSMiddleware
from teamroles.interfaces.api.middleware.lifespan import LifespanMiddleware
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


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)8s %(name)s %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def main() -> None:
    """CLI entry point."""
    print(f"teamroles v{__version__}")


def create_teamroles_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    role_catalog = RoleCatalog(
        unit_of_work_factory=uow_factory,
        default_role_name=settings.default_role_name,
    )
    membership_registry = MembershipRegistry(
        unit_of_work_factory=uow_factory,
        role_catalog=role_catalog,
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = create_app(
        roles_resource=RolesResource(role_catalog),
        role_resource=RoleResource(role_catalog),
        default_role_resource=DefaultRoleResource(role_catalog),
        role_search_resource=RoleSearchResource(membership_registry),
        memberships_resource=MembershipsResource(membership_registry),
        membership_search_resource=MembershipSearchResource(membership_registry),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            LifespanMiddleware(pool, role_catalog),
        ],
    )
    logger.info(
        "app_created",
        environment=settings.environment,
        default_role=settings.default_role_name,
    )
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_teamroles_app(), host="0.0.0.0", port=8000)
