"""Lifespan middleware - pool open/close and default role check."""

from typing import Any

import structlog
from psycopg_pool import AsyncConnectionPool

from teamroles.application.use_cases.role.role_catalog import RoleCatalog

logger = structlog.get_logger(__name__)


class LifespanMiddleware:
    """Open the connection pool on startup, then resolve the default role.

    A missing default role raises ConfigurationError, which aborts ASGI
    startup. The pool is closed on shutdown.
    """

    def __init__(
        self, pool: AsyncConnectionPool, role_catalog: RoleCatalog | None = None
    ) -> None:
        self._pool = pool
        self._role_catalog = role_catalog

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.open()
        logger.info("pool_opened")
        if self._role_catalog is None:
            return
        try:
            await self._role_catalog.ensure_default()
        except BaseException:
            # No shutdown event follows a failed startup
            await self._pool.close()
            raise

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.close()
        logger.info("pool_closed")
