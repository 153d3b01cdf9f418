"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from teamroles.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create async connection pool sized from settings.

    Pool is created closed; LifespanMiddleware opens it on ASGI startup.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=max(settings.pool_min_size, settings.pool_max_size),
        open=False,
    )
