"""Database connection check.

The ORM opens connections lazily; ``connect_db`` forces one so that a
misconfigured ``DATABASE_URL`` is reported at start-up and by ``/health``.
Schema creation is handled by migrations (``manage.py migrate``).
"""

from __future__ import annotations

import structlog
from django.db import connections

logger = structlog.get_logger(__name__)


def connect_db(alias: str = "default") -> bool:
    """Open (or reuse) the connection for ``alias``.

    Returns ``False`` and logs the failure instead of raising.
    """
    try:
        connection = connections[alias]
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except Exception as exc:
        logger.error(
            "database.connection_failed",
            message="hubo un error al conectar a la DB",
            database=alias,
            error=str(exc),
        )
        return False
    logger.info("database.connected", database=alias)
    return True
