"""Opening and checking database connections."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Raised when the database cannot be reached."""


def connect(factory: Callable[[], Any]) -> Any:
    """Open a DB-API connection with ``factory`` and verify that it answers.

    The connection must accept the ``qmark`` parameter style.
    """
    try:
        conn = factory()
    except Exception as exc:
        raise DatabaseError(f"could not connect to the database: {exc}") from exc

    try:
        cursor = conn.cursor()
        try:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        finally:
            cursor.close()
    except Exception as exc:
        try:
            conn.close()
        except Exception:
            logger.debug("closing a failed connection raised", exc_info=True)
        raise DatabaseError(f"database connection check failed: {exc}") from exc

    logger.info("Connected to the database.")
    return conn