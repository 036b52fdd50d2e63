from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConstraintViolationError, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_INTEGRITY_MESSAGES = {
    errorcode.ER_DUP_ENTRY: "Duplicate value for a unique field",
    errorcode.ER_NO_REFERENCED_ROW_2: "Referenced record does not exist",
    errorcode.ER_ROW_IS_REFERENCED_2: "Record is still referenced by other rows",
}


def _integrity_message(err: mysql.connector.Error) -> str:
    return _INTEGRITY_MESSAGES.get(err.errno, "Constraint violation")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` inside one transaction.

    Commits when the block finishes, rolls back on any exception. Driver
    errors are translated: integrity errors become ConstraintViolationError,
    everything else from the driver becomes StorageError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Database connection failed: %s", e)
        raise StorageError("Database unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        logger.info("Write rejected by constraint errno=%s: %s", e.errno, e.msg)
        raise ConstraintViolationError(_integrity_message(e)) from e
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("Database error errno=%s: %s", e.errno, e.msg)
        raise StorageError("Database operation failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
