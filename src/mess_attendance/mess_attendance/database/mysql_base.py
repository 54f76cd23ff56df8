from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, StoreUnavailableError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor) on a fresh connection, committing on success.

    Driver errors are re-raised as domain errors so services never see
    mysql.connector types: a duplicate key becomes ConflictError, anything
    else StoreUnavailableError.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StoreUnavailableError("Database is unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        _safe_rollback(conn)
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise ConflictError("Duplicate record") from e
        raise StoreUnavailableError(str(e.msg or e)) from e
    except mysql.connector.Error as e:
        _safe_rollback(conn)
        raise StoreUnavailableError(str(e.msg or e)) from e
    except Exception:
        _safe_rollback(conn)
        raise
    finally:
        conn.close()


def _safe_rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        # connection already dropped; nothing left to roll back
        pass


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
