from __future__ import annotations

# registry/services/store.py
from contextlib import ExitStack
from itertools import islice
from typing import Iterable
import logging
import sqlite3

from ..db import get_conn, get_db_path
from ..domain.employee import EmployeeRecord
from ..errors import InsertError, QueryError, SchemaError
from ..repository import employee_repo

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10_000


# non-UTF-8 command line bytes arrive as lone surrogates and fail when bound
_BIND_ERRORS = (sqlite3.Error, UnicodeEncodeError)


def _sql_error(e: Exception) -> str:
    if isinstance(e, UnicodeEncodeError):
        return f"invalid text value: {e}"
    return f"SQL error: {e}"


def _rollback(conn: sqlite3.Connection):
    """Roll back an open transaction; a failing ROLLBACK must not mask the original error."""
    try:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
    except sqlite3.Error as e:
        logger.error("rollback failed: %s", e)


class EmployeeStore:
    """
    Owns the single connection used by one CLI invocation.

    Use as a context manager so the connection is closed on both normal
    return and error exit:

        with EmployeeStore.open(path) as store:
            store.create_table()
    """

    def __init__(self, conn: sqlite3.Connection, path: str, stack: ExitStack | None = None):
        self._conn: sqlite3.Connection | None = conn
        self._stack = stack
        self.path = path

    @classmethod
    def open(cls, path: str | None = None, config_path: str | None = None) -> "EmployeeStore":
        resolved = get_db_path(path, config_path)
        stack = ExitStack()
        conn = stack.enter_context(get_conn(resolved))
        logger.debug("opened database %s", resolved)
        return cls(conn, resolved, stack)

    def close(self):
        if self._conn is None:
            return
        if self._stack is not None:
            self._stack.close()
            self._stack = None
        else:
            self._conn.close()
        self._conn = None
        logger.debug("closed database %s", self.path)

    @property
    def closed(self) -> bool:
        return self._conn is None

    def __enter__(self) -> "EmployeeStore":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
        return self._conn

    def create_table(self):
        try:
            employee_repo.ensure_schema(self.conn)
        except sqlite3.Error as e:
            raise SchemaError(_sql_error(e)) from e

    def insert_employee(self, record: EmployeeRecord) -> int:
        try:
            return employee_repo.insert(self.conn, *record.to_params())
        except _BIND_ERRORS as e:
            raise InsertError(_sql_error(e)) from e

    def insert_multiple_employees(
        self,
        records: Iterable[EmployeeRecord],
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> int:
        """
        Insert every record inside one transaction, `batch_size` rows per
        executemany call. On any failure the whole batch is rolled back and
        InsertError is raised; nothing is committed.
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        conn = self.conn
        rows = (r.to_params() for r in records)
        total = 0
        try:
            conn.execute("BEGIN")
            while True:
                chunk = list(islice(rows, batch_size))
                if not chunk:
                    break
                employee_repo.insert_many(conn, chunk)
                total += len(chunk)
                logger.info("inserted %d rows so far", total)
            conn.execute("COMMIT")
        except _BIND_ERRORS as e:
            _rollback(conn)
            logger.warning("bulk insert rolled back after %d rows: %s", total, e)
            raise InsertError(_sql_error(e)) from e
        except BaseException:
            _rollback(conn)
            raise
        return total

    def get_all_employees(self) -> list[EmployeeRecord]:
        try:
            rows = employee_repo.list_all(self.conn)
        except sqlite3.Error as e:
            raise QueryError(_sql_error(e)) from e
        return [EmployeeRecord.from_row(r) for r in rows]

    def get_employees_by_criteria(self, gender: str = "Male", name_prefix: str = "F") -> list[EmployeeRecord]:
        """Employees with the given gender whose name starts with `name_prefix` (SQL LIKE)."""
        try:
            rows = employee_repo.list_by_gender_and_prefix(self.conn, gender, name_prefix)
        except sqlite3.Error as e:
            raise QueryError(_sql_error(e)) from e
        return [EmployeeRecord.from_row(r) for r in rows]

    def count_employees(self) -> int:
        try:
            return employee_repo.count_all(self.conn)
        except sqlite3.Error as e:
            raise QueryError(_sql_error(e)) from e
