from __future__ import annotations

from sqlite3 import Connection
from typing import Iterable

DDL = """
CREATE TABLE IF NOT EXISTS EMPLOYEE(
  ID INTEGER PRIMARY KEY AUTOINCREMENT,
  FULLNAME TEXT NOT NULL,
  BIRTHDATE TEXT NOT NULL,
  GENDER TEXT NOT NULL,
  AGE INTEGER NOT NULL
)
"""

_COLUMNS = "FULLNAME, BIRTHDATE, GENDER, AGE"
_INSERT_SQL = f"INSERT INTO EMPLOYEE ({_COLUMNS}) VALUES(?,?,?,?)"


def ensure_schema(conn: Connection):
    conn.execute(DDL)


def insert(conn: Connection, full_name: str, birth_date: str, gender: str, age: int) -> int:
    cur = conn.execute(_INSERT_SQL, (full_name, birth_date, gender, age))
    return int(cur.lastrowid)


def insert_many(conn: Connection, rows: Iterable[tuple[str, str, str, int]]) -> int:
    cur = conn.executemany(_INSERT_SQL, rows)
    return cur.rowcount


def list_all(conn: Connection):
    return conn.execute(f"SELECT {_COLUMNS} FROM EMPLOYEE ORDER BY FULLNAME").fetchall()


def escape_like(s: str) -> str:
    return s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_by_gender_and_prefix(conn: Connection, gender: str, name_prefix: str):
    return conn.execute(
        f"SELECT {_COLUMNS} FROM EMPLOYEE "
        "WHERE GENDER = ? AND FULLNAME LIKE ? ESCAPE '\\' "
        "ORDER BY ID",
        (gender, escape_like(name_prefix) + "%"),
    ).fetchall()


def count_all(conn: Connection) -> int:
    return int(conn.execute("SELECT COUNT(1) AS c FROM EMPLOYEE").fetchone()["c"])
