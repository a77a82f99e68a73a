from __future__ import annotations

# registry/db.py
import sqlite3
from contextlib import contextmanager
from typing import Iterator
import os

from .config import load_settings
from .errors import DatabaseConnectionError

# DB 路径解析顺序：
# 1) 显式传入的 db_path（CLI --db，最高优先级）
# 2) 环境变量 EMPLOYEE_DB_PATH
# 3) config.yaml 的 db_path
# 4) 兜底：当前工作目录下的 employees.db
DEFAULT_DB_FILE = "employees.db"


def get_db_path(db_path: str | None = None, config_path: str | None = None) -> str:
    if db_path:
        return db_path
    env_path = os.environ.get("EMPLOYEE_DB_PATH")
    if env_path:
        return env_path
    return load_settings(config_path).db_path or DEFAULT_DB_FILE


def connect(path: str) -> sqlite3.Connection:
    """
    打开 SQLite 连接（文件不存在时自动创建）。
    autocommit 模式：每条语句自行提交，批量写入由调用方显式 BEGIN/COMMIT。
    """
    try:
        conn = sqlite3.connect(path, isolation_level=None)
    except sqlite3.Error as e:
        raise DatabaseConnectionError(f"cannot open database {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """获取 SQLite 连接，离开作用域时保证关闭。"""
    conn = connect(get_db_path(db_path))
    try:
        yield conn
    finally:
        conn.close()
