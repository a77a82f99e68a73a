from __future__ import annotations

# registry/config.py
from dataclasses import dataclass
import datetime as dt
import os

import yaml

from .errors import ConfigError

# 配置文件查找顺序：
# 1) 显式传入的路径（CLI --config）
# 2) 环境变量 EMPLOYEE_CONFIG
# 3) 当前工作目录下的 config.yaml
DEFAULT_CONFIG_FILE = "config.yaml"


@dataclass(frozen=True)
class Settings:
    db_path: str | None = None
    log_level: str = "WARNING"
    criteria_gender: str = "Male"
    criteria_prefix: str = "F"
    bulk_count: int = 1_000_000
    bulk_extra_count: int = 100
    bulk_birth_date: str = "1990-01-01"
    bulk_batch_size: int = 10_000


def resolve_config_path(path: str | None = None) -> str:
    return path or os.environ.get("EMPLOYEE_CONFIG") or DEFAULT_CONFIG_FILE


def _read_config_yaml(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"config {path} must be a mapping at the top level")
    return cfg


def _section(cfg: dict, name: str) -> dict:
    sec = cfg.get(name) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"config section '{name}' must be a mapping")
    return sec


def _typed(value, typ, key: str, default):
    if value is None:
        return default
    # bool is an int subclass; reject it for numeric keys
    if not isinstance(value, typ) or (typ is int and isinstance(value, bool)):
        raise ConfigError(f"config key '{key}' must be {typ.__name__}, got {value!r}")
    return value


def _date_text(value):
    # YAML parses an unquoted 1990-01-01 into a date object
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


def load_settings(path: str | None = None) -> Settings:
    """Build Settings from the YAML config file; a missing file yields defaults."""
    cfg = _read_config_yaml(resolve_config_path(path))
    criteria = _section(cfg, "criteria")
    bulk = _section(cfg, "bulk")
    d = Settings()

    db_path = _typed(cfg.get("db_path"), str, "db_path", None)
    out = Settings(
        db_path=(db_path.strip() or None) if db_path else None,
        log_level=_typed(cfg.get("log_level"), str, "log_level", d.log_level).upper(),
        criteria_gender=_typed(criteria.get("gender"), str, "criteria.gender", d.criteria_gender),
        criteria_prefix=_typed(criteria.get("name_prefix"), str, "criteria.name_prefix", d.criteria_prefix),
        bulk_count=_typed(bulk.get("count"), int, "bulk.count", d.bulk_count),
        bulk_extra_count=_typed(bulk.get("extra_count"), int, "bulk.extra_count", d.bulk_extra_count),
        bulk_birth_date=_typed(_date_text(bulk.get("birth_date")), str, "bulk.birth_date", d.bulk_birth_date),
        bulk_batch_size=_typed(bulk.get("batch_size"), int, "bulk.batch_size", d.bulk_batch_size),
    )
    if out.bulk_count < 0 or out.bulk_extra_count < 0:
        raise ConfigError("bulk.count and bulk.extra_count cannot be negative")
    if out.bulk_batch_size <= 0:
        raise ConfigError("bulk.batch_size must be positive")
    return out
