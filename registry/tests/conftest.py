import sys
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    path = tmp_path / "employees_test.db"
    # Point the registry at this temp DB and away from any ./config.yaml
    monkeypatch.setenv("EMPLOYEE_DB_PATH", str(path))
    monkeypatch.setenv("EMPLOYEE_CONFIG", str(tmp_path / "missing-config.yaml"))
    return str(path)


@pytest.fixture()
def store(tmp_db_path):
    from registry.services.store import EmployeeStore
    with EmployeeStore.open(tmp_db_path) as s:
        s.create_table()
        yield s


@pytest.fixture()
def fixed_now():
    """Epoch seconds for 2026-10-17 12:00 local time."""
    import datetime as dt
    return dt.datetime(2026, 10, 17, 12, 0).timestamp()
