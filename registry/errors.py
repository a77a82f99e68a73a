from __future__ import annotations

# registry/errors.py


class EmployeeDbError(Exception):
    """Base class for every failure the CLI reports as fatal."""


class DatabaseConnectionError(EmployeeDbError):
    """The database file could not be opened."""


class SchemaError(EmployeeDbError):
    pass


class InsertError(EmployeeDbError):
    pass


class QueryError(EmployeeDbError):
    pass


class UsageError(EmployeeDbError):
    """Bad or missing command line arguments; the message is shown as-is."""


class ValidationError(EmployeeDbError, ValueError):
    pass


class ConfigError(EmployeeDbError):
    pass
