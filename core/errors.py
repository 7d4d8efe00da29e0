# ============================================================================
# MONITOR ERRORS
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Foundation - Error taxonomy
# PURPOSE: Exception types that classify every monitor failure path
# CREATED: 19 OCT 2026
# ============================================================================
"""
Monitor Errors

Two families:

Check outcome errors (raised out of MonitorType.check):
- ConditionNotMetError: the check ran, the business condition failed
- DatabaseCheckError: the check could not run (wraps the inner error)

Inner errors (raised by the executor, always wrapped by check()):
- MalformedConnectionStringError
- MissingDriverError
- NoResultsError / MultipleRowsError / MultipleColumnsError

Callers branch on the exception type, never on message text.
"""

from typing import Any, Optional


DATABASE_FAILURE_PREFIX = "Database connection/query failed: "


# ============================================================================
# CHECK OUTCOME ERRORS
# ============================================================================

class MonitorCheckError(Exception):
    """Base exception for a failed monitor check."""
    pass


class ConditionNotMetError(MonitorCheckError):
    """Raised when a query result does not satisfy the monitor conditions."""

    def __init__(self, value: Any, display: Optional[str] = None):
        self.value = value
        shown = value if display is None else display
        super().__init__(
            f"Query result did not meet the specified conditions ({shown})"
        )


class DatabaseCheckError(MonitorCheckError):
    """
    Raised when a database check could not run.

    The message always starts with DATABASE_FAILURE_PREFIX followed by the
    original error message. The original exception is kept as `cause`.
    """

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"{DATABASE_FAILURE_PREFIX}{cause}")

    @property
    def missing_driver(self) -> bool:
        """True when the check failed because the driver is not installed."""
        return isinstance(self.cause, MissingDriverError)


# ============================================================================
# INNER ERRORS
# ============================================================================

class OracleMonitorError(Exception):
    """Base exception for Oracle monitor execution errors."""
    pass


class MalformedConnectionStringError(OracleMonitorError):
    """Raised when a connection string matches no supported dialect."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class MissingDriverError(OracleMonitorError):
    """Raised when the optional database driver cannot be imported."""

    def __init__(self, package: str, install_hint: str):
        self.package = package
        self.install_hint = install_hint
        super().__init__(
            f"Oracle monitor requires optional dependency '{package}'. "
            f"Please run: {install_hint}"
        )


class QueryShapeError(OracleMonitorError):
    """Base exception for single-value queries with the wrong result shape."""
    pass


class NoResultsError(QueryShapeError):
    """Raised when a single-value query returns no rows."""

    def __init__(self):
        super().__init__("Query returned no results")


class MultipleRowsError(QueryShapeError):
    """Raised when a single-value query returns more than one row."""

    def __init__(self, row_count: int):
        self.row_count = row_count
        super().__init__("Multiple values were found, expected only one value")


class MultipleColumnsError(QueryShapeError):
    """Raised when a single-value query returns more than one column."""

    def __init__(self, column_count: int):
        self.column_count = column_count
        super().__init__("Multiple columns were found, expected only one value")


# ============================================================================
# CONDITION ERRORS
# ============================================================================

class ConditionError(Exception):
    """Raised when a condition tree cannot be built or evaluated."""
    pass


__all__ = [
    "DATABASE_FAILURE_PREFIX",
    "MonitorCheckError",
    "ConditionNotMetError",
    "DatabaseCheckError",
    "OracleMonitorError",
    "MalformedConnectionStringError",
    "MissingDriverError",
    "QueryShapeError",
    "NoResultsError",
    "MultipleRowsError",
    "MultipleColumnsError",
    "ConditionError",
]
