# ============================================================================
# QUERY RESULT INTERPRETATION
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Driver result normalization
# PURPOSE: Turn raw query results into summaries or a single scalar
# CREATED: 19 OCT 2026
# ============================================================================
"""
Query Result Interpretation

A raw QueryResult is classified into exactly one QueryOutcome:
- RowCount: the statement returned a result set
- RowsAffected: the statement reported an affected-row count
- UnknownShape: neither
- ScalarValue: single-value query with exactly one row and one column
"""

from dataclasses import dataclass
from typing import Any, Union

from core.errors import MultipleColumnsError, MultipleRowsError, NoResultsError
from core.models import QueryResult


@dataclass(frozen=True)
class RowCount:
    count: int

    @property
    def message(self) -> str:
        return f"Rows: {self.count}"


@dataclass(frozen=True)
class RowsAffected:
    count: int

    @property
    def message(self) -> str:
        return f"Rows Affected: {self.count}"


@dataclass(frozen=True)
class UnknownShape:
    type_name: str

    @property
    def message(self) -> str:
        return f"No Error, but the result is not an array. Type: {self.type_name}"


@dataclass(frozen=True)
class ScalarValue:
    value: Any

    @property
    def message(self) -> str:
        return format_scalar(self.value)


QueryOutcome = Union[RowCount, RowsAffected, UnknownShape, ScalarValue]


def summarize(result: QueryResult) -> QueryOutcome:
    """Classify a plain query result."""
    if isinstance(result.rows, list):
        return RowCount(len(result.rows))

    if isinstance(result.rows_affected, int):
        return RowsAffected(result.rows_affected)

    return UnknownShape(type(result.rows).__name__)


def extract_single_value(result: QueryResult) -> ScalarValue:
    """
    Extract the only value of a one-row, one-column result.

    Raises:
        NoResultsError: No result set or zero rows
        MultipleRowsError: More than one row
        MultipleColumnsError: More than one column in the row
    """
    rows = result.rows
    if not isinstance(rows, list) or len(rows) == 0:
        raise NoResultsError()

    if len(rows) > 1:
        raise MultipleRowsError(len(rows))

    row = rows[0]
    if len(row) > 1:
        raise MultipleColumnsError(len(row))
    if len(row) == 0:
        raise NoResultsError()

    return ScalarValue(row[0])


def format_scalar(value: Any) -> str:
    """
    Render a scalar the way conditions compare it.

    SQL NULL is "null" and booleans are lowercase.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "RowCount",
    "RowsAffected",
    "UnknownShape",
    "ScalarValue",
    "QueryOutcome",
    "summarize",
    "extract_single_value",
    "format_scalar",
]
