# ============================================================================
# DATABASE CONNECTION MODELS
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Transient per-check connection data
# PURPOSE: Parsed connection config and raw driver query result
# CREATED: 19 OCT 2026
# ============================================================================
"""
Database Connection Models

ConnectionConfig is only produced by a successful connection string parse.
QueryResult is the driver result normalized to plain Python values.
Neither outlives a single check.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class ConnectionConfig(BaseModel):
    """
    Normalized Oracle connection parameters.

    connect_string is the EZConnect target: host[:port]/service.
    """

    user: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, repr=False)
    connect_string: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def to_connect_kwargs(self) -> Dict[str, str]:
        """Keyword arguments for oracledb.connect()."""
        return {
            "user": self.user,
            "password": self.password,
            "dsn": self.connect_string,
        }

    @property
    def safe_target(self) -> str:
        """Connection target without credentials, for logging."""
        return f"{self.user}@{self.connect_string}"


class QueryResult(BaseModel):
    """
    Result of executing one statement.

    rows is None for statements that return no result set; rows_affected
    is None when the driver reports no row count.
    """

    rows: Optional[List[Tuple[Any, ...]]] = None
    columns: List[str] = Field(default_factory=list)
    rows_affected: Optional[int] = None

    model_config = {"arbitrary_types_allowed": True}
