# ============================================================================
# ORACLE MONITOR TYPE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Oracle Database health check
# PURPOSE: Run one query against Oracle and decide up / must-retry
# CREATED: 19 OCT 2026
# ============================================================================
"""
Oracle Monitor Type

Connects to Oracle, runs exactly one query and records the outcome.

Modes:
- PLAIN: no conditions; heartbeat message is the row summary
  ("Rows: 1", "Rows Affected: 3")
- CONDITIONS: the query must return a single value, bound as `result`
  and evaluated against the monitor conditions

Failures:
- ConditionNotMetError is raised as-is (the check ran, the rule failed)
- Everything else is raised as DatabaseCheckError with the prefix
  "Database connection/query failed: "

heartbeat.ping is set on every path once the query was attempted.
"""

import logging
import time
from typing import Any, Optional

from conditions import (
    ConditionExpressionGroup,
    ConditionVariable,
    DEFAULT_STRING_OPERATORS,
    evaluate_expression_group,
)
from core.config import OracleMonitorDefaults, get_defaults
from core.contracts import CheckMode, MonitorStatus
from core.errors import ConditionError, ConditionNotMetError, DatabaseCheckError
from core.models import Heartbeat, MonitorTarget, QueryResult
from infrastructure.oracle import OracleDriver, load_oracle_driver, scoped_connection
from monitors.connection_string import parse_connection_string
from monitors.core import MonitorType
from monitors.registry import register_monitor_type
from monitors.results import extract_single_value, format_scalar, summarize

logger = logging.getLogger(__name__)

CONDITIONS_MET_MESSAGE = "Query did meet specified conditions"


def _elapsed_ms(start_time: float) -> int:
    return int(round((time.monotonic() - start_time) * 1000))


@register_monitor_type()
class OracleMonitorType(MonitorType):
    """
    Oracle Database monitor.

    Driver access goes through load_driver() so installs without
    python-oracledb only fail the checks that need it.
    """

    name = "oracle"
    supports_conditions = True
    condition_variables = (ConditionVariable("result", DEFAULT_STRING_OPERATORS),)

    def __init__(self, defaults: Optional[OracleMonitorDefaults] = None):
        self._defaults = defaults

    @property
    def defaults(self) -> OracleMonitorDefaults:
        return self._defaults or get_defaults().oracle

    async def check(self, target: MonitorTarget, heartbeat: Heartbeat) -> None:
        query = target.query
        if not query or not query.strip():
            query = self.defaults.default_query

        try:
            conditions = ConditionExpressionGroup.from_monitor(target)
        except ConditionError as e:
            heartbeat.ping = 0
            raise DatabaseCheckError(e) from e

        has_conditions = conditions is not None and not conditions.is_empty
        mode = CheckMode.CONDITIONS if has_conditions else CheckMode.PLAIN
        logger.debug(f"Oracle check mode: {mode.value}")

        start_time = time.monotonic()
        try:
            if mode == CheckMode.CONDITIONS:
                value = await self.run_single_value_query(target.connection_string, query)
                heartbeat.ping = _elapsed_ms(start_time)

                display = format_scalar(value)
                if not evaluate_expression_group(conditions, {"result": display}):
                    raise ConditionNotMetError(value, display)

                heartbeat.status = MonitorStatus.UP
                heartbeat.msg = CONDITIONS_MET_MESSAGE
            else:
                summary = await self.run_query(target.connection_string, query)
                heartbeat.ping = _elapsed_ms(start_time)
                heartbeat.status = MonitorStatus.UP
                heartbeat.msg = summary

        except ConditionNotMetError:
            heartbeat.ping = _elapsed_ms(start_time)
            raise
        except Exception as e:
            heartbeat.ping = _elapsed_ms(start_time)
            raise DatabaseCheckError(e) from e

    def load_driver(self) -> OracleDriver:
        """
        Load python-oracledb on first use.

        Raises:
            MissingDriverError: oracledb is not installed
        """
        return load_oracle_driver(self.defaults).require()

    async def run_query(self, connection_string: str, query: str) -> str:
        """
        Run a query and summarize the result.

        Returns:
            "Rows: <n>", "Rows Affected: <n>" or a message naming the
            unexpected result type
        """
        result = await self._execute(connection_string, query)
        return summarize(result).message

    async def run_single_value_query(self, connection_string: str, query: str) -> Any:
        """
        Run a query expected to return exactly one row with one column.

        Returns:
            The value as returned by the driver

        Raises:
            NoResultsError, MultipleRowsError, MultipleColumnsError
        """
        result = await self._execute(connection_string, query)
        return extract_single_value(result).value

    async def _execute(self, connection_string: str, query: str) -> QueryResult:
        driver = self.load_driver()
        config = parse_connection_string(connection_string)

        try:
            async with scoped_connection(driver, config) as connection:
                return await connection.execute(query)
        except Exception as e:
            logger.debug(f"Error caught in the query execution ({config.safe_target}): {e}")
            raise


__all__ = [
    "CONDITIONS_MET_MESSAGE",
    "OracleMonitorType",
]
