# ============================================================================
# ORACLE DRIVER INFRASTRUCTURE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Infrastructure - Optional python-oracledb driver
# PURPOSE: Lazy driver loading and scoped Oracle connections
# CREATED: 19 OCT 2026
# ============================================================================
"""
Oracle Driver Infrastructure

python-oracledb is an optional dependency. Installs without it must still
import this module and run every other monitor type, so the driver is
probed lazily on first use:

    result = load_oracle_driver()
    driver = result.require()        # raises MissingDriverError

    async with scoped_connection(driver, config) as connection:
        query_result = await connection.execute("SELECT 1 FROM DUAL")

Client Modes (ORACLE_CLIENT_MODE):
- thin: pure Python driver (default)
- thick: init_oracle_client() once per process, needs Instant Client
- auto: thick only when ORACLE_LIB_DIR is set

The blocking driver calls run in worker threads so a check never blocks
the event loop.
"""

import asyncio
import logging
import threading
from contextlib import asynccontextmanager
from dataclasses import dataclass
from types import ModuleType
from typing import Any, AsyncIterator, Optional

from core.config import OracleClientMode, OracleMonitorDefaults, get_defaults
from core.errors import MissingDriverError
from core.models import ConnectionConfig, QueryResult

logger = logging.getLogger(__name__)

DRIVER_MODULE = "oracledb"


# ============================================================================
# CONNECTION
# ============================================================================

class OracleConnection:
    """
    One open python-oracledb connection.

    Rows are returned as tuples with column names taken from the cursor
    description.
    """

    def __init__(self, raw_connection: Any):
        self._conn = raw_connection

    async def execute(self, query: str) -> QueryResult:
        """Execute a statement and normalize the cursor result."""
        return await asyncio.to_thread(self._execute_sync, query)

    async def close(self) -> None:
        await asyncio.to_thread(self._conn.close)

    def _execute_sync(self, query: str) -> QueryResult:
        cursor = self._conn.cursor()
        try:
            cursor.execute(query)

            # No description means the statement produced no result set
            if cursor.description is not None:
                columns = [column[0] for column in cursor.description]
                rows = [tuple(row) for row in cursor.fetchall()]
                return QueryResult(rows=rows, columns=columns)

            rowcount = cursor.rowcount
            return QueryResult(
                rows_affected=rowcount if isinstance(rowcount, int) and rowcount >= 0 else None
            )
        finally:
            cursor.close()


# ============================================================================
# DRIVER
# ============================================================================

class OracleDriver:
    """Thin wrapper around the imported python-oracledb module."""

    def __init__(self, module: ModuleType):
        self.module = module

    async def connect(self, config: ConnectionConfig) -> OracleConnection:
        """Open a standalone connection (no pool)."""
        raw = await asyncio.to_thread(self.module.connect, **config.to_connect_kwargs())
        return OracleConnection(raw)


@asynccontextmanager
async def scoped_connection(driver: Any, config: ConnectionConfig) -> AsyncIterator[Any]:
    """
    Open a connection and close it exactly once on every exit path.

    A failing close() is logged and swallowed so it never replaces the
    error raised inside the block.

    Args:
        driver: Object with `async connect(config)`
        config: Parsed connection config
    """
    connection = await driver.connect(config)
    try:
        yield connection
    finally:
        try:
            await connection.close()
        except Exception as e:
            logger.warning(f"Failed to close Oracle connection to {config.safe_target}: {e}")


# ============================================================================
# LAZY DRIVER LOADING
# ============================================================================

@dataclass(frozen=True)
class DriverLoadResult:
    """Outcome of probing for the optional driver."""
    driver: Optional[OracleDriver] = None
    error: Optional[MissingDriverError] = None

    @property
    def available(self) -> bool:
        return self.driver is not None

    def require(self) -> OracleDriver:
        """Return the driver or raise the recorded MissingDriverError."""
        if self.driver is None:
            raise self.error
        return self.driver


_load_lock = threading.Lock()
_load_result: Optional[DriverLoadResult] = None
_client_initialized = False


def _init_oracle_client(module: ModuleType, lib_dir: Optional[str]) -> None:
    """Call init_oracle_client() at most once per process."""
    global _client_initialized
    if _client_initialized:
        return

    try:
        module.init_oracle_client(lib_dir=lib_dir)
        _client_initialized = True
        logger.info("Oracle thick mode client initialized")
    except Exception as e:
        # Thin mode still works; connections report their own errors
        logger.warning(f"Failed to initialize Oracle Client: {e}")


def _probe_driver(defaults: OracleMonitorDefaults) -> DriverLoadResult:
    try:
        import oracledb
    except ModuleNotFoundError as e:
        if (e.name or "").split(".")[0] != DRIVER_MODULE:
            raise
        logger.warning(f"Optional dependency '{DRIVER_MODULE}' is not installed")
        return DriverLoadResult(
            error=MissingDriverError(defaults.driver_package, defaults.install_hint)
        )

    if defaults.client_mode == OracleClientMode.THICK:
        _init_oracle_client(oracledb, defaults.lib_dir)
    elif defaults.client_mode == OracleClientMode.AUTO and defaults.lib_dir:
        _init_oracle_client(oracledb, defaults.lib_dir)

    logger.debug(f"Loaded {DRIVER_MODULE} {getattr(oracledb, '__version__', '?')}")
    return DriverLoadResult(driver=OracleDriver(oracledb))


def load_oracle_driver(defaults: Optional[OracleMonitorDefaults] = None) -> DriverLoadResult:
    """
    Probe for python-oracledb and cache a successful load.

    A missing driver is re-probed on the next call, so installing
    oracledb takes effect without a restart.

    Import errors other than the driver itself being absent propagate.
    """
    global _load_result
    with _load_lock:
        if _load_result is not None:
            return _load_result

        result = _probe_driver(defaults or get_defaults().oracle)
        if result.available:
            _load_result = result
        return result


def reset_oracle_driver() -> None:
    """Forget the cached probe result (for testing)."""
    global _load_result, _client_initialized
    with _load_lock:
        _load_result = None
        _client_initialized = False


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "OracleConnection",
    "OracleDriver",
    "DriverLoadResult",
    "scoped_connection",
    "load_oracle_driver",
    "reset_oracle_driver",
]
