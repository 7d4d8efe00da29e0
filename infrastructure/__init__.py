# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Infrastructure - Database driver access
# PURPOSE: Optional database drivers behind lazy capability probes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for database monitors.

Provides:
- load_oracle_driver: Probe python-oracledb once, cache the outcome
- scoped_connection: Open a connection and always close it

Usage:
    from infrastructure import load_oracle_driver, scoped_connection

    driver = load_oracle_driver().require()
    async with scoped_connection(driver, config) as connection:
        result = await connection.execute("SELECT 1 FROM DUAL")
"""

from infrastructure.oracle import (
    OracleConnection,
    OracleDriver,
    DriverLoadResult,
    scoped_connection,
    load_oracle_driver,
    reset_oracle_driver,
)

__all__ = [
    "OracleConnection",
    "OracleDriver",
    "DriverLoadResult",
    "scoped_connection",
    "load_oracle_driver",
    "reset_oracle_driver",
]
