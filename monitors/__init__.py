# ============================================================================
# MONITORS MODULE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Monitor type plugin system
# PURPOSE: Pluggable checks selected by monitor type name
# CREATED: 19 OCT 2026
# ============================================================================
"""
Monitors Module

Plugin-based monitor checks:
- MonitorType: Base class for monitor types
- MonitorTypeRegistry: Lookup of types by name
- MonitorCheckExecutor: Runs a check and applies down-handling

Usage:
    from monitors import MonitorCheckExecutor
    from core.models import MonitorTarget

    executor = MonitorCheckExecutor()
    heartbeat = await executor.run(
        "oracle",
        MonitorTarget(connection_string="oracle://user:pass@db:1521/ORCLPDB1"),
    )
"""

from monitors.core import MonitorType
from monitors.registry import (
    MonitorTypeNotFoundError,
    MonitorTypeRegistry,
    register_monitor_type,
    get_registry,
)
from monitors.executor import MonitorCheckExecutor

# Registers built-in types
from monitors.types import OracleMonitorType

__all__ = [
    # Core types
    "MonitorType",
    # Registry
    "MonitorTypeNotFoundError",
    "MonitorTypeRegistry",
    "register_monitor_type",
    "get_registry",
    # Executor
    "MonitorCheckExecutor",
    # Types
    "OracleMonitorType",
]
