# ============================================================================
# CLAUDE CONTEXT - MODELS MODULE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

All Pydantic models for the monitor system:
    - MonitorTarget: per-check input from the scheduler
    - Heartbeat: per-check outcome record
    - ConnectionConfig / QueryResult: transient database data
"""

from core.models.monitor import MonitorTarget
from core.models.heartbeat import Heartbeat
from core.models.connection import ConnectionConfig, QueryResult

__all__ = [
    # Monitor
    "MonitorTarget",
    # Heartbeat
    "Heartbeat",
    # Connection
    "ConnectionConfig",
    "QueryResult",
]
