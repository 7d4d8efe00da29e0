# ============================================================================
# CLAUDE CONTEXT - CORE MODULE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core module initialization
# PURPOSE: Export core contracts, errors, and models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import MonitorStatus, CheckMode
from core.models import (
    MonitorTarget,
    Heartbeat,
    ConnectionConfig,
    QueryResult,
)

__all__ = [
    # Enums
    "MonitorStatus",
    "CheckMode",
    # Models
    "MonitorTarget",
    "Heartbeat",
    "ConnectionConfig",
    "QueryResult",
]
