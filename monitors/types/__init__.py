# ============================================================================
# MONITOR TYPES
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Monitor type implementations
# PURPOSE: Concrete monitor types, registered on import
# CREATED: 19 OCT 2026
# ============================================================================
"""
Monitor Types

Database:
- oracle: Oracle Database query check (supports conditions)

Import this module to register all types:
    import monitors.types
"""

# Import all type modules to trigger registration
from monitors.types.oracle import OracleMonitorType

__all__ = [
    "OracleMonitorType",
]
