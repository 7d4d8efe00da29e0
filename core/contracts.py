# ============================================================================
# CLAUDE CONTEXT - BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Foundation - Core enums shared by monitors and callers
# PURPOSE: Define heartbeat status values for monitor checks
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: MonitorStatus, CheckMode
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the monitor system.

These values cross the boundary between a monitor type and the scheduler
that owns the heartbeat record.
"""

from enum import Enum


# ============================================================================
# STATUS ENUMS
# ============================================================================

class MonitorStatus(str, Enum):
    """
    Heartbeat status values.

    State transitions within one check:
        PENDING -> UP          (check accepted)
        PENDING -> PENDING     (check raised, caller decides)
        PENDING -> DOWN        (caller down-handling)
    """
    DOWN = "down"                # Check failed, set by the caller
    UP = "up"                    # Check succeeded
    PENDING = "pending"          # Not yet decided
    MAINTENANCE = "maintenance"  # Monitor paused for maintenance

    def is_up(self) -> bool:
        """Check if this status reports the target as reachable."""
        return self == MonitorStatus.UP


class CheckMode(str, Enum):
    """
    Query execution mode for database monitors.

    PLAIN runs the query and reports a row summary.
    CONDITIONS runs a single-value query and evaluates it.
    """
    PLAIN = "plain"
    CONDITIONS = "conditions"


__all__ = [
    "MonitorStatus",
    "CheckMode",
]
