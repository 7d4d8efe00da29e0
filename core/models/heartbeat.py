# ============================================================================
# HEARTBEAT MODEL
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Per-check outcome record
# PURPOSE: Mutable status/message/latency record written by monitor checks
# CREATED: 19 OCT 2026
# ============================================================================
"""
Heartbeat Model

Owned by the scheduler, mutated by exactly one check at a time.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from core.contracts import MonitorStatus


class Heartbeat(BaseModel):
    """
    Outcome of one monitor check.

    `ping` is the elapsed time in milliseconds around the database call.
    """

    status: MonitorStatus = Field(default=MonitorStatus.PENDING)
    msg: str = Field(default="")
    ping: Optional[int] = Field(default=None, ge=0, description="Milliseconds")
    time: datetime = Field(default_factory=datetime.utcnow)

    model_config = {"frozen": False}

    @property
    def is_up(self) -> bool:
        return self.status.is_up()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and persistence."""
        return {
            "status": self.status.value,
            "msg": self.msg,
            "ping": self.ping,
            "time": self.time.isoformat() + "Z",
        }
