# ============================================================================
# MONITOR TYPE CORE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Base class for monitor types
# PURPOSE: Plugin interface every monitor type implements
# CREATED: 19 OCT 2026
# ============================================================================
"""
Monitor Type Core

Defines the plugin interface for monitor types.

Contract for check():
- On success: set heartbeat.status to UP and heartbeat.msg
- On failure: raise (subclass of MonitorCheckError) and leave the status
  for the caller's down-handling
- Always set heartbeat.ping when the target was contacted
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from conditions.variables import ConditionVariable
from core.models import Heartbeat, MonitorTarget


class MonitorType(ABC):
    """
    Base class for monitor type plugins.

    Subclass and implement check() to create a monitor type.
    Use @register_monitor_type or manual registration.

    Attributes:
        name: Unique identifier used to select the type
        supports_conditions: Whether monitors of this type accept conditions
        condition_variables: Variables the type binds during a check

    Example:
        @register_monitor_type()
        class EchoMonitorType(MonitorType):
            name = "echo"

            async def check(self, target, heartbeat) -> None:
                heartbeat.status = MonitorStatus.UP
                heartbeat.msg = "OK"
    """

    name: str = "unnamed"
    supports_conditions: bool = False
    condition_variables: Tuple[ConditionVariable, ...] = ()

    @abstractmethod
    async def check(self, target: MonitorTarget, heartbeat: Heartbeat) -> None:
        """
        Run one check against the target and record the outcome.

        Raises:
            MonitorCheckError: The check failed
        """
        pass

    def describe(self) -> Dict[str, Any]:
        """Describe the type for monitor editors."""
        return {
            "name": self.name,
            "supports_conditions": self.supports_conditions,
            "condition_variables": [v.to_dict() for v in self.condition_variables],
        }
