# ============================================================================
# MONITOR CHECK EXECUTOR
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Caller-side check execution
# PURPOSE: Run one check, apply down-handling, return the heartbeat
# CREATED: 19 OCT 2026
# ============================================================================
"""
Monitor Check Executor

The in-process entrypoint a scheduler uses to run a check:
- Looks up the monitor type by name
- Creates a PENDING heartbeat
- Runs the check inside a logging context, with an optional timeout
- Marks the heartbeat DOWN when the check raises

Monitor types never write DOWN themselves; that is done here.
"""

import asyncio
import logging
import time
import uuid
from typing import Optional

from core.config import get_defaults
from core.contracts import MonitorStatus
from core.errors import ConditionNotMetError, MonitorCheckError
from core.logging import get_logger, log_context, log_heartbeat
from core.models import Heartbeat, MonitorTarget
from monitors.registry import MonitorTypeRegistry, get_registry

logger = get_logger(__name__)


class MonitorCheckExecutor:
    """
    Executes monitor checks with timeouts and down-handling.

    One heartbeat per run; runs share no state.
    """

    def __init__(
        self,
        registry: Optional[MonitorTypeRegistry] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Initialize executor.

        Args:
            registry: Monitor type registry (uses global if None)
            timeout_seconds: Max check time; 0 disables (default from config)
        """
        self.registry = registry if registry is not None else get_registry()
        if timeout_seconds is None:
            timeout_seconds = get_defaults().checks.timeout_seconds
        self.timeout_seconds = timeout_seconds

    async def run(
        self,
        type_name: str,
        target: MonitorTarget,
        heartbeat: Optional[Heartbeat] = None,
    ) -> Heartbeat:
        """
        Run one check and return its heartbeat.

        Args:
            type_name: Registered monitor type name (e.g. "oracle")
            target: Monitor input
            heartbeat: Existing record to fill (new PENDING one if None)

        Raises:
            MonitorTypeNotFoundError: Unknown type name
        """
        monitor_type = self.registry.require(type_name)
        if heartbeat is None:
            heartbeat = Heartbeat()

        with log_context(
            monitor_id=target.monitor_id,
            monitor_type=type_name,
            check_id=uuid.uuid4().hex[:12],
        ):
            start_time = time.monotonic()
            try:
                if self.timeout_seconds and self.timeout_seconds > 0:
                    await asyncio.wait_for(
                        monitor_type.check(target, heartbeat),
                        timeout=self.timeout_seconds,
                    )
                else:
                    await monitor_type.check(target, heartbeat)

            except asyncio.TimeoutError:
                self._mark_down(heartbeat, f"Timeout after {self.timeout_seconds}s", start_time)
                logger.warning(f"Check timed out after {self.timeout_seconds}s")

            except ConditionNotMetError as e:
                self._mark_down(heartbeat, str(e), start_time)
                logger.info(f"Check rejected: {e}")

            except MonitorCheckError as e:
                self._mark_down(heartbeat, str(e), start_time)
                logger.warning(f"Check failed: {e}")

            except Exception as e:
                self._mark_down(heartbeat, str(e), start_time)
                logger.error(f"Check raised unexpected {type(e).__name__}: {e}", exc_info=True)

            log_heartbeat(heartbeat, logger=logging.getLogger("heartbeat"))

        return heartbeat

    @staticmethod
    def _mark_down(heartbeat: Heartbeat, message: str, start_time: float) -> None:
        heartbeat.status = MonitorStatus.DOWN
        heartbeat.msg = message
        if heartbeat.ping is None:
            heartbeat.ping = int(round((time.monotonic() - start_time) * 1000))


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "MonitorCheckExecutor",
]
