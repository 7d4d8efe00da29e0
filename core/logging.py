# ============================================================================
# CHECK LOGGING
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Logging with per-check context
# PURPOSE: Tag every log line of a check with its monitor and check ids
# CREATED: 19 OCT 2026
# ============================================================================
"""
Check Logging

Log records emitted while a check runs carry the monitor and check ids
as a `record.extra` dict, so any handler or formatter the host
application installs can pick them up.

The context lives in a ContextVar: every asyncio task sees its own
copy, so concurrent checks on one event loop never mix their ids.

Usage:
    from core.logging import get_logger, log_context

    logger = get_logger(__name__)

    with log_context(monitor_id="orders-db", monitor_type="oracle"):
        logger.info("Running check")
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

CONTEXT_FIELDS = ("monitor_id", "monitor_type", "check_id")


@dataclass(frozen=True)
class LogContext:
    """Identifiers of the check currently running."""
    monitor_id: Optional[str] = None
    monitor_type: Optional[str] = None
    check_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Set fields only."""
        return {
            name: getattr(self, name)
            for name in CONTEXT_FIELDS
            if getattr(self, name) is not None
        }


_current_context: ContextVar[LogContext] = ContextVar("log_context", default=LogContext())


def get_current_context() -> LogContext:
    return _current_context.get()


@contextmanager
def log_context(**fields):
    """
    Layer context fields over the enclosing context for the block.

    Args:
        **fields: Any of monitor_id, monitor_type, check_id

    Raises:
        TypeError: Unknown field name
    """
    context = replace(get_current_context(), **fields)
    token = _current_context.set(context)
    try:
        yield context
    finally:
        _current_context.reset(token)


class ContextLogger(logging.LoggerAdapter):
    """Adds the current check context to each record as `record.extra`."""

    def process(self, msg, kwargs):
        data = dict(kwargs.get("extra") or {})
        data.update(get_current_context().to_dict())
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    return ContextLogger(logging.getLogger(name), {})


# ============================================================================
# HEARTBEAT LOGGING
# ============================================================================

def log_heartbeat(heartbeat: Any, logger: Optional[logging.Logger] = None) -> None:
    """
    Log the outcome of one check as "HEARTBEAT: <msg>".

    Status and ping go into `record.extra` next to the check context.
    """
    if logger is None:
        logger = logging.getLogger("heartbeat")

    data = {
        "status": getattr(heartbeat.status, "value", heartbeat.status),
        "ping": heartbeat.ping,
    }
    data.update(get_current_context().to_dict())

    logger.info(f"HEARTBEAT: {heartbeat.msg}", extra={"extra": data})


__all__ = [
    "LogContext",
    "ContextLogger",
    "get_logger",
    "log_context",
    "get_current_context",
    "log_heartbeat",
]
