# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for database monitors and check execution
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for monitor checks.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class OracleClientMode(str, Enum):
    """python-oracledb client modes."""
    THIN = "thin"    # Pure Python, no Instant Client
    THICK = "thick"  # Requires Oracle Instant Client
    AUTO = "auto"    # Thick only when a lib dir is configured


@dataclass(frozen=True)
class OracleMonitorDefaults:
    """
    Defaults for the Oracle monitor type.

    Controls the liveness query and driver client mode.
    """
    # Query used when the monitor has none
    default_query: str = "SELECT 1 FROM DUAL"

    # Driver settings
    client_mode: OracleClientMode = OracleClientMode.THIN
    lib_dir: Optional[str] = None

    # Shown in MissingDriverError
    driver_package: str = "oracledb"
    install_hint: str = "pip install oracledb"

    @classmethod
    def from_env(cls) -> "OracleMonitorDefaults":
        """Create from environment variables."""
        return cls(
            default_query=os.getenv("ORACLE_MONITOR_DEFAULT_QUERY", "SELECT 1 FROM DUAL"),
            client_mode=OracleClientMode(os.getenv("ORACLE_CLIENT_MODE", "thin").lower()),
            lib_dir=os.getenv("ORACLE_LIB_DIR") or None,
        )


@dataclass(frozen=True)
class CheckDefaults:
    """
    Defaults for check execution.

    The timeout is applied by the executor, never inside a monitor type.
    """
    timeout_seconds: float = 48.0  # 0 disables

    @classmethod
    def from_env(cls) -> "CheckDefaults":
        """Create from environment variables."""
        return cls(
            timeout_seconds=float(os.getenv("MONITOR_CHECK_TIMEOUT", 48.0)),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    oracle: OracleMonitorDefaults = field(default_factory=OracleMonitorDefaults)
    checks: CheckDefaults = field(default_factory=CheckDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            oracle=OracleMonitorDefaults.from_env(),
            checks=CheckDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "OracleClientMode",
    "OracleMonitorDefaults",
    "CheckDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
