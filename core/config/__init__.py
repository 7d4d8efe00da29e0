# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for database monitors.
"""

from core.config.defaults import (
    OracleClientMode,
    OracleMonitorDefaults,
    CheckDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "OracleClientMode",
    "OracleMonitorDefaults",
    "CheckDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
