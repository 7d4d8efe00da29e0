# ============================================================================
# CONFIGURATION & LOGGING TESTS
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Tests - Environment defaults and check logging
# PURPOSE: Verify env overrides and per-check log context
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration & Logging Tests

Run with:
    pytest tests/test_config_logging.py -v
"""

import asyncio
import logging
from unittest.mock import patch

import pytest

from core.config import (
    CheckDefaults,
    OracleClientMode,
    OracleMonitorDefaults,
    get_defaults,
    reset_defaults,
)
from core.contracts import MonitorStatus
from core.logging import (
    get_current_context,
    get_logger,
    log_context,
    log_heartbeat,
)
from core.models import Heartbeat


# ============================================================================
# CONFIGURATION
# ============================================================================

class TestDefaults:
    """Environment-driven defaults."""

    def setup_method(self):
        reset_defaults()

    def teardown_method(self):
        reset_defaults()

    def test_builtin_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            defaults = get_defaults()

        assert defaults.oracle.default_query == "SELECT 1 FROM DUAL"
        assert defaults.oracle.client_mode == OracleClientMode.THIN
        assert defaults.oracle.lib_dir is None
        assert defaults.checks.timeout_seconds == 48.0

    def test_env_overrides(self):
        env = {
            "ORACLE_MONITOR_DEFAULT_QUERY": "SELECT 1 FROM SYS.DUAL",
            "ORACLE_CLIENT_MODE": "THICK",
            "ORACLE_LIB_DIR": "/opt/oracle/instantclient",
            "MONITOR_CHECK_TIMEOUT": "10",
        }
        with patch.dict("os.environ", env, clear=True):
            oracle = OracleMonitorDefaults.from_env()
            checks = CheckDefaults.from_env()

        assert oracle.default_query == "SELECT 1 FROM SYS.DUAL"
        assert oracle.client_mode == OracleClientMode.THICK
        assert oracle.lib_dir == "/opt/oracle/instantclient"
        assert checks.timeout_seconds == 10.0

    def test_invalid_client_mode(self):
        with patch.dict("os.environ", {"ORACLE_CLIENT_MODE": "instant"}, clear=True):
            with pytest.raises(ValueError):
                OracleMonitorDefaults.from_env()

    def test_defaults_cached(self):
        assert get_defaults() is get_defaults()


# ============================================================================
# LOGGING
# ============================================================================

class TestLogContext:
    """Per-check context carried into log records."""

    def test_nested_context_merges(self):
        with log_context(monitor_id="orders-db", monitor_type="oracle"):
            with log_context(check_id="abc123"):
                context = get_current_context()
                assert context.monitor_id == "orders-db"
                assert context.check_id == "abc123"

            assert get_current_context().check_id is None

        assert get_current_context().monitor_id is None

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError):
            with log_context(job_id="j-1"):
                pass

    def test_concurrent_checks_keep_their_own_context(self):
        seen = {}

        async def check(monitor_id, delay):
            with log_context(monitor_id=monitor_id):
                await asyncio.sleep(delay)
                seen[monitor_id] = get_current_context().monitor_id

        async def run():
            await asyncio.gather(check("orders-db", 0.01), check("billing-db", 0.02))

        asyncio.run(run())

        assert seen == {"orders-db": "orders-db", "billing-db": "billing-db"}

    def test_context_logger_attaches_extra(self, caplog):
        logger = get_logger("monitors.test")

        with caplog.at_level(logging.INFO, logger="monitors.test"):
            with log_context(monitor_id="orders-db"):
                logger.info("checking", extra={"query": "SELECT 1 FROM DUAL"})

        assert caplog.records[-1].extra == {
            "query": "SELECT 1 FROM DUAL",
            "monitor_id": "orders-db",
        }

    def test_log_heartbeat(self, caplog):
        heartbeat = Heartbeat(status=MonitorStatus.UP, msg="Rows: 1", ping=12)

        with caplog.at_level(logging.INFO, logger="heartbeat"):
            with log_context(monitor_id="orders-db", monitor_type="oracle"):
                log_heartbeat(heartbeat)

        record = caplog.records[-1]
        assert record.getMessage() == "HEARTBEAT: Rows: 1"
        assert record.extra == {
            "status": "up",
            "ping": 12,
            "monitor_id": "orders-db",
            "monitor_type": "oracle",
        }
