"""Root conftest — shared fixtures for all tests."""
from __future__ import annotations

import pytest

from isilon_check.core.config import Configuration, SnmpCredentials, get_settings
from isilon_check.snmp.fetcher import CapacitySnapshot

GIB = 1024 ** 3


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep developer ISILON_CHECK_* variables and .env files out of tests."""
    for name in (
        "ISILON_CHECK_COMMUNITY",
        "ISILON_CHECK_PORT",
        "ISILON_CHECK_SNMP_VERSION",
        "ISILON_CHECK_TIMEOUT",
        "ISILON_CHECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _make_config(
    warning: int = 1000,
    critical: int = 200,
    **overrides,
) -> Configuration:
    """Configuration with small byte thresholds unless overridden."""
    values = {
        "hostname": "isilon01.example.com",
        "warning_threshold_bytes": warning,
        "critical_threshold_bytes": critical,
        "timeout_seconds": 5,
        "snmp": SnmpCredentials(community="public"),
    }
    values.update(overrides)
    return Configuration(**values)


def _make_snapshot(available: int, **overrides) -> CapacitySnapshot:
    """Snapshot where only `available` matters to the evaluator."""
    values = {
        "total": 100 * GIB,
        "used": 40 * GIB,
        "available": available,
        "free": max(available, 60 * GIB),
    }
    values.update(overrides)
    return CapacitySnapshot(**values)


@pytest.fixture
def make_config():
    """Factory for Configuration objects."""
    return _make_config


@pytest.fixture
def make_snapshot():
    """Factory for CapacitySnapshot objects."""
    return _make_snapshot
