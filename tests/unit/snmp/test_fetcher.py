"""Unit tests for SnmpCapacityFetcher."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from isilon_check.core.config import SnmpCredentials
from isilon_check.snmp.engine import (
    AsyncSnmpEngine,
    SnmpConnectionError,
    SnmpNoSuchObjectError,
    SnmpTimeoutError,
)
from isilon_check.snmp.fetcher import (
    CapacitySnapshot,
    IncompleteResponseError,
    SnmpCapacityFetcher,
)
from isilon_check.snmp.oid_maps import (
    IFS_AVAILABLE_BYTES,
    IFS_FREE_BYTES,
    IFS_TOTAL_BYTES,
    IFS_USED_BYTES,
    CapacityMetric,
)

FULL_RESPONSE = {
    IFS_TOTAL_BYTES: "1000000",
    IFS_USED_BYTES: "400000",
    IFS_AVAILABLE_BYTES: "550000",
    IFS_FREE_BYTES: "600000",
}


def _make_fetcher(response=None, side_effect=None):
    engine = MagicMock(spec=AsyncSnmpEngine)
    engine.get = AsyncMock(return_value=response, side_effect=side_effect)
    return SnmpCapacityFetcher(engine=engine), engine


async def _fetch(fetcher):
    return await fetcher.fetch("isilon01", SnmpCredentials(), 5)


# ── Success ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_fetch_returns_snapshot():
    fetcher, _ = _make_fetcher(FULL_RESPONSE)

    snapshot = await _fetch(fetcher)

    assert snapshot == CapacitySnapshot(
        total=1000000, used=400000, available=550000, free=600000,
    )


@pytest.mark.asyncio
async def test_fetch_issues_single_get_for_all_four_oids():
    fetcher, engine = _make_fetcher(FULL_RESPONSE)

    await _fetch(fetcher)

    engine.get.assert_called_once()
    target, *oids = engine.get.call_args.args
    assert sorted(oids) == sorted(m.oid for m in CapacityMetric)
    assert target.host == "isilon01"
    assert target.timeout == 5


@pytest.mark.asyncio
async def test_fetch_handles_64bit_counters():
    big = str(2**64 - 1)
    fetcher, _ = _make_fetcher({**FULL_RESPONSE, IFS_AVAILABLE_BYTES: big})

    snapshot = await _fetch(fetcher)

    assert snapshot.available == 2**64 - 1


@pytest.mark.asyncio
async def test_fetch_does_not_enforce_free_above_available():
    fetcher, _ = _make_fetcher(
        {**FULL_RESPONSE, IFS_AVAILABLE_BYTES: "900000", IFS_FREE_BYTES: "1"},
    )

    snapshot = await _fetch(fetcher)

    assert snapshot.available == 900000
    assert snapshot.free == 1


# ── Incomplete responses ─────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", [m.oid for m in CapacityMetric])
async def test_fetch_missing_any_counter_fails(missing):
    response = {k: v for k, v in FULL_RESPONSE.items() if k != missing}
    fetcher, _ = _make_fetcher(response)

    with pytest.raises(IncompleteResponseError, match="Missing"):
        await _fetch(fetcher)


@pytest.mark.asyncio
async def test_fetch_empty_response_fails():
    fetcher, _ = _make_fetcher({})

    with pytest.raises(IncompleteResponseError):
        await _fetch(fetcher)


@pytest.mark.asyncio
async def test_fetch_non_numeric_value_fails():
    fetcher, _ = _make_fetcher({**FULL_RESPONSE, IFS_USED_BYTES: "n/a"})

    with pytest.raises(IncompleteResponseError, match="Non-numeric used"):
        await _fetch(fetcher)


@pytest.mark.asyncio
async def test_fetch_negative_value_fails():
    fetcher, _ = _make_fetcher({**FULL_RESPONSE, IFS_FREE_BYTES: "-1"})

    with pytest.raises(IncompleteResponseError, match="Negative free"):
        await _fetch(fetcher)


@pytest.mark.asyncio
async def test_fetch_v1_no_such_name_is_incomplete():
    fetcher, _ = _make_fetcher(
        side_effect=SnmpNoSuchObjectError("No such object at 1.3.6.1"),
    )

    with pytest.raises(IncompleteResponseError):
        await _fetch(fetcher)


# ── Transport failures pass through unchanged ────────────────────────


@pytest.mark.asyncio
async def test_fetch_timeout_propagates():
    fetcher, engine = _make_fetcher(side_effect=SnmpTimeoutError())

    with pytest.raises(SnmpTimeoutError, match="No answer from host"):
        await _fetch(fetcher)

    engine.get.assert_called_once()  # no retry


@pytest.mark.asyncio
async def test_fetch_connection_error_propagates():
    fetcher, engine = _make_fetcher(
        side_effect=SnmpConnectionError("SNMP GET error: unknownUserName"),
    )

    with pytest.raises(SnmpConnectionError, match="unknownUserName"):
        await _fetch(fetcher)

    engine.get.assert_called_once()
