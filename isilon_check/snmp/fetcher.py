"""
SNMP Capacity Fetcher.

Issues one GET for the four ifsFilesystem counters and turns the answer
into a CapacitySnapshot. A partial answer is a failure, never a partial
snapshot.
"""
from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from isilon_check.core.config import SnmpCredentials
from isilon_check.snmp.engine import (
    AsyncSnmpEngine,
    SnmpError,
    SnmpNoSuchObjectError,
    SnmpTarget,
)
from isilon_check.snmp.oid_maps import CapacityMetric

logger = logging.getLogger(__name__)


class IncompleteResponseError(SnmpError):
    """The agent answered without all four capacity counters."""


class CapacitySnapshot(BaseModel):
    """Filesystem byte counters from a single SNMP exchange."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    used: int = Field(ge=0)
    available: int = Field(ge=0)
    free: int = Field(ge=0)


class SnmpCapacityFetcher:
    """Fetch a CapacitySnapshot from one OneFS cluster."""

    def __init__(self, engine: AsyncSnmpEngine | None = None) -> None:
        self._engine = engine or AsyncSnmpEngine()

    async def fetch(
        self,
        hostname: str,
        credentials: SnmpCredentials,
        timeout_seconds: float,
    ) -> CapacitySnapshot:
        """
        Fetch all four capacity counters in one round trip.

        Raises:
            SnmpTimeoutError: no answer within timeout_seconds.
            SnmpConnectionError: session could not be established.
            IncompleteResponseError: any counter missing or non-numeric.
        """
        target = SnmpTarget(
            host=hostname,
            credentials=credentials,
            timeout=timeout_seconds,
        )
        oids = [metric.oid for metric in CapacityMetric]

        try:
            varbinds = await self._engine.get(target, *oids)
        except SnmpNoSuchObjectError as e:
            raise IncompleteResponseError(str(e)) from e

        values: dict[str, int] = {}
        for metric in CapacityMetric:
            raw = varbinds.get(metric.oid)
            if raw is None:
                raise IncompleteResponseError(
                    f"Missing {metric.value} bytes ({metric.oid}) in response"
                )
            try:
                values[metric.value] = int(raw)
            except ValueError as e:
                raise IncompleteResponseError(
                    f"Non-numeric {metric.value} bytes ({metric.oid}): {raw!r}"
                ) from e
            if values[metric.value] < 0:
                raise IncompleteResponseError(
                    f"Negative {metric.value} bytes ({metric.oid}): {raw!r}"
                )

        snapshot = CapacitySnapshot(**values)
        logger.debug(
            "Capacity for %s: total=%d used=%d available=%d free=%d",
            hostname, snapshot.total, snapshot.used,
            snapshot.available, snapshot.free,
        )
        return snapshot
