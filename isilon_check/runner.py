"""
Check runner — fetch → evaluate.

Every SNMP failure collapses to an UNKNOWN result here; the reason text
is kept for the status line and the concrete error type for the log.
"""
from __future__ import annotations

import logging

from isilon_check.core.config import Configuration
from isilon_check.indicators.base import CheckResult
from isilon_check.indicators.capacity import CapacityEvaluator
from isilon_check.snmp.engine import SnmpError
from isilon_check.snmp.fetcher import SnmpCapacityFetcher

logger = logging.getLogger(__name__)


async def run_check(
    config: Configuration,
    fetcher: SnmpCapacityFetcher | None = None,
    evaluator: CapacityEvaluator | None = None,
) -> CheckResult:
    """Run one capacity check against config.hostname. No retries."""
    fetcher = fetcher or SnmpCapacityFetcher()
    evaluator = evaluator or CapacityEvaluator()

    try:
        snapshot = await fetcher.fetch(
            config.hostname,
            config.snmp,
            config.timeout_seconds,
        )
    except SnmpError as e:
        logger.info("%s failed for %s: %s", type(e).__name__, config.hostname, e)
        return CheckResult.unknown(str(e))

    return evaluator.evaluate(snapshot, config)
