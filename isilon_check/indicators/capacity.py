"""
Filesystem capacity evaluator.

Keys the verdict on ifsAvailableBytes alone: the room left before the
cluster is full. Thresholds are floors, not ceilings.
"""
from __future__ import annotations

from isilon_check.core.config import Configuration
from isilon_check.core.enums import CheckStatus
from isilon_check.core.units import format_bytes
from isilon_check.indicators.base import CHECK_NAME, CheckResult
from isilon_check.snmp.fetcher import CapacitySnapshot


class CapacityEvaluator:
    """
    Capacity 指標評估器。

    Branch order is part of the plugin's observable behaviour:
    1. available < warning   → WARNING
    2. available < critical  → CRITICAL
    3. otherwise             → OK

    Because warning >= critical is enforced by Configuration, the CRITICAL
    branch is never reached. This is kept as-is; see DESIGN.md.
    """

    perfdata_label = "ifsAvailable"

    def evaluate(
        self,
        snapshot: CapacitySnapshot,
        config: Configuration,
    ) -> CheckResult:
        available = snapshot.available

        if available < config.warning_threshold_bytes:
            status = CheckStatus.WARNING
        elif available < config.critical_threshold_bytes:
            status = CheckStatus.CRITICAL
        else:
            status = CheckStatus.OK

        message = f"{CHECK_NAME} {status.value} - {format_bytes(available)} left"
        if config.verbose:
            message += (
                f" (total {format_bytes(snapshot.total)},"
                f" used {format_bytes(snapshot.used)},"
                f" free {format_bytes(snapshot.free)})"
            )

        perfdata = None
        if config.include_perfdata:
            perfdata = (
                f"{self.perfdata_label}={available};"
                f"{config.warning_threshold_bytes};"
                f"{config.critical_threshold_bytes}"
            )

        return CheckResult(status=status, message=message, perfdata=perfdata)
