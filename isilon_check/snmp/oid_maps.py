"""
OID Constants for the OneFS filesystem capacity scalars.

所有 SNMP OID 常數集中管理於此，fetcher 只需引用。
"""
from __future__ import annotations

from enum import Enum

# =============================================================================
# Vendor-Specific: Isilon / Dell EMC OneFS (Enterprise 12124)
# =============================================================================

# ISILON-MIB::ifsFilesystem
IFS_FILESYSTEM = "1.3.6.1.4.1.12124.1.3"

IFS_TOTAL_BYTES = f"{IFS_FILESYSTEM}.1.0"      # ifsTotalBytes
IFS_USED_BYTES = f"{IFS_FILESYSTEM}.2.0"       # ifsUsedBytes
IFS_AVAILABLE_BYTES = f"{IFS_FILESYSTEM}.3.0"  # ifsAvailableBytes
IFS_FREE_BYTES = f"{IFS_FILESYSTEM}.4.0"       # ifsFreeBytes (includes VHS reserve)


class CapacityMetric(str, Enum):
    """
    The four filesystem counters fetched in one GET.

    Values are the snapshot field names; .oid is the numeric identifier.
    """

    TOTAL = "total"
    USED = "used"
    AVAILABLE = "available"
    FREE = "free"

    @property
    def oid(self) -> str:
        return {
            "total": IFS_TOTAL_BYTES,
            "used": IFS_USED_BYTES,
            "available": IFS_AVAILABLE_BYTES,
            "free": IFS_FREE_BYTES,
        }[self.value]
