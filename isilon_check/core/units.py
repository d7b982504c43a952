"""Human-readable byte quantities for status lines."""
from __future__ import annotations

_GIB = 1024 ** 3


def format_bytes(value: int) -> str:
    """
    Render a raw byte count as whole gigabytes with thousands grouping.

    e.g. 1325598490624 → "1,234 GB"
    """
    return f"{value // _GIB:,} GB"
