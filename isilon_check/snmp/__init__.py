"""
SNMP Collection Module.

架構：
    AsyncSnmpEngine      — pysnmp async wrapper (single GET, deadline-bound)
    oid_maps             — ISILON-MIB ifsFilesystem OIDs / CapacityMetric
    SnmpCapacityFetcher  — one GET → CapacitySnapshot or typed failure
"""
