"""
Isilon filesystem capacity check.

Nagios/Icinga plugin: reads the OneFS ifsFilesystem counters over SNMP and
reports OK / WARNING / CRITICAL on the available bytes left.
"""

__version__ = "1.0.0"
