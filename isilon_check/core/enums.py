"""
Enumeration definitions for the check.

All enums are defined here to maintain consistency and type safety.
"""
from enum import Enum


class CheckStatus(str, Enum):
    """
    Plugin verdict: the single enum for status words and exit codes.

    Use .exit_code for the process exit status. UNKNOWN maps to 4 rather
    than the usual 3; monitoring configs in the field depend on it.
    """

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        """Process exit code: OK=0, WARNING=1, CRITICAL=2, UNKNOWN=4."""
        return {"OK": 0, "WARNING": 1, "CRITICAL": 2, "UNKNOWN": 4}[self.value]


class SnmpVersion(str, Enum):
    """SNMP protocol versions accepted on the command line."""

    V1 = "1"
    V2C = "2c"
    V3 = "3"

    @property
    def mp_model(self) -> int:
        """pysnmp message processing model for community-based versions."""
        return {"1": 0, "2c": 1, "3": 3}[self.value]


class SecurityLevel(str, Enum):
    """SNMPv3 USM security levels."""

    NO_AUTH_NO_PRIV = "noAuthNoPriv"
    AUTH_NO_PRIV = "authNoPriv"
    AUTH_PRIV = "authPriv"


class AuthProtocol(str, Enum):
    """SNMPv3 authentication protocols."""

    MD5 = "MD5"
    SHA = "SHA"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"


class PrivProtocol(str, Enum):
    """SNMPv3 privacy (encryption) protocols."""

    DES = "DES"
    TRIPLE_DES = "3DES"
    AES = "AES"
    AES192 = "AES192"
    AES256 = "AES256"
