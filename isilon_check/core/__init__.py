"""Core module - contains enums, configuration and unit formatting."""
from .config import (
    Configuration,
    ConfigurationError,
    Settings,
    SnmpCredentials,
    get_settings,
    load_settings,
    parse_threshold,
)
from .enums import (
    AuthProtocol,
    CheckStatus,
    PrivProtocol,
    SecurityLevel,
    SnmpVersion,
)

__all__ = [
    "AuthProtocol",
    "CheckStatus",
    "Configuration",
    "ConfigurationError",
    "PrivProtocol",
    "SecurityLevel",
    "Settings",
    "SnmpCredentials",
    "SnmpVersion",
    "get_settings",
    "load_settings",
    "parse_threshold",
]
