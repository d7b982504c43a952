"""
Check configuration.

Two layers:
    Settings       — site defaults loaded by pydantic-settings from
                     environment variables (ISILON_CHECK_*) or a .env file.
    Configuration  — the validated, immutable values for one invocation,
                     built once by the CLI from flags + Settings.

.env 範例::

    ISILON_CHECK_COMMUNITY=monitoring
    ISILON_CHECK_SNMP_VERSION=2c
    ISILON_CHECK_TIMEOUT=15
    ISILON_CHECK_LOG_LEVEL=DEBUG
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from isilon_check.core.enums import (
    AuthProtocol,
    PrivProtocol,
    SecurityLevel,
    SnmpVersion,
)

# RFC 3414: USM passphrases shorter than this are rejected by agents.
_MIN_PASSPHRASE_LENGTH = 8

# ifsFilesystem counters are Counter64; thresholds share their range.
MAX_THRESHOLD_BYTES = 2**64 - 1

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Invalid or missing check parameters (reported before any SNMP traffic)."""


class Settings(BaseSettings):
    """Site defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ISILON_CHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    community: str = Field(default="public", description="SNMP v1/v2c community")
    port: int = Field(default=161, description="SNMP agent UDP port")
    snmp_version: SnmpVersion = Field(
        default=SnmpVersion.V2C,
        description="SNMP protocol version used when -V is not given",
    )
    timeout: int = Field(
        default=10,
        description="Seconds to wait for the agent before reporting UNKNOWN",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for stderr diagnostics (DEBUG with --verbose)",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in _LOG_LEVELS:
            raise ValueError(
                f"unknown log level {value!r}, expected one of {', '.join(_LOG_LEVELS)}"
            )
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings() -> Settings:
    """
    get_settings() for the CLI: bad environment or .env values surface as
    ConfigurationError instead of a pydantic traceback.

    Raises:
        ConfigurationError: with the first validation message.
    """
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"settings {_first_error(e)}") from e


class SnmpCredentials(BaseModel):
    """
    SNMP session parameters.

    Opaque to the evaluator; only the fetcher's engine reads them.
    """

    model_config = ConfigDict(frozen=True)

    version: SnmpVersion = SnmpVersion.V2C
    port: int = Field(default=161, ge=1, le=65535)
    community: SecretStr = SecretStr("public")

    # SNMPv3 (USM)
    username: str | None = None
    security_level: SecurityLevel = SecurityLevel.NO_AUTH_NO_PRIV
    auth_protocol: AuthProtocol = AuthProtocol.SHA
    auth_password: SecretStr | None = None
    priv_protocol: PrivProtocol = PrivProtocol.AES
    priv_password: SecretStr | None = None

    @model_validator(mode="after")
    def _check_usm(self) -> SnmpCredentials:
        if self.version != SnmpVersion.V3:
            return self
        if not self.username:
            raise ValueError("SNMPv3 requires a username")
        if self.security_level in (SecurityLevel.AUTH_NO_PRIV, SecurityLevel.AUTH_PRIV):
            _require_passphrase("auth password", self.auth_password)
        if self.security_level == SecurityLevel.AUTH_PRIV:
            _require_passphrase("priv password", self.priv_password)
        return self


def _require_passphrase(name: str, value: SecretStr | None) -> None:
    if value is None or not value.get_secret_value():
        raise ValueError(f"{name} is required for this security level")
    if len(value.get_secret_value()) < _MIN_PASSPHRASE_LENGTH:
        raise ValueError(
            f"{name} must be at least {_MIN_PASSPHRASE_LENGTH} characters"
        )


class Configuration(BaseModel):
    """
    Validated parameters for a single check run.

    Thresholds are floors of *remaining* space in bytes, so the warning
    floor must sit at or above the critical floor.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str
    warning_threshold_bytes: int = Field(ge=0, le=MAX_THRESHOLD_BYTES)
    critical_threshold_bytes: int = Field(ge=0, le=MAX_THRESHOLD_BYTES)
    timeout_seconds: int = Field(default=10, ge=2)
    include_perfdata: bool = False
    verbose: bool = False
    snmp: SnmpCredentials = SnmpCredentials()

    @field_validator("hostname")
    @classmethod
    def _hostname_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("hostname must not be empty")
        return value

    @model_validator(mode="after")
    def _warning_above_critical(self) -> Configuration:
        if self.warning_threshold_bytes < self.critical_threshold_bytes:
            raise ValueError(
                "warning threshold must be greater than or equal to "
                "critical threshold"
            )
        return self

    @classmethod
    def build(cls, **values: Any) -> Configuration:
        """
        Construct a Configuration, converting validation failures.

        Raises:
            ConfigurationError: with the first validation message.
        """
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(_first_error(e)) from e


def build_credentials(**values: Any) -> SnmpCredentials:
    """SnmpCredentials(**values), raising ConfigurationError on bad input."""
    try:
        return SnmpCredentials(**values)
    except ValidationError as e:
        raise ConfigurationError(_first_error(e)) from e


def _first_error(exc: ValidationError) -> str:
    """Condense a pydantic ValidationError into one status-line message."""
    err = exc.errors()[0]
    msg = str(err.get("msg", exc))
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {msg}" if loc else msg


def parse_threshold(text: str) -> int:
    """
    Parse a threshold flag value into a byte count.

    A single trailing "%" is stripped for compatibility with older
    command definitions; the number is always read as raw bytes.

    Raises:
        ConfigurationError: if the value is not a non-negative integer.
    """
    value = text.strip()
    if value.endswith("%"):
        value = value[:-1]
    if not (value.isascii() and value.isdigit()):
        raise ConfigurationError(f"invalid threshold value: {text!r}")
    return int(value)
