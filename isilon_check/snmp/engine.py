"""
SNMP Engine — pysnmp asyncio wrapper.

提供單一核心操作：
- get() — 在一次 round trip 內取得一或多個 scalar OID 的值

Each call opens its own pysnmp engine and closes it before returning, so no
session outlives the request. The request is bounded by an explicit
asyncio deadline; transport timeouts and deadline expiry raise the same
SnmpTimeoutError.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from pysnmp.error import PySnmpError
from pysnmp.hlapi.v3arch.asyncio import (
    USM_AUTH_HMAC96_MD5,
    USM_AUTH_HMAC96_SHA,
    USM_AUTH_HMAC128_SHA224,
    USM_AUTH_HMAC192_SHA256,
    USM_AUTH_HMAC256_SHA384,
    USM_AUTH_HMAC384_SHA512,
    USM_AUTH_NONE,
    USM_PRIV_CBC56_DES,
    USM_PRIV_CBC168_3DES,
    USM_PRIV_CFB128_AES,
    USM_PRIV_CFB192_AES,
    USM_PRIV_CFB256_AES,
    USM_PRIV_NONE,
    CommunityData,
    ContextData,
    ObjectIdentity,
    ObjectType,
    SnmpEngine as PySnmpEngine,
    UdpTransportTarget,
    UsmUserData,
    get_cmd,
)

from isilon_check.core.config import SnmpCredentials
from isilon_check.core.enums import (
    AuthProtocol,
    PrivProtocol,
    SecurityLevel,
    SnmpVersion,
)

logger = logging.getLogger(__name__)

NO_ANSWER_MESSAGE = "No answer from host"

_AUTH_PROTOCOLS = {
    AuthProtocol.MD5: USM_AUTH_HMAC96_MD5,
    AuthProtocol.SHA: USM_AUTH_HMAC96_SHA,
    AuthProtocol.SHA224: USM_AUTH_HMAC128_SHA224,
    AuthProtocol.SHA256: USM_AUTH_HMAC192_SHA256,
    AuthProtocol.SHA384: USM_AUTH_HMAC256_SHA384,
    AuthProtocol.SHA512: USM_AUTH_HMAC384_SHA512,
}

_PRIV_PROTOCOLS = {
    PrivProtocol.DES: USM_PRIV_CBC56_DES,
    PrivProtocol.TRIPLE_DES: USM_PRIV_CBC168_3DES,
    PrivProtocol.AES: USM_PRIV_CFB128_AES,
    PrivProtocol.AES192: USM_PRIV_CFB192_AES,
    PrivProtocol.AES256: USM_PRIV_CFB256_AES,
}

_SPECIAL_VALUES = ("NoSuchObject", "NoSuchInstance", "EndOfMibView")


class SnmpError(Exception):
    """Base SNMP error."""


class SnmpConnectionError(SnmpError):
    """Session could not be established or the agent rejected the request."""


class SnmpTimeoutError(SnmpError):
    """No response before the deadline."""

    def __init__(self, message: str = NO_ANSWER_MESSAGE) -> None:
        super().__init__(message)


class SnmpNoSuchObjectError(SnmpError):
    """Requested OID does not exist on the device (SNMPv1 noSuchName)."""


@dataclass(frozen=True)
class SnmpTarget:
    """Connection parameters for a single SNMP target."""

    host: str
    credentials: SnmpCredentials = field(default_factory=SnmpCredentials)
    timeout: float = 10.0

    @property
    def port(self) -> int:
        return self.credentials.port


class AsyncSnmpEngine:
    """
    Thin async wrapper around the pysnmp v3arch asyncio API.

    Holds no state between calls: every get() builds and tears down its
    own pysnmp SnmpEngine.
    """

    async def get(self, target: SnmpTarget, *oids: str) -> dict[str, str]:
        """
        SNMP GET for one or more scalar OIDs in a single request.

        Returns:
            {oid_str: value_str} for every OID the agent answered with a
            real value. noSuchObject / noSuchInstance / endOfMibView are
            left out so the caller can detect incomplete responses.

        Raises:
            SnmpTimeoutError: if no answer arrives within target.timeout.
            SnmpConnectionError: on transport, auth or error-status failures.
            SnmpNoSuchObjectError: if an SNMPv1 agent reports noSuchName.
        """
        engine = PySnmpEngine()
        try:
            return await asyncio.wait_for(
                self._get_impl(engine, target, oids),
                timeout=target.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.debug("GET deadline of %ss expired for %s", target.timeout, target.host)
            raise SnmpTimeoutError() from e
        finally:
            engine.close_dispatcher()
            logger.debug("SNMP session to %s closed", target.host)

    async def _get_impl(
        self,
        engine: Any,
        target: SnmpTarget,
        oids: tuple[str, ...],
    ) -> dict[str, str]:
        """Internal GET implementation."""
        try:
            transport = await self._make_transport(target)
        except PySnmpError as e:
            raise SnmpConnectionError(
                f"Cannot open SNMP session to {target.host}: {e}"
            ) from e

        object_types = [ObjectType(ObjectIdentity(oid)) for oid in oids]
        logger.debug(
            "SNMP GET %s:%d (v%s) OIDs=%s",
            target.host, target.port, target.credentials.version.value, oids,
        )

        try:
            error_indication, error_status, error_index, var_binds = await get_cmd(
                engine,
                self._make_auth(target.credentials),
                transport,
                ContextData(),
                *object_types,
                lookupMib=False,
            )
        except PySnmpError as e:
            raise SnmpConnectionError(f"SNMP GET error: {e}") from e

        if error_indication:
            err_str = str(error_indication)
            if "timeout" in err_str.lower():
                raise SnmpTimeoutError()
            raise SnmpConnectionError(f"SNMP GET error: {err_str}")

        if error_status:
            status = error_status.prettyPrint()
            culprit = var_binds[int(error_index) - 1][0] if error_index else "?"
            if status == "noSuchName":
                raise SnmpNoSuchObjectError(f"No such object at {culprit}")
            raise SnmpConnectionError(
                f"SNMP GET error status: {status} at {culprit}"
            )

        result: dict[str, str] = {}
        for oid, val in var_binds:
            if val.__class__.__name__ in _SPECIAL_VALUES:
                logger.debug("%s returned %s", oid, val.__class__.__name__)
                continue
            result[str(oid)] = (
                val.prettyPrint() if hasattr(val, "prettyPrint") else str(val)
            )
        return result

    @staticmethod
    async def _make_transport(target: SnmpTarget) -> Any:
        """Create UDP transport; resolves the host name."""
        # retries=0: the single request is all we get within the deadline
        return await UdpTransportTarget.create(
            (target.host, target.port),
            timeout=target.timeout,
            retries=0,
        )

    @staticmethod
    def _make_auth(credentials: SnmpCredentials) -> Any:
        """Build CommunityData (v1/v2c) or UsmUserData (v3)."""
        if credentials.version != SnmpVersion.V3:
            return CommunityData(
                credentials.community.get_secret_value(),
                mpModel=credentials.version.mp_model,
            )

        auth_key = priv_key = None
        auth_protocol = USM_AUTH_NONE
        priv_protocol = USM_PRIV_NONE
        if credentials.security_level in (
            SecurityLevel.AUTH_NO_PRIV, SecurityLevel.AUTH_PRIV,
        ):
            auth_key = credentials.auth_password.get_secret_value()
            auth_protocol = _AUTH_PROTOCOLS[credentials.auth_protocol]
        if credentials.security_level == SecurityLevel.AUTH_PRIV:
            priv_key = credentials.priv_password.get_secret_value()
            priv_protocol = _PRIV_PROTOCOLS[credentials.priv_protocol]

        return UsmUserData(
            credentials.username,
            authKey=auth_key,
            privKey=priv_key,
            authProtocol=auth_protocol,
            privProtocol=priv_protocol,
        )
