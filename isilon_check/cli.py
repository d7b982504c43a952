"""
Command-line entry point.

Usage:
    check_isilon_space -H isilon01 -w 10000000000000 -c 5000000000000 -p
    check_isilon_space -H isilon01 -V 3 -u monitor -l authPriv \\
        -a SHA -A 'auth-secret' -x AES -X 'priv-secret' -w 2000000000000 -c 1000000000000

Prints one status line on stdout and exits with
OK=0, WARNING=1, CRITICAL=2, UNKNOWN=4.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn, Sequence

from isilon_check import __version__
from isilon_check.core.config import (
    Configuration,
    ConfigurationError,
    Settings,
    build_credentials,
    load_settings,
    parse_threshold,
)
from isilon_check.core.enums import (
    AuthProtocol,
    PrivProtocol,
    SecurityLevel,
    SnmpVersion,
)
from isilon_check.indicators.base import CheckResult
from isilon_check.runner import run_check

logger = logging.getLogger("isilon_check")


class _PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as UNKNOWN instead of exit 2."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = _PluginArgumentParser(
        prog="check_isilon_space",
        description="Check available space on an Isilon/OneFS cluster via SNMP.",
    )
    parser.add_argument("-H", "--hostname", required=True, help="cluster address")
    parser.add_argument(
        "-w", "--warning", required=True,
        help="warn when fewer bytes than this are available",
    )
    parser.add_argument(
        "-c", "--critical", required=True,
        help="critical when fewer bytes than this are available",
    )
    parser.add_argument(
        "-t", "--timeout", type=int, default=settings.timeout,
        help="seconds before giving up (min 2, default %(default)s)",
    )
    parser.add_argument(
        "-p", "--perfdata", action="store_true", help="append performance data",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="include total/used/free in output and log to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    snmp = parser.add_argument_group("SNMP")
    snmp.add_argument(
        "-P", "--port", type=int, default=settings.port,
        help="agent UDP port (default %(default)s)",
    )
    snmp.add_argument(
        "-V", "--snmp-version",
        choices=[v.value for v in SnmpVersion],
        default=settings.snmp_version.value,
        help="protocol version (default %(default)s)",
    )
    snmp.add_argument(
        "-C", "--community", default=settings.community,
        help="community string for v1/v2c",
    )
    snmp.add_argument("-u", "--username", help="SNMPv3 security name")
    snmp.add_argument(
        "-l", "--security-level",
        choices=[v.value for v in SecurityLevel],
        default=SecurityLevel.NO_AUTH_NO_PRIV.value,
    )
    snmp.add_argument(
        "-a", "--auth-protocol",
        choices=[v.value for v in AuthProtocol],
        default=AuthProtocol.SHA.value,
    )
    snmp.add_argument("-A", "--auth-password", help="SNMPv3 auth passphrase")
    snmp.add_argument(
        "-x", "--priv-protocol",
        choices=[v.value for v in PrivProtocol],
        default=PrivProtocol.AES.value,
    )
    snmp.add_argument("-X", "--priv-password", help="SNMPv3 privacy passphrase")
    return parser


def build_configuration(args: argparse.Namespace) -> Configuration:
    """
    Turn parsed flags into the immutable Configuration.

    Raises:
        ConfigurationError: on any invalid value.
    """
    credentials = build_credentials(
        version=args.snmp_version,
        port=args.port,
        community=args.community,
        username=args.username,
        security_level=args.security_level,
        auth_protocol=args.auth_protocol,
        auth_password=args.auth_password,
        priv_protocol=args.priv_protocol,
        priv_password=args.priv_password,
    )
    return Configuration.build(
        hostname=args.hostname,
        warning_threshold_bytes=parse_threshold(args.warning),
        critical_threshold_bytes=parse_threshold(args.critical),
        timeout_seconds=args.timeout,
        include_perfdata=args.perfdata,
        verbose=args.verbose,
        snmp=credentials,
    )


def _setup_logging(settings: Settings, verbose: bool) -> None:
    # stderr only: stdout carries the plugin status line
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the plugin; returns the process exit code."""
    try:
        settings = load_settings()
        args = build_parser(settings).parse_args(argv)
        config = build_configuration(args)
    except ConfigurationError as e:
        result = CheckResult.unknown(str(e))
        print(result.render())
        return result.exit_code

    _setup_logging(settings, config.verbose)
    logger.debug(
        "Checking %s (warning<%d critical<%d timeout=%ds)",
        config.hostname,
        config.warning_threshold_bytes,
        config.critical_threshold_bytes,
        config.timeout_seconds,
    )

    result = asyncio.run(run_check(config))
    print(result.render())
    return result.exit_code
