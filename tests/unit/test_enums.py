"""Tests for isilon_check.core.enums."""
from isilon_check.core.enums import (
    AuthProtocol,
    CheckStatus,
    PrivProtocol,
    SecurityLevel,
    SnmpVersion,
)
from isilon_check.snmp.oid_maps import CapacityMetric


class TestCheckStatus:
    def test_exit_codes(self):
        assert CheckStatus.OK.exit_code == 0
        assert CheckStatus.WARNING.exit_code == 1
        assert CheckStatus.CRITICAL.exit_code == 2
        assert CheckStatus.UNKNOWN.exit_code == 4

    def test_every_status_has_exit_code(self):
        assert {s.exit_code for s in CheckStatus} == {0, 1, 2, 4}

    def test_string_enum(self):
        assert isinstance(CheckStatus.OK, str)
        assert CheckStatus("WARNING") == CheckStatus.WARNING


class TestSnmpVersion:
    def test_values(self):
        assert SnmpVersion("1") == SnmpVersion.V1
        assert SnmpVersion("2c") == SnmpVersion.V2C
        assert SnmpVersion("3") == SnmpVersion.V3

    def test_mp_model(self):
        assert SnmpVersion.V1.mp_model == 0
        assert SnmpVersion.V2C.mp_model == 1


class TestUsmEnums:
    def test_security_levels(self):
        assert SecurityLevel("authPriv") == SecurityLevel.AUTH_PRIV
        assert SecurityLevel.NO_AUTH_NO_PRIV.value == "noAuthNoPriv"

    def test_protocols(self):
        assert AuthProtocol("SHA512") == AuthProtocol.SHA512
        assert PrivProtocol("3DES") == PrivProtocol.TRIPLE_DES


class TestCapacityMetric:
    def test_four_members(self):
        assert [m.value for m in CapacityMetric] == [
            "total", "used", "available", "free",
        ]

    def test_oids_are_distinct_isilon_scalars(self):
        oids = [m.oid for m in CapacityMetric]
        assert len(set(oids)) == 4
        for oid in oids:
            assert oid.startswith("1.3.6.1.4.1.12124.1.3.")
            assert oid.endswith(".0")

    def test_available_oid(self):
        assert CapacityMetric.AVAILABLE.oid == "1.3.6.1.4.1.12124.1.3.3.0"
