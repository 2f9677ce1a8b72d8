# tests/unit/test_pin_catalog.py
"""
Tests for water_workspace.pins.catalog.
"""

import pytest

from water_workspace.core.exceptions import PinDeclarationError, UnknownStandardPinError
from water_workspace.pins.catalog import StandardPins


class TestLookup:
    """Tests for StandardPins.lookup()."""

    @pytest.mark.parametrize(
        "mnemonic,pin_id",
        [
            ("jdbc", "it.water.persistence.jdbc"),
            ("api-gateway", "it.water.api-gateway"),
            ("service-discovery", "it.water.service-discovery"),
            ("cluster-coordinator", "it.water.cluster.coordinator"),
            ("authentication-issuer", "it.water.integration.authentication-issuer"),
        ],
    )
    def test_known_mnemonics(self, mnemonic, pin_id):
        spec = StandardPins.lookup(mnemonic)
        assert spec is not None
        assert spec.id == pin_id

    def test_unknown_returns_none(self):
        assert StandardPins.lookup("redis") is None
        assert StandardPins.lookup("") is None

    def test_mnemonics_are_case_sensitive(self):
        assert StandardPins.lookup("JDBC") is None

    def test_available_in_catalog_order(self):
        assert StandardPins.available() == [
            "jdbc",
            "api-gateway",
            "service-discovery",
            "cluster-coordinator",
            "authentication-issuer",
        ]


class TestEntries:
    """The catalog content itself."""

    def test_jdbc(self):
        spec = StandardPins.lookup("jdbc")
        assert spec.required is True
        assert [p.key for p in spec.properties] == [
            "db.host",
            "db.port",
            "db.username",
            "db.password",
            "db.pool.size",
        ]
        by_key = {p.key: p for p in spec.properties}
        assert by_key["db.port"].default_value == "5432"
        assert by_key["db.password"].sensitive is True
        assert by_key["db.pool.size"].required is False
        assert by_key["db.pool.size"].default_value == "10"

    def test_api_gateway_is_optional(self):
        spec = StandardPins.lookup("api-gateway")
        assert spec.required is False
        assert [p.key for p in spec.properties] == [
            "gateway.base.url",
            "gateway.admin.url",
            "gateway.timeout.millis",
        ]

    def test_service_discovery(self):
        spec = StandardPins.lookup("service-discovery")
        assert len(spec.properties) == 6
        by_key = {p.key: p for p in spec.properties}
        assert by_key["service.protocol"].default_value == "HTTP"
        assert by_key["service.health-check.endpoint"].default_value == "/actuator/health"

    def test_cluster_coordinator(self):
        spec = StandardPins.lookup("cluster-coordinator")
        assert len(spec.properties) == 8
        assert spec.properties[0].key == "it.water.connectors.zookeeper.url"
        assert spec.properties[0].default_value == "localhost:2181"

    def test_authentication_issuer(self):
        spec = StandardPins.lookup("authentication-issuer")
        assert spec.required is True
        assert len(spec.properties) == 1
        prop = spec.properties[0]
        assert prop.key == "water.authentication.service.issuer"
        assert prop.default_value == "water"

    def test_only_jdbc_password_is_sensitive(self):
        sensitive = [
            (name, p.key)
            for name in StandardPins.available()
            for p in StandardPins.lookup(name).properties
            if p.sensitive
        ]
        assert sensitive == [("jdbc", "db.password")]


class TestIsolation:
    """Callers get independent copies."""

    def test_each_lookup_is_a_new_object(self):
        first = StandardPins.lookup("jdbc")
        second = StandardPins.lookup("jdbc")
        assert first is not second
        assert first.properties[0] is not second.properties[0]
        assert first == second

    def test_mutating_a_copy_does_not_leak(self):
        spec = StandardPins.lookup("jdbc")
        spec.required = False
        spec.property("db.schema")
        spec.properties[0].default_value = "changed"

        fresh = StandardPins.lookup("jdbc")
        assert fresh.required is True
        assert len(fresh.properties) == 5
        assert fresh.properties[0].default_value == ""


class TestRequire:
    """Tests for StandardPins.require()."""

    def test_returns_copy(self):
        assert StandardPins.require("jdbc") == StandardPins.lookup("jdbc")

    def test_unknown_raises(self):
        with pytest.raises(UnknownStandardPinError) as exc_info:
            StandardPins.require("redis")

        assert exc_info.value.mnemonic == "redis"
        assert "'redis'" in str(exc_info.value)
        assert "jdbc" in str(exc_info.value)

    def test_is_a_declaration_error(self):
        with pytest.raises(PinDeclarationError):
            StandardPins.require("nope")
