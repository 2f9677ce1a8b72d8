# water_workspace/pins/catalog.py
"""
Built-in catalog of standard Water Framework PINs.

Modules reference them by mnemonic (`standard_pin("jdbc")`) instead of
re-declaring every property each time.

The catalog is built once at import time and never mutated afterwards.
lookup() hands out deep copies, so callers may freely extend or tweak what
they get back; nothing leaks into the catalog or into other callers' copies.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from water_workspace.core.exceptions import UnknownStandardPinError
from water_workspace.pins.specs import OutputPin

# =============================================================================
# Catalog entries
# =============================================================================


def _jdbc() -> OutputPin:
    p = OutputPin("it.water.persistence.jdbc", required=True)
    p.add_property("db.host", True, False, "", "Database hostname")
    p.add_property("db.port", True, False, "5432", "Database port")
    p.add_property("db.username", True, False, "", "Database username")
    p.add_property("db.password", True, True, "", "Database password")
    p.add_property("db.pool.size", False, False, "10", "Connection pool size")
    return p


def _api_gateway() -> OutputPin:
    p = OutputPin("it.water.api-gateway", required=False)
    p.add_property("gateway.base.url", True, False, "", "API Gateway base URL")
    p.add_property("gateway.admin.url", False, False, "", "API Gateway admin URL")
    p.add_property("gateway.timeout.millis", False, False, "30000", "Connection timeout in milliseconds")
    return p


def _service_discovery() -> OutputPin:
    p = OutputPin("it.water.service-discovery", required=False)
    p.add_property("service.name", True, False, "", "Logical service name")
    p.add_property("service.instance-id", False, False, "", "Unique instance ID (auto UUID if empty)")
    p.add_property("service.endpoint", True, False, "", "Service endpoint URL")
    p.add_property("service.protocol", False, False, "HTTP", "Communication protocol")
    p.add_property("service.health-check.endpoint", False, False, "/actuator/health", "Health check endpoint path")
    p.add_property("service.health-check.interval", False, False, "30", "Health check interval in seconds")
    return p


def _cluster_coordinator() -> OutputPin:
    p = OutputPin("it.water.cluster.coordinator", required=False)
    p.add_property("it.water.connectors.zookeeper.url", True, False, "localhost:2181", "Zookeeper ensemble connection string")
    p.add_property("it.water.connectors.zookeeper.base.path", False, False, "/water-framework/layers", "Zookeeper base path for Water cluster data")
    p.add_property("water.core.cluster.node.id", True, False, "", "Cluster node unique ID")
    p.add_property("water.core.cluster.node.layer.id", True, False, "", "Cluster layer identifier")
    p.add_property("water.core.cluster.node.host", False, False, "", "Node hostname")
    p.add_property("water.core.cluster.node.ip", False, False, "", "Node IP address")
    p.add_property("water.core.cluster.node.use-ip", False, False, "false", "Use IP instead of hostname for cluster registration")
    p.add_property("water.core.cluster.mode.enabled", False, False, "false", "Enable cluster mode")
    return p


def _authentication_issuer() -> OutputPin:
    p = OutputPin("it.water.integration.authentication-issuer", required=True)
    p.add_property("water.authentication.service.issuer", True, False, "water", "Issuer name for JWT tokens")
    return p


_FACTORIES: List[tuple[str, Callable[[], OutputPin]]] = [
    ("jdbc", _jdbc),
    ("api-gateway", _api_gateway),
    ("service-discovery", _service_discovery),
    ("cluster-coordinator", _cluster_coordinator),
    ("authentication-issuer", _authentication_issuer),
]

_CATALOG: Mapping[str, OutputPin] = MappingProxyType({name: factory() for name, factory in _FACTORIES})


# =============================================================================
# Public API
# =============================================================================


class StandardPins:
    """
    Read-only accessors over the standard PIN catalog.

    Usage:
        spec = StandardPins.lookup("jdbc")        # deep copy or None
        spec = StandardPins.require("jdbc")       # deep copy or UnknownStandardPinError
        names = StandardPins.available()
    """

    @staticmethod
    def lookup(mnemonic: str) -> Optional[OutputPin]:
        """Return a copy of the standard PIN for `mnemonic`, or None if unknown."""
        spec = _CATALOG.get(mnemonic)
        return spec.copy() if spec is not None else None

    @staticmethod
    def require(mnemonic: str) -> OutputPin:
        """Like lookup() but raise UnknownStandardPinError for unknown mnemonics."""
        spec = StandardPins.lookup(mnemonic)
        if spec is None:
            raise UnknownStandardPinError(mnemonic, StandardPins.available())
        return spec

    @staticmethod
    def available() -> List[str]:
        """Known mnemonics, in catalog order."""
        return list(_CATALOG.keys())


__all__ = ["StandardPins"]
