# tests/unit/conftest.py
"""Tier markers for unit tests."""

from __future__ import annotations

import pytest

# Files with no I/O at all
TIER1_PATTERNS = [
    "test_pin_catalog",
    "test_pin_containers",
    "test_descriptor_serializer",
    "test_inheritance",
    "test_discovery_rules",
]


def pytest_collection_modifyitems(items):
    """Mark unit tests tier1 (pure logic) or tier2 (file system)."""
    for item in items:
        fspath = str(item.fspath)
        if "/unit/" not in fspath and "\\unit\\" not in fspath:
            continue

        if any(marker.name.startswith("tier") for marker in item.iter_markers()):
            continue

        if any(pattern in fspath for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)
