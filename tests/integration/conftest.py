# tests/integration/conftest.py
"""Integration tests run whole configure/finalize cycles on tmp_path workspaces."""

import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        fspath = str(item.fspath)
        if "/integration/" in fspath or "\\integration\\" in fspath:
            item.add_marker(pytest.mark.integration)
