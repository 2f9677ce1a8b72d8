# tests/conftest.py
"""
Root conftest.

Test tiers:
- tier1: pure logic, no I/O
- tier2: touches the file system (tmp_path)
- integration: full workspace configure/finalize runs

Run: pytest -m tier1
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest
import yaml

from water_workspace.core.paths import WaterPaths


@pytest.fixture(autouse=True)
def _reset_water_state():
    """Reset the workspace root override and drop handlers the CLI installs."""
    WaterPaths.reset()
    yield
    WaterPaths.reset()
    logger = logging.getLogger("water_workspace")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


WriteModule = Callable[..., Path]


@pytest.fixture
def write_module(tmp_path: Path) -> WriteModule:
    """
    Write a water.yaml module file under tmp_path.

    Usage:
        write_module("User-api", group="it.water", waterDescriptor={...})
        write_module("", group="it.water", version="1.0.0")   # root
    """

    def _write(relative: str, content: Optional[Dict[str, Any]] = None, **fields: Any) -> Path:
        directory = tmp_path / relative if relative else tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        data = dict(content or {})
        data.update(fields)
        path = directory / "water.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def user_workspace(tmp_path: Path, write_module: WriteModule) -> Path:
    """
    A small workspace:

        <root>/water.yaml                  group + version only
        <root>/User-api/water.yaml         outputs authentication-issuer
        <root>/User-model/water.yaml       no moduleId
        <root>/User-service/water.yaml     inherits :User-api, extends jdbc
        <root>/User-service/build/...      excluded
    """
    write_module("", group="it.water", version="1.0.0")
    write_module(
        "User-api",
        name="User-api",
        waterDescriptor={
            "moduleId": "it.water.user.api",
            "displayName": "User API",
            "output": [{"standardPin": "authentication-issuer"}],
        },
    )
    write_module("User-model", name="User-model")
    write_module(
        "User-service",
        name="User-service",
        waterDescriptor={
            "moduleId": "it.water.user",
            "displayName": "User Service",
            "description": "User registration and management",
            "inheritsFrom": [":User-api"],
            "properties": [
                {"key": "it.water.user.registration.enabled", "required": False, "defaultValue": "false"},
            ],
            "output": [
                {"standardPin": "jdbc", "properties": [{"key": "db.schema", "required": False, "defaultValue": "public"}]},
            ],
            "input": [{"standardPin": "api-gateway", "required": True}],
        },
    )
    write_module("User-service/build/generated", name="ignored")
    return tmp_path
