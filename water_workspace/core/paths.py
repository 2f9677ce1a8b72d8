# water_workspace/core/paths.py
"""
Central path management for water-workspace.

ALL components that need file paths should use this module.

Layout:
    <root>/.water/config.yaml                  workspace config overrides
    <root>/.water/descriptor-cache.json        incremental emission cache
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class WaterPaths:
    """
    Central path management.

    The workspace root defaults to the current working directory. It can be
    overridden for tests or when the CLI is pointed at another root.

    Usage:
        from water_workspace.core.paths import WaterPaths

        WaterPaths.set_root("/path/to/workspace")
        config_path = WaterPaths.config()
    """

    _root_override: Optional[Path] = None

    @classmethod
    def set_root(cls, path: Optional[str | Path]) -> None:
        """
        Override the workspace root.

        Pass None to reset to default (CWD).
        """
        if path is None:
            cls._root_override = None
        else:
            cls._root_override = Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace root (CWD). Useful in tests."""
        cls._root_override = None

    # =========================================================================
    # Core Paths
    # =========================================================================

    @classmethod
    def root(cls) -> Path:
        """The workspace root directory."""
        if cls._root_override is not None:
            return cls._root_override
        return Path.cwd()

    @staticmethod
    def state_dir(root: str | Path) -> Path:
        """The .water state directory of an explicit workspace root."""
        return Path(root) / ".water"

    @classmethod
    def workspace(cls) -> Path:
        """
        The .water state directory.

        Location: {root}/.water/
        """
        return cls.state_dir(cls.root())

    @classmethod
    def config(cls) -> Path:
        """
        Workspace config overrides.

        Location: {root}/.water/config.yaml
        """
        return cls.workspace() / "config.yaml"


__all__ = ["WaterPaths"]
