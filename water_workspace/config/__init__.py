# water_workspace/config/__init__.py
from .loader import deep_merge, load_workspace_config
from .schema import WorkspaceConfig

__all__ = ["WorkspaceConfig", "deep_merge", "load_workspace_config"]
