# water_workspace/workspace/__init__.py
"""Workspace discovery, module files and the configure/finalize host."""

from .discovery import (
    DiscoveredModule,
    DiscoveryResult,
    VisitDecision,
    WorkspaceWalker,
    decide,
    discover,
    format_address,
    is_excluded,
)
from .host import ModuleProject, Workspace
from .module_file import ModuleFile, apply_descriptor, load_module_file
from .tree import DirectoryTree, FileSystemTree, InMemoryTree, TreeEntry

__all__ = [
    "DirectoryTree",
    "DiscoveredModule",
    "DiscoveryResult",
    "FileSystemTree",
    "InMemoryTree",
    "ModuleFile",
    "ModuleProject",
    "TreeEntry",
    "VisitDecision",
    "Workspace",
    "WorkspaceWalker",
    "apply_descriptor",
    "decide",
    "discover",
    "format_address",
    "is_excluded",
    "load_module_file",
]
