# water_workspace/workspace/tree.py
"""
Directory tree abstraction walked by workspace discovery.

Nodes are addressed by their path segments relative to the tree root, so
discovery logic never touches real paths and can run against an in-memory
tree in tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Protocol, Set, Tuple, runtime_checkable

Segments = Tuple[str, ...]


@dataclass(frozen=True)
class TreeEntry:
    name: str
    is_dir: bool


@runtime_checkable
class DirectoryTree(Protocol):
    """Read-only view of a directory tree."""

    def list_dir(self, segments: Segments) -> List[TreeEntry]:
        """
        List the direct children of the directory at `segments`.

        Raises:
            OSError: If the directory cannot be read
        """
        ...

    def path_of(self, segments: Segments) -> Path:
        """Real (or nominal) path of a node, for logs and host registration."""
        ...


class FileSystemTree:
    """DirectoryTree backed by the local file system."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def path_of(self, segments: Segments) -> Path:
        return self._root.joinpath(*segments)

    def list_dir(self, segments: Segments) -> List[TreeEntry]:
        entries: List[TreeEntry] = []
        with os.scandir(self.path_of(segments)) as it:
            for entry in it:
                # Symlinked directories are not followed: no loops, no double registration.
                entries.append(TreeEntry(entry.name, entry.is_dir(follow_symlinks=False)))
        return entries


class InMemoryTree:
    """
    DirectoryTree built from a list of file paths.

    Usage:
        tree = InMemoryTree(["X/water.yaml", "X/Y/water.yaml"], unreadable=["X/locked"])
    """

    def __init__(
        self,
        files: Iterable[str],
        *,
        dirs: Iterable[str] = (),
        unreadable: Iterable[str] = (),
        root: str | Path = "/virtual",
    ) -> None:
        self._root = Path(root)
        self._children: Dict[Segments, Dict[str, bool]] = {(): {}}
        self._unreadable: Set[Segments] = {self._split(p) for p in unreadable}

        for d in dirs:
            self._add(self._split(d), is_dir=True)
        for d in self._unreadable:
            self._add(d, is_dir=True)
        for f in files:
            self._add(self._split(f), is_dir=False)

    @staticmethod
    def _split(path: str) -> Segments:
        return tuple(part for part in path.replace("\\", "/").split("/") if part)

    def _add(self, segments: Segments, *, is_dir: bool) -> None:
        for i in range(1, len(segments) + 1):
            parent, name = segments[: i - 1], segments[i - 1]
            node_is_dir = is_dir or i < len(segments)
            self._children.setdefault(parent, {})
            self._children[parent][name] = self._children[parent].get(name, False) or node_is_dir
            if node_is_dir:
                self._children.setdefault(segments[:i], {})

    def path_of(self, segments: Segments) -> Path:
        return self._root.joinpath(*segments)

    def list_dir(self, segments: Segments) -> List[TreeEntry]:
        if segments in self._unreadable:
            raise PermissionError(f"Permission denied: {self.path_of(segments)}")
        if segments not in self._children:
            raise FileNotFoundError(f"No such directory: {self.path_of(segments)}")
        return [TreeEntry(name, is_dir) for name, is_dir in self._children[segments].items()]


__all__ = ["DirectoryTree", "FileSystemTree", "InMemoryTree", "Segments", "TreeEntry"]
