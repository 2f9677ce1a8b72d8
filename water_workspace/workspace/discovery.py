# water_workspace/workspace/discovery.py
"""
Workspace discovery.

Walks a workspace directory tree and turns every nested module file
(`water.yaml` by default) into a module address:

    <root>/X/water.yaml        -> "X"
    <root>/X/Y/water.yaml      -> "X:Y"
    <root>/X/Y/Z/water.yaml    -> "X:Y:Z"

The root's own module file is ignored: the host registers the root module
implicitly.

Walk order is depth-first; inside a directory, entries are visited by name
with files before subdirectories, so a parent module is always found before
its children. Directories named in the exclusion set (build output,
packaging, binaries, sources) are skipped with their whole subtree.

An unreadable directory is logged and recorded as an error; the rest of the
workspace is still discovered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Tuple

from water_workspace.config.schema import WorkspaceConfig
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import DISCOVERY
from water_workspace.workspace.tree import DirectoryTree, FileSystemTree, Segments, TreeEntry

logger = get_logger(__name__)

DEFAULT_EXCLUDE_DIRS: Tuple[str, ...] = ("exam", "build", "target", "bin", "src")
DEFAULT_MODULE_FILE = "water.yaml"
DEFAULT_SEPARATOR = ":"


class VisitDecision(str, Enum):
    DESCEND = "descend"
    SKIP_SUBTREE = "skip-subtree"
    RECORD_MODULE = "record-module"
    IGNORE = "ignore"


# =============================================================================
# Pure rules
# =============================================================================


def is_excluded(segments: Segments, exclude_dirs: Iterable[str]) -> bool:
    """True if any segment of the path is an excluded directory name."""
    excluded = set(exclude_dirs)
    return any(segment in excluded for segment in segments)


def format_address(segments: Segments, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Turn relative path segments into a module address.

    Windows and POSIX separators inside segments are both normalized, and
    leading separators are stripped.
    """
    parts: List[str] = []
    for segment in segments:
        parts.extend(p for p in segment.replace("\\", "/").split("/") if p)
    return separator.join(parts).lstrip(separator)


def parent_address(address: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Address of the enclosing module path ("" for top-level modules)."""
    head, _, _ = address.rpartition(separator)
    return head


def decide(
    segments: Segments,
    entry: TreeEntry,
    *,
    module_file: str = DEFAULT_MODULE_FILE,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> VisitDecision:
    """
    Decide what to do with `entry`, a child of the directory at `segments`.
    """
    if entry.is_dir:
        if is_excluded(segments + (entry.name,), exclude_dirs):
            return VisitDecision.SKIP_SUBTREE
        return VisitDecision.DESCEND

    if entry.name == module_file and segments:
        return VisitDecision.RECORD_MODULE
    return VisitDecision.IGNORE


# =============================================================================
# Walker
# =============================================================================


@dataclass(frozen=True)
class DiscoveredModule:
    address: str
    segments: Segments
    directory: Path


@dataclass
class DiscoveryResult:
    """
    Result of walking a workspace.

    Contains discovered modules (in walk order) and any errors encountered.
    """

    root: Path
    modules: List[DiscoveredModule] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)  # (path, error_message)
    skipped_dirs: List[str] = field(default_factory=list)

    @property
    def addresses(self) -> List[str]:
        return [m.address for m in self.modules]

    @property
    def total_errors(self) -> int:
        return len(self.errors)


class WorkspaceWalker:
    """
    Visitor over a DirectoryTree producing module addresses.

    Usage:
        walker = WorkspaceWalker.from_config(config)
        result = walker.walk(FileSystemTree(root))
        for address in result.addresses:
            host.include(address)
    """

    def __init__(
        self,
        module_file: str = DEFAULT_MODULE_FILE,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self._module_file = module_file
        self._exclude_dirs: Set[str] = set(exclude_dirs)
        self._separator = separator

    @classmethod
    def from_config(cls, config: WorkspaceConfig) -> WorkspaceWalker:
        return cls(
            module_file=config.module_file,
            exclude_dirs=config.exclude_dirs,
            separator=config.address_separator,
        )

    def walk(
        self,
        tree: DirectoryTree,
        register: Optional[Callable[[str], object]] = None,
    ) -> DiscoveryResult:
        """
        Walk `tree` depth-first.

        Args:
            tree: Directory tree to walk
            register: Called once per discovered address, in walk order
        """
        result = DiscoveryResult(root=tree.path_of(()))
        seen: Set[str] = set()
        self._visit(tree, (), result, seen, register)

        logger.info(
            f"{DISCOVERY} Scanned {result.root}: {len(result.modules)} modules, "
            f"{len(result.errors)} errors, {len(result.skipped_dirs)} skipped dirs"
        )
        return result

    def _visit(
        self,
        tree: DirectoryTree,
        segments: Segments,
        result: DiscoveryResult,
        seen: Set[str],
        register: Optional[Callable[[str], object]],
    ) -> None:
        try:
            entries = tree.list_dir(segments)
        except OSError as e:
            path = str(tree.path_of(segments))
            logger.warning(f"{DISCOVERY} Cannot read {path}, skipping subtree: {e}")
            result.errors.append((path, str(e)))
            return

        # Files first, then subdirectories; each group by name.
        ordered = sorted(entries, key=lambda e: (e.is_dir, e.name))
        subdirs: List[Segments] = []

        for entry in ordered:
            decision = decide(
                segments,
                entry,
                module_file=self._module_file,
                exclude_dirs=self._exclude_dirs,
            )
            if decision is VisitDecision.RECORD_MODULE:
                address = format_address(segments, self._separator)
                if address in seen:
                    continue
                seen.add(address)
                module = DiscoveredModule(address, segments, tree.path_of(segments))
                result.modules.append(module)
                logger.info(f"{DISCOVERY} Found module {address!r} at {module.directory}")
                if register is not None:
                    register(address)
            elif decision is VisitDecision.SKIP_SUBTREE:
                result.skipped_dirs.append(str(tree.path_of(segments + (entry.name,))))
            elif decision is VisitDecision.DESCEND:
                subdirs.append(segments + (entry.name,))

        for child in subdirs:
            self._visit(tree, child, result, seen, register)


def discover(
    root: str | Path,
    *,
    config: Optional[WorkspaceConfig] = None,
    tree: Optional[DirectoryTree] = None,
    register: Optional[Callable[[str], object]] = None,
) -> DiscoveryResult:
    """
    Discover module addresses under `root`.

    Args:
        root: Workspace root directory
        config: Workspace config (defaults used when None)
        tree: Tree to walk instead of the real file system
        register: Host registration callback
    """
    walker = WorkspaceWalker.from_config(config) if config is not None else WorkspaceWalker()
    return walker.walk(tree if tree is not None else FileSystemTree(root), register)


__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "DEFAULT_MODULE_FILE",
    "DiscoveredModule",
    "DiscoveryResult",
    "VisitDecision",
    "WorkspaceWalker",
    "decide",
    "discover",
    "format_address",
    "is_excluded",
    "parent_address",
]
