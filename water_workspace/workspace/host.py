# water_workspace/workspace/host.py
"""
Workspace host.

Drives the two-phase lifecycle every descriptor needs:

    1. configure(): discover modules, register them, load every module file
       through the DSL and link inheritsFrom references
    2. finalize(): for every module with a moduleId, resolve inheritance,
       render the descriptor and emit it (skipped when unchanged)

Resolution only happens in finalize(), after every module is configured,
which is the ordering the inheritance resolver relies on.

Usage:
    ws = Workspace(root)
    ws.configure()
    for result in ws.finalize():
        print(result.status, result.output_file)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from water_workspace.config.loader import load_workspace_config
from water_workspace.config.schema import WorkspaceConfig
from water_workspace.core.exceptions import UnknownModuleError, WaterError
from water_workspace.core.paths import WaterPaths
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import CONFIG, EMIT
from water_workspace.pins.cache import DescriptorCache
from water_workspace.pins.descriptor import ModuleDescriptor
from water_workspace.pins.emission import (
    ArtifactCoordinate,
    DescriptorEmitter,
    EmissionResult,
    descriptor_output_file,
)
from water_workspace.pins.inheritance import InheritanceResolver
from water_workspace.pins.serializer import render_descriptor
from water_workspace.workspace.discovery import DiscoveryResult, WorkspaceWalker, parent_address
from water_workspace.workspace.module_file import ModuleFile, apply_descriptor, load_module_file
from water_workspace.workspace.tree import FileSystemTree

logger = get_logger(__name__)

ROOT_ADDRESS = ""
DEFAULT_VERSION = "unspecified"


@dataclass
class ModuleProject:
    """One registered module: where it lives, its coordinate and its descriptor."""

    address: str
    directory: Path
    descriptor: ModuleDescriptor
    group: str = ""
    artifact_id: str = ""
    version: str = DEFAULT_VERSION
    module_file: Optional[Path] = None
    inherits_from: List[str] = field(default_factory=list)

    @property
    def coordinate(self) -> ArtifactCoordinate:
        return ArtifactCoordinate(self.group, self.artifact_id, self.version)

    @property
    def is_root(self) -> bool:
        return self.address == ROOT_ADDRESS


class Workspace:
    """Registers modules and runs the configure / finalize phases."""

    def __init__(
        self,
        root: str | Path,
        config: Optional[WorkspaceConfig] = None,
        cache: Optional[DescriptorCache] = None,
    ) -> None:
        self._root = Path(root).resolve()
        self._config = config if config is not None else load_workspace_config(root=self._root)
        self._cache = cache
        self._modules: Dict[str, ModuleProject] = {}
        self._discovery: Optional[DiscoveryResult] = None
        self._configured = False

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config(self) -> WorkspaceConfig:
        return self._config

    @property
    def discovery(self) -> Optional[DiscoveryResult]:
        return self._discovery

    @property
    def modules(self) -> List[ModuleProject]:
        """Registered modules, root first, then in discovery order."""
        return list(self._modules.values())

    @property
    def cache(self) -> DescriptorCache:
        if self._cache is None:
            self._cache = DescriptorCache(WaterPaths.state_dir(self._root) / self._config.cache_file)
        return self._cache

    def normalize_address(self, address: str) -> str:
        return address.lstrip(self._config.address_separator)

    def get(self, address: str) -> ModuleProject:
        key = self.normalize_address(address)
        if key not in self._modules:
            raise UnknownModuleError(address)
        return self._modules[key]

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def include(self, address: str, directory: Optional[Path] = None) -> ModuleProject:
        """
        Register a module at `address`.

        `directory` defaults to the address mapped back onto the root.
        Registering the same address twice returns the existing module.
        """
        address = self.normalize_address(address)
        if address in self._modules:
            logger.debug(f"{CONFIG} Module {address!r} already registered")
            return self._modules[address]

        if directory is None:
            parts = [p for p in address.split(self._config.address_separator) if p]
            directory = self._root.joinpath(*parts)

        label = f"{self._config.address_separator}{address}" if address else self._config.address_separator
        project = ModuleProject(
            address=address,
            directory=Path(directory),
            descriptor=ModuleDescriptor(name=label),
        )
        self._modules[address] = project
        logger.info(f"{CONFIG} Including {label}")
        return project

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def configure(self) -> None:
        """
        Discover, register and configure every module.

        Raises:
            ModuleFileError: If a module file is invalid
            UnknownStandardPinError: If a module references an unknown standard PIN
            UnknownModuleError: If inheritsFrom names an unregistered module
        """
        if self._configured:
            return

        logger.info(f"{CONFIG} Settings evaluated, searching for modules under {self._root}...")

        self.include(ROOT_ADDRESS, self._root)
        walker = WorkspaceWalker.from_config(self._config)
        self._discovery = walker.walk(FileSystemTree(self._root))
        # Directory names may contain the address separator.
        for module in self._discovery.modules:
            self.include(module.address, module.directory)

        root_file = self._load(self._modules[ROOT_ADDRESS], defaults=None)
        for project in self._modules.values():
            if not project.is_root:
                self._load(project, defaults=root_file)

        for project in self._modules.values():
            self._link(project)

        self._configured = True

    def _load(self, project: ModuleProject, defaults: Optional[ModuleFile]) -> Optional[ModuleFile]:
        path = project.directory / self._config.module_file
        project.artifact_id = project.directory.name

        if not path.is_file():
            # Only the implicitly registered root may lack a module file.
            return None

        module_file = load_module_file(path)
        project.module_file = path
        project.artifact_id = module_file.name or project.directory.name
        project.group = module_file.group or (defaults.group if defaults and defaults.group else "")
        project.version = module_file.version or (
            defaults.version if defaults and defaults.version else DEFAULT_VERSION
        )
        project.inherits_from = apply_descriptor(module_file.water_descriptor, project.descriptor)
        return module_file

    def _link(self, project: ModuleProject) -> None:
        for reference in project.inherits_from:
            key = self.normalize_address(reference)
            if key not in self._modules:
                raise UnknownModuleError(reference, referenced_by=project.descriptor.name)
            project.descriptor.inherits_from(self._modules[key].descriptor)

    def _require_configured(self) -> None:
        if not self._configured:
            raise WaterError("Workspace not configured. Call configure() first.")

    def render(self, address: str, *, mask_sensitive: bool = False) -> str:
        """
        Render one module's descriptor.

        Args:
            address: Module address
            mask_sensitive: Mask sensitive defaults (console display)

        Raises:
            UnknownModuleError: If `address` is not registered
            WaterError: If the module has no moduleId
        """
        self._require_configured()
        project = self.get(address)
        if not project.descriptor.enabled:
            raise WaterError(f"Module {project.descriptor.name!r} declares no moduleId; no descriptor")
        return self._render(project, InheritanceResolver(), mask_sensitive=mask_sensitive)

    def _render(
        self,
        project: ModuleProject,
        resolver: InheritanceResolver,
        *,
        mask_sensitive: bool = False,
    ) -> str:
        descriptor = project.descriptor
        effective = resolver.resolve(descriptor)
        return render_descriptor(
            str(project.coordinate),
            descriptor.module_id,
            descriptor.display_name,
            descriptor.description,
            descriptor.properties_container.properties,
            effective.outputs,
            effective.inputs,
            schema_version=self._config.schema_version,
            mask_sensitive=mask_sensitive,
        )

    def finalize(self, *, force: bool = False) -> List[EmissionResult]:
        """
        Resolve, render and emit every enabled module's descriptor.

        Modules without a moduleId are skipped silently. The cache is saved
        even when a later module fails, so descriptors already written stay
        up to date on the next run.
        """
        self._require_configured()
        resolver = InheritanceResolver()
        emitter = DescriptorEmitter(self.cache, force=force)
        results: List[EmissionResult] = []

        try:
            for project in self._modules.values():
                if not project.descriptor.enabled:
                    logger.debug(f"{EMIT} {project.descriptor.name}: no moduleId, no descriptor")
                    continue
                document = self._render(project, resolver)
                output_file = descriptor_output_file(
                    project.directory,
                    project.coordinate,
                    self._config.build_dir,
                    self._config.descriptor_dir,
                )
                results.append(emitter.emit(document, output_file, project.coordinate))
        finally:
            self.cache.save()

        return results

    def parent_of(self, project: ModuleProject) -> Optional[ModuleProject]:
        """Closest registered ancestor (the root for top-level modules)."""
        if project.is_root:
            return None
        address = parent_address(project.address, self._config.address_separator)
        while address and address not in self._modules:
            address = parent_address(address, self._config.address_separator)
        return self._modules.get(address)


__all__ = ["DEFAULT_VERSION", "ModuleProject", "ROOT_ADDRESS", "Workspace"]
