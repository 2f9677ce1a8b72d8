# water_workspace/pins/emission.py
"""
Descriptor emission step.

Writes a pre-rendered descriptor to
`<module>/<build_dir>/<descriptor_dir>/<artifactId>-<version>.water.json`.

The rendered string is the step's single tracked input and the file its
single tracked output: when the hash of the string matches the last run and
the file still exists, the step is UP_TO_DATE and nothing is rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from water_workspace.core.hashing import compute_text_hash
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import EMIT
from water_workspace.pins.cache import DescriptorCache

logger = get_logger(__name__)

DESCRIPTOR_EXTENSION = "water.json"


class EmissionStatus(str, Enum):
    WRITTEN = "written"
    UP_TO_DATE = "up-to-date"


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Maven-style coordinate of a module (group:artifactId:version)."""

    group: str
    artifact_id: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact_id}:{self.version}"

    @property
    def descriptor_file_name(self) -> str:
        return f"{self.artifact_id}-{self.version}.{DESCRIPTOR_EXTENSION}"


@dataclass(frozen=True)
class PublishedArtifact:
    """Extra artifact handed to the host's publications (no classifier)."""

    coordinate: ArtifactCoordinate
    file: Path
    extension: str = DESCRIPTOR_EXTENSION
    classifier: Optional[str] = None


@dataclass(frozen=True)
class EmissionResult:
    status: EmissionStatus
    output_file: Path
    input_hash: str
    artifact: PublishedArtifact

    @property
    def written(self) -> bool:
        return self.status is EmissionStatus.WRITTEN


def descriptor_output_file(
    module_dir: Path,
    coordinate: ArtifactCoordinate,
    build_dir: str = "build",
    descriptor_dir: str = "water",
) -> Path:
    return Path(module_dir) / build_dir / descriptor_dir / coordinate.descriptor_file_name


class DescriptorEmitter:
    """
    Writes descriptors, skipping unchanged ones.

    Usage:
        emitter = DescriptorEmitter(DescriptorCache(path))
        result = emitter.emit(document, output_file, coordinate)
    """

    def __init__(self, cache: Optional[DescriptorCache] = None, *, force: bool = False) -> None:
        self._cache = cache if cache is not None else DescriptorCache()
        self._force = force

    @property
    def cache(self) -> DescriptorCache:
        return self._cache

    def emit(self, document: str, output_file: Path, coordinate: ArtifactCoordinate) -> EmissionResult:
        output_file = Path(output_file)
        input_hash = compute_text_hash(document)
        artifact = PublishedArtifact(coordinate=coordinate, file=output_file)

        if not self._force and self._cache.is_up_to_date(output_file, input_hash):
            logger.info(f"{EMIT} {coordinate}: descriptor UP-TO-DATE ({output_file})")
            return EmissionResult(EmissionStatus.UP_TO_DATE, output_file, input_hash, artifact)

        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_bytes(document.encode("utf-8"))
        self._cache.record(output_file, input_hash)

        logger.info(f"{EMIT} {coordinate}: wrote descriptor {output_file}")
        return EmissionResult(EmissionStatus.WRITTEN, output_file, input_hash, artifact)


__all__ = [
    "DESCRIPTOR_EXTENSION",
    "ArtifactCoordinate",
    "DescriptorEmitter",
    "EmissionResult",
    "EmissionStatus",
    "PublishedArtifact",
    "descriptor_output_file",
]
