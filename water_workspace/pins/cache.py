# water_workspace/pins/cache.py
"""
Incremental emission cache.

Manages reading and writing of .water/descriptor-cache.json, which maps each
descriptor output path to the hash of the document last written there.

Key responsibilities:
- Load/save the cache file
- Answer "is this output up to date for this input hash?"

Key non-responsibilities:
- NO rendering, NO file emission (that's DescriptorEmitter's job)
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import EMIT

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CacheEntry(BaseModel):
    """Tracked input of one emitted descriptor."""

    model_config = ConfigDict(extra="forbid")

    input_hash: str = Field(..., description="SHA-256 of the rendered document (sha256:...)")
    written_at: datetime = Field(default_factory=_utcnow, description="Last write time")


class CacheState(BaseModel):
    """Root of descriptor-cache.json."""

    model_config = ConfigDict(extra="forbid")

    version: int = 1
    entries: Dict[str, CacheEntry] = Field(default_factory=dict, description="Entries keyed by output path")


class DescriptorCache:
    """
    Content-hash cache consulted by the emission step.

    Usage:
        cache = DescriptorCache(path)
        if not cache.is_up_to_date(out_file, input_hash):
            ...write...
            cache.record(out_file, input_hash)
        cache.save()
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        """
        Args:
            path: Cache file. None keeps the cache in memory only.
        """
        self._path = path
        self._state: Optional[CacheState] = None
        self._dirty = False

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def state(self) -> CacheState:
        """Current state, loading if necessary."""
        if self._state is None:
            self.load()
        assert self._state is not None
        return self._state

    def load(self) -> CacheState:
        """
        Load state from disk.

        A missing or unreadable cache file yields an empty cache: the worst
        case is that every descriptor gets rewritten once.
        """
        if self._path is not None and self._path.exists():
            try:
                with self._path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                self._state = CacheState.model_validate(data)
                logger.debug(f"{EMIT} Loaded descriptor cache from {self._path}")
            except (OSError, json.JSONDecodeError, ValidationError) as e:
                logger.warning(f"{EMIT} Failed to load descriptor cache, starting empty: {e}")
                self._state = CacheState()
        else:
            self._state = CacheState()

        self._dirty = False
        return self._state

    @staticmethod
    def _key(output_file: Path) -> str:
        return str(Path(output_file).resolve())

    def is_up_to_date(self, output_file: Path, input_hash: str) -> bool:
        """True if `output_file` exists and was last written from `input_hash`."""
        entry = self.state.entries.get(self._key(output_file))
        return entry is not None and entry.input_hash == input_hash and Path(output_file).is_file()

    def record(self, output_file: Path, input_hash: str) -> None:
        self.state.entries[self._key(output_file)] = CacheEntry(input_hash=input_hash)
        self._dirty = True

    def invalidate(self, output_file: Path) -> None:
        if self.state.entries.pop(self._key(output_file), None) is not None:
            self._dirty = True

    def save(self) -> None:
        """
        Save state to disk.

        Only writes if there are unsaved changes; in-memory caches never write.
        """
        if self._state is None or self._path is None:
            return

        if not self._dirty:
            logger.debug(f"{EMIT} Descriptor cache unchanged, skipping save")
            return

        self._path.parent.mkdir(parents=True, exist_ok=True)

        # Write atomically using temp file
        temp_path = self._path.with_suffix(".tmp")
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(self._state.model_dump(mode="json"), f, indent=2)
        temp_path.replace(self._path)
        self._dirty = False
        logger.debug(f"{EMIT} Saved descriptor cache to {self._path}")


__all__ = ["CacheEntry", "CacheState", "DescriptorCache"]
