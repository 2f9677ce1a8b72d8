# water_workspace/core/hashing.py
"""
Content hashing for incremental descriptor emission.

The rendered descriptor string is the sole cache key of the emission step:
same rendered bytes = same hash = up to date.
"""

from __future__ import annotations

import hashlib


def compute_bytes_hash(data: bytes) -> str:
    """
    Compute SHA-256 hash of raw bytes.

    Returns:
        SHA-256 hash as hex string with "sha256:" prefix
    """
    return f"sha256:{hashlib.sha256(data).hexdigest()}"


def compute_text_hash(text: str) -> str:
    """Compute SHA-256 hash of a string encoded as UTF-8."""
    return compute_bytes_hash(text.encode("utf-8"))


__all__ = ["compute_bytes_hash", "compute_text_hash"]
