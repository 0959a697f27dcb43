"""
Byte storage backends for uploaded images.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol


class BlobStore(Protocol):
    """
    Abstract storage for file bytes. Metadata lives in the stored_files
    table; implementations only map a storage key to bytes.
    """

    def save(self, key: str, data: bytes) -> None:
        ...

    def load(self, key: str) -> Optional[bytes]:
        """Return the bytes for key, or None when absent."""
        ...

    def delete(self, key: str) -> None:
        """Remove key; a missing key is not an error."""
        ...


class LocalBlobStore:
    """Stores blobs as files under a base directory."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        path = (self._base_dir / key).resolve()
        if self._base_dir.resolve() not in path.parents:
            raise ValueError(f"Invalid storage key: {key!r}")
        return path

    def save(self, key: str, data: bytes) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def load(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class InMemoryBlobStore:
    """Dict-backed store for tests and ephemeral deployments."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}

    def save(self, key: str, data: bytes) -> None:
        self.blobs[key] = data

    def load(self, key: str) -> Optional[bytes]:
        return self.blobs.get(key)

    def delete(self, key: str) -> None:
        self.blobs.pop(key, None)
