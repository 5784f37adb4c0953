"""Key-value storage backends.

Every collection is persisted as one serialized JSON blob under one key.
Backends only move strings around; parsing and seeding live in
``justiceflow.store``.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import redis

from .config import Settings, settings as default_settings
from .utils.errors import StorageUnavailable

logger = logging.getLogger(__name__)


class StorageBackend:
    """Minimal string key-value interface."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryBackend(StorageBackend):
    """In-process dictionary backend, used by tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class FileBackend(StorageBackend):
    """Stores each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        # Write to a sibling temp file and swap it in so readers never see
        # a half-written blob.
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(key))
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise
        logger.debug(f"[storage] Wrote {len(value)} chars to {self._path(key)}")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class RedisBackend(StorageBackend):
    """Stores each key as a Redis string."""

    def __init__(self, client: Optional[redis.Redis] = None, prefix: Optional[str] = None):
        if client is None:
            from .utils.redis import get_redis_client
            client = get_redis_client()
        self.client = client
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(self._key(key))
        except redis.RedisError as e:
            logger.error(f"[storage] Redis read failed for {key}: {e}")
            raise StorageUnavailable(f"Redis read failed for {key}") from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._key(key), value)
        except redis.RedisError as e:
            logger.error(f"[storage] Redis write failed for {key}: {e}")
            raise StorageUnavailable(f"Redis write failed for {key}") from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(self._key(key))
        except redis.RedisError as e:
            logger.error(f"[storage] Redis delete failed for {key}: {e}")
            raise StorageUnavailable(f"Redis delete failed for {key}") from e


def get_backend(config: Optional[Settings] = None) -> StorageBackend:
    """Build the backend named by ``STORAGE_BACKEND``.

    Raises:
        ValueError: If the configured backend name is unknown
    """
    config = config or default_settings
    name = config.STORAGE_BACKEND.lower()

    if name == "memory":
        return MemoryBackend()
    if name == "file":
        return FileBackend(config.STORAGE_DIR)
    if name == "redis":
        from .utils.redis import get_redis_client
        return RedisBackend(get_redis_client(config.REDIS_URL), prefix=config.REDIS_KEY_PREFIX)

    raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND}")


__all__ = [
    "StorageBackend",
    "MemoryBackend",
    "FileBackend",
    "RedisBackend",
    "get_backend",
]
