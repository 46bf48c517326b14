"""
Key-Value Store Module

Durable blob storage used by the persistence adapter. Any backend that
offers ``get(key)`` and ``set(key, blob)`` works.

Author: YSNRFD
Version: 1.0.0
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from vos.core.config_loader import Config
from vos.logger import get_logger


class KeyValueStore(ABC):
    """Interface for blob stores."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, blob: str) -> None:
        """Store ``blob`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class MemoryStore(KeyValueStore):
    """Dict-backed store; state lives as long as the object."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, blob: str) -> None:
        self._data[key] = blob

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore(KeyValueStore):
    """
    Store backed by a JSON object file on the host, mapping keys to blobs.

    The file is created on the first ``set``. A missing or unreadable file
    reads as an empty store.

    Example:
        >>> store = JsonFileStore('/tmp/vos_state.json')
        >>> store.set('virtualFileSystem', '{}')
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._logger = get_logger('storage')

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            self._logger.warning(
                "Ignoring unreadable store file",
                context={'path': str(self.path), 'error': str(e)}
            )
            return {}

        if not isinstance(data, dict):
            self._logger.warning(
                "Ignoring store file without a top-level object",
                context={'path': str(self.path)}
            )
            return {}
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding='utf-8')

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, blob: str) -> None:
        data = self._read_all()
        data[key] = blob
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def create_store(config: Config) -> KeyValueStore:
    """Build the store selected by ``config.storage.backend``."""
    if config.storage.backend == 'json':
        return JsonFileStore(config.storage.path)
    return MemoryStore()
