"""
Durable key-value storage for client state.

Values are plain strings; callers decide how to encode them. Every mutation
is written through immediately so state survives a process restart.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class IKeyValueStore(Protocol):
    """Interface for string key-value stores."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under key, replacing any previous value."""
        ...

    def set_many(self, values: dict[str, str]) -> None:
        """Store several values in one write; none are stored if it fails."""
        ...

    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        ...


class MemoryStore:
    """
    Key-value store kept in process memory.

    For testing and ephemeral sessions. Use JsonFileStore to survive restarts.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def set_many(self, values: dict[str, str]) -> None:
        self._data.update(values)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """
    Key-value store persisted as a single JSON object on disk.

    The whole file is rewritten on each mutation through a temporary file
    and an atomic rename, so a crash never leaves a half-written file.
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created
                  on first write.
        """
        self._path = Path(path).expanduser()
        self._data = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable store file {self._path}: {e}")
            return {}
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring malformed store file {self._path}")
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._data, fh)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _commit(self, data: dict[str, str]) -> None:
        previous = self._data
        self._data = data
        try:
            self._flush()
        except OSError:
            self._data = previous
            raise

    def set(self, key: str, value: str) -> None:
        self._commit({**self._data, key: value})

    def set_many(self, values: dict[str, str]) -> None:
        self._commit({**self._data, **values})

    def delete(self, key: str) -> None:
        if key in self._data:
            self._commit({k: v for k, v in self._data.items() if k != key})
