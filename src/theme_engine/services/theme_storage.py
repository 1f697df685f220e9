"""Key/value persistence for user themes and background overrides.

The store only needs three string operations, so any backend exposing
`get_item` / `set_item` / `remove_item` works. Two are provided:

 - `MemoryStorage`: dictionary backed (tests, ephemeral sessions)
 - `JsonFileStorage`: one ``<key>.json`` file per key in a directory, written
   via a temporary file and atomic replace so a crash mid-write never leaves a
   truncated document behind
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Protocol, runtime_checkable

__all__ = ["ThemeStorage", "MemoryStorage", "JsonFileStorage", "StorageError"]

_logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class StorageError(RuntimeError):
    """Raised when a storage backend cannot persist a value."""


@runtime_checkable
class ThemeStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...  # pragma: no cover

    def set_item(self, key: str, value: str) -> None: ...  # pragma: no cover

    def remove_item(self, key: str) -> None: ...  # pragma: no cover


class MemoryStorage:
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class JsonFileStorage:
    """Directory of ``<sanitized key>.json`` files."""

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def path_for(self, key: str) -> Path:
        safe = _UNSAFE_KEY_CHARS.sub("_", key) or "_"
        return self._dir / f"{safe}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            _logger.warning("could not read %s: %s", path, exc)
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(path.suffix + ".tmp")
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise StorageError(f"could not write {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise StorageError(f"could not remove {path}: {exc}") from exc
