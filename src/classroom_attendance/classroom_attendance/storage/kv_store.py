from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Durable string key-value medium (the browser's localStorage in the web build)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class JsonFileKeyValueStore:
    """One UTF-8 file per key under `root`.

    Writes go to a temp file in the same folder and are swapped in with
    `os.replace`, so a reader never sees a half-written value.
    """

    SUFFIX = ".store"

    def __init__(self, root: str | os.PathLike):
        self._root = Path(root)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._root / f"{key}{self.SUFFIX}"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self._root.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", dir=self._root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
