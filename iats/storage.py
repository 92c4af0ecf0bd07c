"""Namespaced key/blob storage persisted to a JSON file on commit."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .errors import HalError


class Storage:
    """Blobs under the namespace ``name``; changes reach ``path`` on :meth:`commit`.

    Without a path the storage lives in memory only.
    """

    def __init__(self, name: str, path: str | os.PathLike[str] | None = None) -> None:
        self.name = name
        self.path = Path(path) if path is not None else None
        self._blobs: dict[str, bytes] = dict(self._load().get(name, {}))

    def _load(self) -> dict[str, dict[str, bytes]]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return {
                ns: {key: bytes.fromhex(value) for key, value in blobs.items()}
                for ns, blobs in raw.items()
            }
        except (OSError, ValueError, AttributeError) as exc:
            raise HalError(f"cannot read storage file {self.path}: {exc}") from exc

    def get_blob(self, key: str) -> bytes | None:
        """The blob stored under ``key``, or None if there is none."""
        return self._blobs.get(key)

    def set_blob(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``; empty data erases the key."""
        data = bytes(data)
        if data:
            self._blobs[key] = data
        else:
            self._blobs.pop(key, None)

    def commit(self) -> None:
        """Write this namespace to disk, keeping the other namespaces in the file."""
        if self.path is None:
            return
        everything = self._load()
        everything[self.name] = dict(self._blobs)
        encoded = {
            ns: {key: value.hex() for key, value in blobs.items()}
            for ns, blobs in everything.items()
        }
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(encoded, sort_keys=True), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise HalError(f"cannot write storage file {self.path}: {exc}") from exc