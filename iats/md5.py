"""Incremental MD5 digests."""

from __future__ import annotations

import hashlib

HAL_MD5_OUTPUT_SIZE = 16


class Md5:
    """MD5 context fed with :meth:`update` and finished with :meth:`digest`."""

    def __init__(self) -> None:
        self._ctx = hashlib.md5()

    def update(self, data: bytes) -> None:
        self._ctx.update(data)

    def digest(self) -> bytes:
        return self._ctx.digest()