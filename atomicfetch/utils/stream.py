"""File-like view over a streamed requests response body."""

from __future__ import annotations

import io

import requests


class ResponseStream(io.RawIOBase):
    """Read a response body lazily through ``iter_content``.

    Going through ``iter_content`` keeps requests' own Content-Encoding
    handling and its mapping of urllib3 errors onto ``requests`` exceptions.
    """

    def __init__(self, response: requests.Response, chunk_size: int = 64 * 1024) -> None:
        self._chunks = response.iter_content(chunk_size=chunk_size)
        self._pending = b""
        self._offset = 0
        self._exhausted = False

    def readable(self) -> bool:
        return True

    def _available(self) -> int:
        return len(self._pending) - self._offset

    def _fill(self, size: int) -> None:
        while self._available() < size and not self._exhausted:
            try:
                chunk = next(self._chunks)
            except StopIteration:
                self._exhausted = True
                break
            if chunk:
                # Only a peek spanning chunks joins a leftover tail to the next chunk.
                self._pending = self._pending[self._offset :] + chunk if self._available() else chunk
                self._offset = 0

    def peek_exact(self, size: int) -> bytes:
        """Return up to ``size`` leading bytes without consuming them.

        Fewer than ``size`` bytes come back only when the body ends first.
        """
        self._fill(size)
        return self._pending[self._offset : self._offset + size]

    def readinto(self, buffer) -> int:
        if not self._available():
            self._fill(1)
        n = min(len(buffer), self._available())
        buffer[:n] = memoryview(self._pending)[self._offset : self._offset + n]
        self._offset += n
        return n
