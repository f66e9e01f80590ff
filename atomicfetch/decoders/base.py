"""Base decoder ABC."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from atomicfetch.errors import DecompressionInitError
from atomicfetch.utils.stream import ResponseStream


class BaseDecoder(ABC):
    @abstractmethod
    def open(self, stream: ResponseStream) -> BinaryIO:
        """Wrap a response stream in a reader yielding decoded bytes."""
        ...


def check_header(stream: ResponseStream, magic: bytes, name: str, size: int | None = None) -> bytes:
    """Validate the leading bytes of ``stream`` against ``magic``.

    Returns the first ``size`` bytes (default ``len(magic)``) so callers can
    inspect fields past the magic. Nothing is consumed.
    """
    size = size or len(magic)
    header = stream.peek_exact(size)
    if len(header) < size:
        raise DecompressionInitError(f"{name} stream too short for a header ({len(header)} bytes)")
    if header[: len(magic)] != magic:
        raise DecompressionInitError(f"invalid {name} header: {header[: len(magic)].hex()}")
    return header
