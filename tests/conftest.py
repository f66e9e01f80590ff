"""Shared test fixtures — an offline requests session and payload helpers."""

from __future__ import annotations

import bz2
import gzip
import io
import logging
import lzma
from pathlib import Path

import pytest
import requests

PAYLOAD = b"hello world\n" * 1000


class FakeSession(requests.Session):
    """Session whose ``send`` serves canned responses instead of the network."""

    def __init__(self) -> None:
        super().__init__()
        self.trust_env = False
        self.routes: dict[str, object] = {}
        self.sent: list[tuple[requests.PreparedRequest, dict]] = []

    def add(self, url: str, body: bytes = b"", status: int = 200, raw: io.RawIOBase | None = None) -> None:
        self.routes[url] = (status, raw if raw is not None else io.BytesIO(body))

    def fail(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def send(self, request, **kwargs):
        self.sent.append((request, kwargs))
        route = self.routes[request.url]
        if isinstance(route, Exception):
            raise route
        status, raw = route
        response = requests.Response()
        response.status_code = status
        response.raw = raw
        response.url = request.url
        response.request = request
        return response


class BrokenStream(io.RawIOBase):
    """Body that delivers ``data`` and then fails like a dropped connection."""

    def __init__(self, data: bytes) -> None:
        self._data = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        chunk = self._data.read(len(buffer))
        if not chunk:
            raise ConnectionResetError("connection reset by peer")
        buffer[: len(chunk)] = chunk
        return len(chunk)


def compress(codec: str, data: bytes) -> bytes:
    if codec == "gz":
        return gzip.compress(data)
    if codec == "bz2":
        return bz2.compress(data)
    if codec == "xz":
        return lzma.compress(data, format=lzma.FORMAT_XZ)
    return data


def listing(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers the CLI installs so caplog keeps seeing records."""
    logger = logging.getLogger("atomicfetch")
    state = (logger.level, logger.propagate, list(logger.handlers))
    yield
    logger.setLevel(state[0])
    logger.propagate = state[1]
    logger.handlers[:] = state[2]
