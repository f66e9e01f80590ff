"""Fetch error hierarchy, one class per pipeline stage."""

from __future__ import annotations

import os


class FetchError(Exception):
    """Base class for every failure raised by a fetch."""

    stage = "fetch"

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        destination: str | os.PathLike[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.destination = os.fspath(destination) if destination is not None else None

    def __str__(self) -> str:
        parts = [f"[{self.stage}] {self.message}"]
        if self.url:
            parts.append(f"url={self.url}")
        if self.destination:
            parts.append(f"destination={self.destination}")
        return " ".join(parts)


class DirectoryCreationError(FetchError):
    stage = "mkdir"


class TempFileError(FetchError):
    stage = "tempfile"


class RequestConstructionError(FetchError):
    stage = "request"


class TransportError(FetchError):
    stage = "transport"


class DecompressionInitError(FetchError):
    stage = "decoder"


class CopyError(FetchError):
    stage = "copy"


class FinalizeError(FetchError):
    stage = "finalize"


class RenameError(FetchError):
    stage = "rename"
