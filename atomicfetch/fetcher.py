"""Fetch a URL, decode it by suffix, and write it atomically to disk."""

from __future__ import annotations

import logging
import lzma
import os
import time

import requests

from atomicfetch.detector import detect_codec_for_url
from atomicfetch.errors import (
    CopyError,
    DecompressionInitError,
    DirectoryCreationError,
    FinalizeError,
    RenameError,
    RequestConstructionError,
    TempFileError,
    TransportError,
)
from atomicfetch.models import FetchConfig, FetchResult
from atomicfetch.registry import get_decoder
from atomicfetch.utils.atomic import AtomicFile
from atomicfetch.utils.stream import ResponseStream

log = logging.getLogger(__name__)

# Everything a decoder or the network can raise while bytes are flowing.
_READ_ERRORS = (OSError, EOFError, lzma.LZMAError, requests.RequestException)


class Fetcher:
    """Download resources through a shared ``requests.Session``.

    The session is only read from, so one ``Fetcher`` can serve concurrent
    calls as long as each call targets its own destination.
    """

    def __init__(self, client: requests.Session, config: FetchConfig | None = None) -> None:
        self.client = client
        self.config = config or FetchConfig()

    def fetch(self, url: str, destination: str | os.PathLike[str]) -> FetchResult:
        """Fetch ``url`` into ``destination``.

        Bodies whose URL path ends in ``gz``, ``bz2`` or ``xz`` are
        decompressed on the way. The destination is replaced only once the
        whole body has been written; on any error it is left as it was and
        the temporary file is removed.

        The HTTP status is not checked: an error page is written like any
        other body. It is reported in ``FetchResult.status_code``.

        Raises:
            FetchError: a subclass naming the stage that failed.
        """
        start_time = time.monotonic()
        sink = AtomicFile(destination, dir_mode=self.config.dir_mode)

        try:
            sink.prepare_directory()
        except OSError as e:
            raise DirectoryCreationError(
                f"cannot create directory {sink.directory!r}: {e}", url=url, destination=destination
            ) from e

        try:
            sink.open()
        except OSError as e:
            raise TempFileError(
                f"cannot create temporary file in {sink.directory!r}: {e}",
                url=url,
                destination=destination,
            ) from e

        with sink:
            prepared = self._prepare(url, destination)
            with self._send(prepared, url, destination) as response:
                if response.status_code >= 400:
                    log.warning("GET %s returned HTTP %d, writing body anyway", url, response.status_code)

                codec = detect_codec_for_url(url)
                log.debug("Decoding %s as %s", url, codec.value)
                stream = ResponseStream(response, chunk_size=self.config.chunk_size)
                try:
                    reader = get_decoder(codec).open(stream)
                except DecompressionInitError as e:
                    e.url, e.destination = url, os.fspath(destination)
                    raise
                except _READ_ERRORS as e:
                    raise DecompressionInitError(
                        f"cannot read {codec.value} header: {e}", url=url, destination=destination
                    ) from e

                with reader:
                    bytes_written = self._copy(reader, sink, url, destination)

            try:
                sink.close()
            except OSError as e:
                raise FinalizeError(
                    f"write and close temporary file: {e}", url=url, destination=destination
                ) from e

            try:
                sink.commit()
            except OSError as e:
                raise RenameError(
                    f"cannot move {sink.path} into place: {e}", url=url, destination=destination
                ) from e

        result = FetchResult(
            url=url,
            destination=sink.destination,
            codec=codec,
            status_code=response.status_code,
            bytes_written=bytes_written,
            elapsed_seconds=round(time.monotonic() - start_time, 3),
        )
        log.info("Fetched %s -> %s (%d bytes, %s)", url, sink.destination, bytes_written, codec.value)
        return result

    def _prepare(self, url: str, destination: str | os.PathLike[str]) -> requests.PreparedRequest:
        try:
            return self.client.prepare_request(requests.Request("GET", url))
        except (requests.RequestException, ValueError) as e:
            raise RequestConstructionError(
                f"invalid URL {url!r}: {e}", url=url, destination=destination
            ) from e

    def _send(
        self,
        prepared: requests.PreparedRequest,
        url: str,
        destination: str | os.PathLike[str],
    ) -> requests.Response:
        # Session.send skips the proxy/CA environment lookup Session.request does.
        settings = self.client.merge_environment_settings(prepared.url, {}, True, None, None)
        try:
            return self.client.send(prepared, timeout=self.config.timeout, **settings)
        except requests.RequestException as e:
            raise TransportError(f"GET failed: {e}", url=url, destination=destination) from e

    def _copy(self, reader, sink: AtomicFile, url: str, destination: str | os.PathLike[str]) -> int:
        total = 0
        try:
            while True:
                block = reader.read(self.config.chunk_size)
                if not block:
                    break
                sink.write(block)
                total += len(block)
        except _READ_ERRORS as e:
            raise CopyError(
                f"copy failed after {total} bytes: {e}", url=url, destination=destination
            ) from e
        return total


def fetch(
    client: requests.Session,
    url: str,
    destination: str | os.PathLike[str],
    *,
    config: FetchConfig | None = None,
) -> FetchResult:
    """Fetch ``url`` into ``destination`` with a one-off :class:`Fetcher`.

    Args:
        client: Session used for the GET. Timeouts, auth, TLS and redirect
            policy all come from the caller.
        url: Resource to download. A ``gz``/``bz2``/``xz`` path suffix
            selects decompression.
        destination: File to create or replace. Missing parent directories
            are created.
        config: Optional tunables (chunk size, directory mode, timeout).

    Returns:
        FetchResult describing the written file.
    """
    return Fetcher(client, config).fetch(url, destination)
