"""Temporary file beside a destination, promoted into place atomically."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)


class AtomicFile:
    """Write target that only appears at ``destination`` once committed.

    The temporary file lives in the destination's own directory so the final
    ``os.replace`` never crosses a filesystem boundary. Leaving the ``with``
    block without :meth:`commit` removes the temporary file.
    """

    def __init__(self, destination: str | os.PathLike[str], dir_mode: int = 0o755) -> None:
        self.destination = os.fspath(destination)
        directory, self.basename = os.path.split(self.destination)
        # An empty directory would make mkstemp fall back to the system temp dir.
        self.directory = directory or os.curdir
        self.dir_mode = dir_mode
        self.path: Path | None = None
        self._file = None
        self._committed = False

    def prepare_directory(self) -> None:
        os.makedirs(self.directory, self.dir_mode, exist_ok=True)

    def open(self) -> Path:
        fd, name = tempfile.mkstemp(prefix=self.basename, dir=self.directory)
        self.path = Path(name)
        self._file = os.fdopen(fd, "wb")
        log.debug("Created temporary file %s", self.path)
        return self.path

    def write(self, data: bytes) -> int:
        return self._file.write(data)

    def close(self) -> None:
        """Flush and close, surfacing write errors deferred until close."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def commit(self) -> None:
        """Rename the closed temporary file over the destination."""
        os.replace(self.path, self.destination)
        self._committed = True

    def discard(self) -> None:
        if self._committed or self.path is None:
            return
        if self._file is not None and not self._file.closed:
            try:
                self._file.close()
            except OSError as e:
                log.debug("Ignoring close error on discarded %s: %s", self.path, e)
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            log.warning("Could not remove temporary file %s: %s", self.path, e)
        else:
            log.debug("Removed temporary file %s", self.path)

    def __enter__(self) -> AtomicFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.discard()
