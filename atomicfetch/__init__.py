"""atomicfetch — download a URL, decompress by suffix, write it atomically."""

from atomicfetch.detector import Codec, detect_codec
from atomicfetch.errors import (
    CopyError,
    DecompressionInitError,
    DirectoryCreationError,
    FetchError,
    FinalizeError,
    RenameError,
    RequestConstructionError,
    TempFileError,
    TransportError,
)
from atomicfetch.fetcher import Fetcher, fetch
from atomicfetch.models import FetchConfig, FetchResult

__version__ = "0.1.0"
__all__ = [
    "fetch",
    "Fetcher",
    "FetchConfig",
    "FetchResult",
    "Codec",
    "detect_codec",
    "FetchError",
    "DirectoryCreationError",
    "TempFileError",
    "RequestConstructionError",
    "TransportError",
    "DecompressionInitError",
    "CopyError",
    "FinalizeError",
    "RenameError",
]

# Register decoders on import
from atomicfetch.decoders import identity  # noqa: F401, E402
from atomicfetch.decoders import gzip_dec  # noqa: F401, E402
from atomicfetch.decoders import bzip2_dec  # noqa: F401, E402
from atomicfetch.decoders import xz_dec  # noqa: F401, E402
