"""Compression codec detection from the trailing suffix of a URL path."""

from __future__ import annotations

from enum import Enum
from urllib.parse import unquote, urlsplit


class Codec(str, Enum):
    IDENTITY = "identity"
    GZIP = "gzip"
    BZIP2 = "bzip2"
    XZ = "xz"


# Checked in order. Plain trailing-substring match, so "archive.zgz" is gzip
# and "file.tgz" is gzip too; there is no extension parsing.
_SUFFIXES: tuple[tuple[str, Codec], ...] = (
    ("gz", Codec.GZIP),
    ("bz2", Codec.BZIP2),
    ("xz", Codec.XZ),
)


def detect_codec(url_path: str) -> Codec:
    """Pick the codec for a decoded URL path. Case-sensitive."""
    for suffix, codec in _SUFFIXES:
        if url_path.endswith(suffix):
            return codec
    return Codec.IDENTITY


def detect_codec_for_url(url: str) -> Codec:
    """Pick the codec for a full URL.

    Only the percent-decoded path is inspected, so ``/data.g%7A`` is gzip
    and a ``.gz`` in the query string is ignored.
    """
    return detect_codec(unquote(urlsplit(url).path))
