"""Gzip decoder, header checked before any bytes are copied."""

from __future__ import annotations

import gzip
from typing import BinaryIO

from atomicfetch.decoders.base import BaseDecoder, check_header
from atomicfetch.detector import Codec
from atomicfetch.registry import register
from atomicfetch.utils.stream import ResponseStream

# ID1, ID2 and CM=8 (deflate), the only method gzip defines.
GZIP_MAGIC = b"\x1f\x8b\x08"
# magic (3) + FLG, MTIME, XFL, OS
GZIP_HEADER_SIZE = 10


@register(Codec.GZIP)
class GzipDecoder(BaseDecoder):
    def open(self, stream: ResponseStream) -> BinaryIO:
        check_header(stream, GZIP_MAGIC, "gzip", size=GZIP_HEADER_SIZE)
        return gzip.GzipFile(fileobj=stream, mode="rb")
