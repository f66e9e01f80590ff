"""XZ decoder with an eager stream header check."""

from __future__ import annotations

import lzma
import zlib
from typing import BinaryIO

from atomicfetch.decoders.base import BaseDecoder, check_header
from atomicfetch.detector import Codec
from atomicfetch.errors import DecompressionInitError
from atomicfetch.registry import register
from atomicfetch.utils.stream import ResponseStream

XZ_MAGIC = b"\xfd7zXZ\x00"
# magic (6) + stream flags (2) + CRC32 of the flags (4)
XZ_HEADER_SIZE = 12


@register(Codec.XZ)
class XzDecoder(BaseDecoder):
    def open(self, stream: ResponseStream) -> BinaryIO:
        header = check_header(stream, XZ_MAGIC, "xz", size=XZ_HEADER_SIZE)
        flags, crc = header[6:8], header[8:12]
        if zlib.crc32(flags) != int.from_bytes(crc, "little"):
            raise DecompressionInitError("xz stream header CRC mismatch")
        return lzma.LZMAFile(stream, mode="rb", format=lzma.FORMAT_XZ)
