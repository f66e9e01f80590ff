"""Bzip2 decoder. The stream header is only validated on first read."""

from __future__ import annotations

import bz2
from typing import BinaryIO

from atomicfetch.decoders.base import BaseDecoder
from atomicfetch.detector import Codec
from atomicfetch.registry import register
from atomicfetch.utils.stream import ResponseStream


@register(Codec.BZIP2)
class Bzip2Decoder(BaseDecoder):
    def open(self, stream: ResponseStream) -> BinaryIO:
        return bz2.BZ2File(stream, mode="rb")
