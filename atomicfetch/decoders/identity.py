"""Pass-through decoder for bodies without a compression suffix."""

from __future__ import annotations

from typing import BinaryIO

from atomicfetch.decoders.base import BaseDecoder
from atomicfetch.detector import Codec
from atomicfetch.registry import register
from atomicfetch.utils.stream import ResponseStream


@register(Codec.IDENTITY)
class IdentityDecoder(BaseDecoder):
    def open(self, stream: ResponseStream) -> BinaryIO:
        return stream  # type: ignore[return-value]
